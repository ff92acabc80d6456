from .entity import Payment
from .enum import PaymentStatus
from .factory import PaymentFactory
from .value_object import (
    CardExpiry,
    CardNumber,
    PaymentId,
    format_card_number,
    format_expiry,
)

__all__ = [
    "CardExpiry",
    "CardNumber",
    "Payment",
    "PaymentFactory",
    "PaymentId",
    "PaymentStatus",
    "format_card_number",
    "format_expiry",
]
