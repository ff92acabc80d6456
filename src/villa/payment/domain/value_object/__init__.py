from .card import CardExpiry, CardNumber, format_card_number, format_expiry
from .payment_id import PaymentId

__all__ = [
    "CardExpiry",
    "CardNumber",
    "PaymentId",
    "format_card_number",
    "format_expiry",
]
