from .payment_factory import PaymentFactory

__all__ = ["PaymentFactory"]
