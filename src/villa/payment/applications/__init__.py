from .process_payment import PaymentResult, ProcessPaymentService

__all__ = ["PaymentResult", "ProcessPaymentService"]
