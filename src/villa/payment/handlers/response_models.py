from villa.booking.handlers.response_models import to_response as booking_to_response
from villa.payment.applications import PaymentResult
from villa.shared.utils import ApiModel


class PaymentResultData(ApiModel):
    """決済結果のレスポンスモデル"""

    success: bool
    booking: dict
    payment_id: str
    message: str


def to_response(result: PaymentResult) -> dict:
    return PaymentResultData(
        success=True,
        booking=booking_to_response(result.booking),
        payment_id=str(result.payment.id),
        message="Payment processed successfully",
    ).to_json_dict()
