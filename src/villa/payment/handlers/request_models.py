from datetime import date

from pydantic import Field, field_validator

from villa.booking.handlers.request_models import CreateBookingRequest
from villa.payment.domain.value_object import (
    CardExpiry,
    CardNumber,
    format_card_number,
    format_expiry,
)
from villa.shared.utils import ApiModel


class BillingAddress(ApiModel):
    """請求先住所"""

    address: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    state: str = Field(..., min_length=1)
    zip_code: str = Field(..., min_length=1)
    country: str = "United States"


class PaymentData(ApiModel):
    """カード情報

    カード番号は 4 桁区切り、有効期限は MM/YY に整形して保持する。
    """

    card_number: str = Field(..., examples=["4242 4242 4242 4242"])
    expiry_date: str = Field(..., examples=["12/28", "1228"])
    cvv: str = Field(..., pattern=r"^\d{3,4}$")
    card_holder: str = Field(..., min_length=1, max_length=200)
    billing_address: BillingAddress

    @field_validator("card_number")
    @classmethod
    def validate_card_number(cls, v: str) -> str:
        return format_card_number(CardNumber(v).digits)

    @field_validator("expiry_date")
    @classmethod
    def validate_expiry_date(cls, v: str) -> str:
        # 区切りの有無は問わないが、数字はちょうど 4 桁（MMYY）
        if sum(ch.isdigit() for ch in v) != 4:
            raise ValueError("Expiry date must be in MM/YY format")
        expiry = CardExpiry.parse(format_expiry(v))
        if expiry.is_expired(date.today()):
            raise ValueError("Card has expired")
        return str(expiry)

    def to_card_number(self) -> CardNumber:
        return CardNumber(self.card_number)


class ProcessPaymentRequest(ApiModel):
    """決済リクエストモデル"""

    payment_data: PaymentData
    booking_data: CreateBookingRequest
