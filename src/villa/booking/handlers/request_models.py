from datetime import date
from decimal import Decimal

from pydantic import EmailStr, Field, ValidationInfo, field_validator

from villa.booking.domain.enum import BookingStatus
from villa.booking.domain.factory import BookingDetails
from villa.booking.domain.value_object import GuestCount
from villa.shared.utils import ApiModel, to_decimal


class CreateBookingRequest(ApiModel):
    """予約作成リクエストモデル"""

    checkin_date: date = Field(
        ...,
        description="チェックイン日（YYYY-MM-DD形式）",
        examples=["2025-07-01"],
    )
    checkout_date: date = Field(
        ...,
        description="チェックアウト日（YYYY-MM-DD形式）",
        examples=["2025-07-04"],
    )
    guests: int = Field(..., ge=GuestCount.MIN, le=GuestCount.MAX)
    guest_name: str = Field(..., min_length=1, max_length=200)
    guest_email: EmailStr
    guest_phone: str | None = Field(default=None, max_length=50)
    total_amount: Decimal | None = Field(
        default=None,
        ge=0,
        max_digits=10,
        decimal_places=2,
        description="合計金額（整数部8桁・小数部2桁まで。未指定ならサーバ側で計算）",
    )
    status: BookingStatus = BookingStatus.PENDING

    @field_validator("total_amount", mode="before")
    @classmethod
    def convert_total_to_decimal(cls, v: object) -> Decimal | None:
        if v is None:
            return None
        return to_decimal(v)

    @field_validator("guest_phone")
    @classmethod
    def blank_phone_to_none(cls, v: str | None) -> str | None:
        return v or None

    @field_validator("checkout_date")
    @classmethod
    def checkout_after_checkin(cls, v: date, info: ValidationInfo) -> date:
        checkin = info.data.get("checkin_date")
        if checkin is not None and v <= checkin:
            raise ValueError("Check-out date must be after check-in date")
        return v

    def to_details(self) -> BookingDetails:
        return {
            "checkin_date": self.checkin_date,
            "checkout_date": self.checkout_date,
            "guests": self.guests,
            "guest_name": self.guest_name,
            "guest_email": str(self.guest_email),
            "guest_phone": self.guest_phone,
            "total_amount": self.total_amount,
            "status": self.status,
        }


class UpdateBookingStatusRequest(ApiModel):
    """予約ステータス更新リクエストモデル"""

    status: BookingStatus


class QuoteRequest(ApiModel):
    """料金見積もりリクエストモデル（クエリ文字列）

    日付が不正でもエラーにはせず、0 円の見積もりを返す。
    """

    checkin: str | None = None
    checkout: str | None = None
    guests: int = Field(default=1, ge=GuestCount.MIN, le=GuestCount.MAX)
