from __future__ import annotations

from datetime import date, datetime

from villa.booking.domain.entity import Booking
from villa.booking.domain.service import PriceBreakdown
from villa.shared.utils import ApiModel


class BookingData(ApiModel):
    """予約データのレスポンスモデル"""

    id: str
    checkin_date: date
    checkout_date: date
    guests: int
    guest_name: str
    guest_email: str
    guest_phone: str | None
    total_amount: str
    status: str
    created_at: datetime


class PriceBreakdownData(ApiModel):
    """料金内訳のレスポンスモデル"""

    nights: int
    nightly_rate: str
    subtotal: str
    service_fee: str
    taxes: str
    total: str
    currency: str


def to_response(booking: Booking) -> dict:
    """Booking エンティティをレスポンス辞書に変換する"""
    return BookingData(
        id=str(booking.id),
        checkin_date=booking.stay_period.check_in,
        checkout_date=booking.stay_period.check_out,
        guests=booking.guests.value,
        guest_name=booking.guest.name,
        guest_email=booking.guest.email,
        guest_phone=booking.guest.phone,
        total_amount=booking.total_amount.to_decimal_string(),
        status=booking.status.value,
        created_at=booking.created_at,
    ).to_json_dict()


def to_quote_response(breakdown: PriceBreakdown) -> dict:
    """PriceBreakdown をレスポンス辞書に変換する"""
    return PriceBreakdownData(
        nights=breakdown.nights,
        nightly_rate=breakdown.nightly_rate.to_decimal_string(),
        subtotal=breakdown.subtotal.to_decimal_string(),
        service_fee=breakdown.service_fee.to_decimal_string(),
        taxes=breakdown.taxes.to_decimal_string(),
        total=breakdown.total.to_decimal_string(),
        currency=str(breakdown.total.currency),
    ).to_json_dict()
