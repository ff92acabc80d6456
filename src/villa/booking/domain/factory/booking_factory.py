from datetime import date, datetime
from decimal import Decimal
from typing import NotRequired, TypedDict

from villa.booking.domain.entity import Booking
from villa.booking.domain.enum import BookingStatus
from villa.booking.domain.value_object import (
    BookingId,
    GuestContact,
    GuestCount,
    StayPeriod,
)
from villa.shared.domain import Money


class BookingDetails(TypedDict):
    """予約の入力データ"""

    checkin_date: date
    checkout_date: date
    guests: int
    guest_name: str
    guest_email: str
    guest_phone: NotRequired[str | None]
    total_amount: NotRequired[Decimal | None]
    status: NotRequired[BookingStatus]


class BookingChanges(TypedDict, total=False):
    """予約の部分更新データ（指定された項目だけを上書きする）"""

    checkin_date: date
    checkout_date: date
    guests: int
    guest_name: str
    guest_email: str
    guest_phone: str | None
    total_amount: Decimal
    status: BookingStatus


class BookingFactory:
    """予約エンティティを生成するFactory"""

    def create(
        self, booking_id: BookingId, details: BookingDetails, created_at: datetime
    ) -> Booking:
        """入力データから予約エンティティを組み立てる"""

        total_amount = details.get("total_amount")
        if total_amount is None:
            raise ValueError("Total amount is required")

        return Booking(
            id=booking_id,
            stay_period=StayPeriod(
                check_in=details["checkin_date"],
                check_out=details["checkout_date"],
            ),
            guests=GuestCount(details["guests"]),
            guest=GuestContact(
                name=details["guest_name"],
                email=details["guest_email"],
                phone=details.get("guest_phone"),
            ),
            total_amount=Money.usd(total_amount),
            created_at=created_at,
            status=BookingStatus(details.get("status", BookingStatus.PENDING)),
        )

    def to_details(self, booking: Booking) -> BookingDetails:
        """予約エンティティを入力データ形式に戻す"""

        return {
            "checkin_date": booking.stay_period.check_in,
            "checkout_date": booking.stay_period.check_out,
            "guests": booking.guests.value,
            "guest_name": booking.guest.name,
            "guest_email": booking.guest.email,
            "guest_phone": booking.guest.phone,
            "total_amount": booking.total_amount.amount,
            "status": booking.status,
        }
