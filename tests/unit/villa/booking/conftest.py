from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from villa.booking.domain.entity import Booking
from villa.booking.domain.enum import BookingStatus
from villa.booking.domain.factory import BookingDetails
from villa.booking.domain.notifier import BookingNotifier
from villa.booking.domain.value_object import (
    BookingId,
    GuestContact,
    GuestCount,
    StayPeriod,
)
from villa.shared.domain import Money


@pytest.fixture
def booking_details():
    """BookingDetails を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(**overrides) -> BookingDetails:
        details: BookingDetails = {
            "checkin_date": date(2025, 7, 1),
            "checkout_date": date(2025, 7, 4),
            "guests": 2,
            "guest_name": "Jane Doe",
            "guest_email": "jane@luxestay.com",
            "guest_phone": "+1 555 0100",
            "total_amount": Decimal("2907"),
            "status": BookingStatus.PENDING,
        }
        details.update(overrides)  # type: ignore[typeddict-item]
        return details

    return _factory


@pytest.fixture
def create_booking():
    """Booking を生成する Factory fixture"""

    def _factory(
        booking_id: str = "3f2b8c1e-0000-4000-8000-00000000abcd",
        status: BookingStatus = BookingStatus.PENDING,
        check_in: date = date(2025, 7, 1),
        check_out: date = date(2025, 7, 4),
        guests: int = 2,
        total_amount: str = "2907",
    ) -> Booking:
        return Booking(
            id=BookingId(value=booking_id),
            stay_period=StayPeriod(check_in=check_in, check_out=check_out),
            guests=GuestCount(guests),
            guest=GuestContact(name="Jane Doe", email="jane@luxestay.com"),
            total_amount=Money.usd(total_amount),
            created_at=datetime(2025, 6, 1, 9, 0, tzinfo=timezone.utc),
            status=status,
        )

    return _factory


@pytest.fixture
def ticking_clock():
    """呼ばれるたびに1秒ずつ進む時計"""

    def _factory(start: datetime = datetime(2025, 6, 1, tzinfo=timezone.utc)):
        calls = {"count": 0}

        def _now() -> datetime:
            now = start + timedelta(seconds=calls["count"])
            calls["count"] += 1
            return now

        return _now

    return _factory


@pytest.fixture
def mock_notifier():
    notifier = MagicMock(spec=BookingNotifier)
    notifier.notify.return_value = True
    return notifier
