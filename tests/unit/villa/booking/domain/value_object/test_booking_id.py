import pytest

from villa.booking.domain.value_object import BookingId


def test_generate_returns_unique_ids():
    assert BookingId.generate() != BookingId.generate()


def test_empty_booking_id_raises_error():
    with pytest.raises(ValueError, match="BookingId cannot be empty"):
        BookingId(value="")
