import pytest
from pydantic import ValidationError

from villa.booking.domain.enum import BookingStatus
from villa.booking.handlers.request_models import (
    CreateBookingRequest,
    QuoteRequest,
    UpdateBookingStatusRequest,
)
from villa.shared.utils import format_validation_errors


@pytest.fixture
def payload():
    def _factory(**overrides) -> dict:
        data = {
            "checkinDate": "2025-07-01",
            "checkoutDate": "2025-07-04",
            "guests": 2,
            "guestName": "Jane Doe",
            "guestEmail": "jane@luxestay.com",
        }
        data.update(overrides)
        return data

    return _factory


def _error_fields(error: ValidationError) -> set[str]:
    return {e["field"] for e in format_validation_errors(error)}


class TestCreateBookingRequest:
    def test_valid_payload(self, payload):
        request = CreateBookingRequest.model_validate(payload(totalAmount="2907.00"))
        details = request.to_details()

        assert details["guests"] == 2
        assert str(details["total_amount"]) == "2907.00"
        assert details["status"] == BookingStatus.PENDING
        assert details["guest_phone"] is None

    @pytest.mark.parametrize("guests", [0, 11])
    def test_guests_out_of_range(self, payload, guests):
        with pytest.raises(ValidationError) as exc_info:
            CreateBookingRequest.model_validate(payload(guests=guests))

        assert _error_fields(exc_info.value) == {"guests"}

    def test_email_without_at_sign(self, payload):
        with pytest.raises(ValidationError) as exc_info:
            CreateBookingRequest.model_validate(payload(guestEmail="jane.luxestay.com"))

        assert _error_fields(exc_info.value) == {"guestEmail"}

    def test_checkout_before_checkin(self, payload):
        with pytest.raises(ValidationError) as exc_info:
            CreateBookingRequest.model_validate(payload(checkoutDate="2025-06-30"))

        assert "Check-out date must be after check-in date" in str(exc_info.value)

    def test_negative_total(self, payload):
        with pytest.raises(ValidationError):
            CreateBookingRequest.model_validate(payload(totalAmount="-1"))

    @pytest.mark.parametrize(
        "total", ["99999999999999999999999999999", "123456789.00", "969.005"]
    )
    def test_total_beyond_ten_digits_or_two_places(self, payload, total):
        with pytest.raises(ValidationError) as exc_info:
            CreateBookingRequest.model_validate(payload(totalAmount=total))

        assert _error_fields(exc_info.value) == {"totalAmount"}

    def test_largest_total_is_accepted(self, payload):
        request = CreateBookingRequest.model_validate(
            payload(totalAmount="99999999.99")
        )

        assert str(request.total_amount) == "99999999.99"

    def test_every_missing_field_is_reported(self):
        with pytest.raises(ValidationError) as exc_info:
            CreateBookingRequest.model_validate({})

        assert _error_fields(exc_info.value) == {
            "checkinDate",
            "checkoutDate",
            "guests",
            "guestName",
            "guestEmail",
        }


class TestUpdateBookingStatusRequest:
    def test_unknown_status_is_rejected(self):
        with pytest.raises(ValidationError):
            UpdateBookingStatusRequest.model_validate({"status": "cancelled"})

    def test_status_is_required(self):
        with pytest.raises(ValidationError):
            UpdateBookingStatusRequest.model_validate({})


def test_quote_request_defaults_to_one_guest():
    request = QuoteRequest.model_validate({"checkin": "2025-07-01"})

    assert request.guests == 1
    assert request.checkout is None
