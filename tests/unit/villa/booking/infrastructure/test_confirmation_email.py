from datetime import date

from villa.booking.infrastructure.confirmation_email import (
    format_long_date,
    render_confirmation_email,
)


def test_format_long_date():
    assert format_long_date(date(2025, 7, 1)) == "Tuesday, July 1, 2025"


class TestRenderConfirmationEmail:
    def test_subject_uses_last_eight_characters_of_id(self, create_booking):
        message = render_confirmation_email(create_booking())

        assert message.subject == (
            "Booking Confirmed - LuxeStay Villa Reservation #0000abcd"
        )

    def test_body_contains_booking_details(self, create_booking):
        message = render_confirmation_email(create_booking(guests=1))

        assert "Dear Jane Doe," in message.text
        assert "Check-in: Tuesday, July 1, 2025" in message.text
        assert "Check-out: Friday, July 4, 2025" in message.text
        assert "Duration: 3 nights" in message.text
        assert "Guests: 1 guest" in message.text
        assert "Total Amount: $2907.00" in message.text
        assert "$2907.00" in message.html

    def test_single_night_is_not_pluralised(self, create_booking):
        booking = create_booking(check_in=date(2025, 7, 1), check_out=date(2025, 7, 2))

        assert "Duration: 1 night\n" in render_confirmation_email(booking).text
