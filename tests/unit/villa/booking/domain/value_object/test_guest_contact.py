import pytest

from villa.booking.domain.value_object import GuestContact


class TestGuestContact:
    def test_blank_phone_becomes_none(self):
        contact = GuestContact(name="Jane Doe", email="jane@luxestay.com", phone="  ")

        assert contact.phone is None

    def test_name_is_required(self):
        with pytest.raises(ValueError, match="Guest name is required"):
            GuestContact(name=" ", email="jane@luxestay.com")

    def test_email_without_at_sign_raises_error(self):
        with pytest.raises(ValueError, match="Valid email is required"):
            GuestContact(name="Jane Doe", email="jane.luxestay.com")
