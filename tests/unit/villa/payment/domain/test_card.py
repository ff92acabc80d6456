from datetime import date

import pytest

from villa.payment.domain.value_object import (
    CardExpiry,
    CardNumber,
    format_card_number,
    format_expiry,
)


class TestFormatCardNumber:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("4242424242424242", "4242 4242 4242 4242"),
            ("4242-4242-4242-4242", "4242 4242 4242 4242"),
            ("42424", "4242 4"),
            ("", ""),
        ],
    )
    def test_groups_digits_in_fours(self, value: str, expected: str):
        assert format_card_number(value) == expected


class TestFormatExpiry:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [("1228", "12/28"), ("12/28", "12/28"), ("12", "12/"), ("1", "1")],
    )
    def test_formats_month_and_year(self, value: str, expected: str):
        assert format_expiry(value) == expected


class TestCardNumber:
    def test_spaces_are_removed(self):
        card = CardNumber("4242 4242 4242 4242")

        assert card.digits == "4242424242424242"
        assert card.last4 == "4242"

    @pytest.mark.parametrize("value", ["424242424242", "42424242424242424242"])
    def test_length_outside_13_to_19_digits_is_rejected(self, value: str):
        with pytest.raises(ValueError, match="Card number must be 13-19 digits"):
            CardNumber(value)


class TestCardExpiry:
    def test_parse(self):
        assert CardExpiry.parse("07/27") == CardExpiry(month=7, year=2027)

    @pytest.mark.parametrize("value", ["0727", "7/27", "07-27"])
    def test_invalid_format_is_rejected(self, value: str):
        with pytest.raises(ValueError, match="MM/YY"):
            CardExpiry.parse(value)

    def test_invalid_month_is_rejected(self):
        with pytest.raises(ValueError, match="between 01 and 12"):
            CardExpiry.parse("13/27")

    def test_card_is_valid_until_end_of_expiry_month(self):
        expiry = CardExpiry(month=7, year=2025)

        assert expiry.is_expired(date(2025, 7, 31)) is False
        assert expiry.is_expired(date(2025, 8, 1)) is True
