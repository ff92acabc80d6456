from decimal import Decimal

import pytest
from pydantic import Field, ValidationError

from villa.shared.utils import (
    ApiModel,
    format_validation_errors,
    parse_json_body,
    to_decimal,
)


class SampleRequest(ApiModel):
    guest_name: str = Field(..., min_length=1)
    guests: int = Field(..., ge=1, le=10)


class TestToDecimal:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(Decimal("1.5"), Decimal("1.5")), (969, Decimal("969")), (" 12.50 ", Decimal("12.50"))],
    )
    def test_converts_to_decimal(self, value, expected):
        assert to_decimal(value) == expected

    @pytest.mark.parametrize("value", [None, True, "abc"])
    def test_invalid_value_raises_error(self, value):
        with pytest.raises(ValueError, match="must be a decimal number"):
            to_decimal(value)


class TestParseJsonBody:
    def test_parses_camel_case_keys(self):
        request = parse_json_body(SampleRequest, '{"guestName": "Jane", "guests": 2}')

        assert request.guest_name == "Jane"
        assert request.guests == 2

    def test_empty_body_reports_every_missing_field(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_json_body(SampleRequest, None)

        fields = {e["field"] for e in format_validation_errors(exc_info.value)}
        assert fields == {"guestName", "guests"}

    def test_malformed_json_is_reported_against_body(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_json_body(SampleRequest, "{not json")

        errors = format_validation_errors(exc_info.value)
        assert errors[0]["field"] == "body"


class TestApiModel:
    def test_to_json_dict_uses_camel_case(self):
        request = SampleRequest(guest_name="  Jane  ", guests=1)

        assert request.to_json_dict() == {"guestName": "Jane", "guests": 1}
