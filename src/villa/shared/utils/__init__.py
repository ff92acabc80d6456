from .api_model import ApiModel
from .http_response import api_response
from .validators import format_validation_errors, parse_json_body, to_decimal

__all__ = [
    "ApiModel",
    "api_response",
    "format_validation_errors",
    "parse_json_body",
    "to_decimal",
]
