from __future__ import annotations

from typing import TYPE_CHECKING

from aws_lambda_powertools.event_handler import Response
from aws_lambda_powertools.event_handler.api_gateway import Router

from villa.payment.handlers.request_models import ProcessPaymentRequest
from villa.payment.handlers.response_models import to_response
from villa.shared.utils import api_response, parse_json_body

if TYPE_CHECKING:
    from villa.api.container import Container

router = Router()


def _container() -> Container:
    return router.context["container"]


@router.post("/api/process-payment")
def process_payment() -> Response:
    """決済（モック）を行い、確定済みの予約を作成する"""
    request = parse_json_body(ProcessPaymentRequest, router.current_event.body)
    result = _container().process_payment.process(
        request.payment_data.to_card_number(), request.booking_data.to_details()
    )
    return api_response(200, to_response(result))
