from __future__ import annotations

from typing import TYPE_CHECKING

from aws_lambda_powertools import Logger
from aws_lambda_powertools.event_handler import Response
from aws_lambda_powertools.event_handler.api_gateway import Router

from villa.booking.domain.service import calculate_price
from villa.booking.domain.value_object import BookingId
from villa.booking.handlers.request_models import (
    CreateBookingRequest,
    QuoteRequest,
    UpdateBookingStatusRequest,
)
from villa.booking.handlers.response_models import to_quote_response, to_response
from villa.shared.domain import ResourceNotFoundException
from villa.shared.utils import api_response, parse_json_body

if TYPE_CHECKING:
    from villa.api.container import Container

logger = Logger(child=True)
router = Router()


def _container() -> Container:
    return router.context["container"]


@router.get("/api/bookings")
def list_bookings() -> Response:
    """予約一覧（作成日時の新しい順）"""
    bookings = _container().booking_repository.find_all()
    return api_response(200, [to_response(booking) for booking in bookings])


@router.post("/api/bookings")
def create_booking() -> Response:
    request = parse_json_body(CreateBookingRequest, router.current_event.body)
    booking = _container().create_booking.create(request.to_details())
    return api_response(201, to_response(booking))


@router.get("/api/bookings/<booking_id>")
def get_booking(booking_id: str) -> Response:
    booking = _container().booking_repository.find_by_id(BookingId(value=booking_id))
    if booking is None:
        raise ResourceNotFoundException("Booking")
    return api_response(200, to_response(booking))


@router.patch("/api/bookings/<booking_id>")
def update_booking_status(booking_id: str) -> Response:
    request = parse_json_body(UpdateBookingStatusRequest, router.current_event.body)
    booking = _container().update_booking_status.update_status(
        BookingId(value=booking_id), request.status
    )
    if booking is None:
        raise ResourceNotFoundException("Booking")
    return api_response(200, to_response(booking))


@router.get("/api/quote")
def quote_price() -> Response:
    """料金見積もり（予約は作成しない）"""
    params = router.current_event.query_string_parameters or {}
    request = QuoteRequest.model_validate(params)
    breakdown = calculate_price(request.checkin, request.checkout, request.guests)
    logger.debug("Quote calculated", extra={"nights": breakdown.nights})
    return api_response(200, to_quote_response(breakdown))
