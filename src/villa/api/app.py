"""Villa 予約 API の Lambda エントリポイント

API Gateway (REST) の `/api/{proxy+}` をすべてこの関数で受け、
APIGatewayRestResolver で各コンテキストのルータに振り分ける。
"""

from aws_lambda_powertools import Logger
from aws_lambda_powertools.event_handler import APIGatewayRestResolver, Response
from aws_lambda_powertools.event_handler.exceptions import NotFoundError
from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from villa.api.container import Container
from villa.booking.handlers import router as booking_router
from villa.contact.handlers import router as contact_router
from villa.content.handlers import router as content_router
from villa.gallery.handlers import router as gallery_router
from villa.payment.handlers import router as payment_router
from villa.shared.domain import (
    BusinessRuleViolationException,
    DuplicateResourceException,
    ResourceNotFoundException,
)
from villa.shared.utils import api_response, format_validation_errors

logger = Logger()

app = APIGatewayRestResolver()
app.include_router(booking_router)
app.include_router(contact_router)
app.include_router(content_router)
app.include_router(gallery_router)
app.include_router(payment_router)

container = Container.from_env()


@app.exception_handler(ValidationError)
def handle_validation_error(error: ValidationError) -> Response:
    logger.info("Request validation failed", extra={"errors": error.error_count()})
    return api_response(
        400,
        {"message": "Validation error", "errors": format_validation_errors(error)},
    )


@app.exception_handler(BusinessRuleViolationException)
def handle_business_rule_violation(error: BusinessRuleViolationException) -> Response:
    return api_response(400, {"message": str(error)})


@app.exception_handler(ValueError)
def handle_value_error(error: ValueError) -> Response:
    return api_response(400, {"message": str(error)})


@app.exception_handler(ResourceNotFoundException)
def handle_not_found(error: ResourceNotFoundException) -> Response:
    return api_response(404, {"message": str(error)})


@app.exception_handler(DuplicateResourceException)
def handle_duplicate(error: DuplicateResourceException) -> Response:
    return api_response(409, {"message": str(error)})


@app.exception_handler(Exception)
def handle_unexpected_error(error: Exception) -> Response:
    logger.exception("Unhandled error")
    return api_response(500, {"message": "Internal server error"})


@app.not_found
def handle_unknown_route(error: NotFoundError) -> Response:
    return api_response(404, {"message": "Not found"})


def resolve(event: dict, context: LambdaContext, services: Container) -> dict:
    """依存一式をリゾルバのコンテキストに載せてイベントを処理する"""
    app.append_context(container=services)
    return app.resolve(event, context)


@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    return resolve(event, context, container)
