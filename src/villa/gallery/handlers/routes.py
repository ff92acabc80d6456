from __future__ import annotations

from typing import TYPE_CHECKING

from aws_lambda_powertools import Logger
from aws_lambda_powertools.event_handler import Response
from aws_lambda_powertools.event_handler.api_gateway import Router

from villa.gallery.domain.value_object import ImageId
from villa.gallery.handlers.request_models import (
    CreatePropertyImageRequest,
    ImageQuery,
    UpdatePropertyImageRequest,
)
from villa.gallery.handlers.response_models import to_response
from villa.shared.domain import ResourceNotFoundException
from villa.shared.utils import api_response, parse_json_body

if TYPE_CHECKING:
    from villa.api.container import Container

logger = Logger(child=True)
router = Router()

RESOURCE = "Image"


def _container() -> Container:
    return router.context["container"]


@router.get("/api/images")
def list_images() -> Response:
    """表示中の画像一覧（sortOrder 順、category で絞り込み可）"""
    query = ImageQuery.model_validate(router.current_event.query_string_parameters or {})
    images = _container().image_repository.find_all(query.category)
    return api_response(200, [to_response(image) for image in images])


@router.get("/api/images/<image_id>")
def get_image(image_id: str) -> Response:
    image = _container().image_repository.find_by_id(ImageId(image_id))
    if image is None:
        raise ResourceNotFoundException(RESOURCE)
    return api_response(200, to_response(image))


@router.post("/api/images")
def create_image() -> Response:
    request = parse_json_body(CreatePropertyImageRequest, router.current_event.body)
    image = _container().image_repository.create(request.to_details())
    logger.info("Property image created", extra={"image_id": str(image.id)})
    return api_response(201, to_response(image))


@router.put("/api/images/<image_id>")
def update_image(image_id: str) -> Response:
    request = parse_json_body(UpdatePropertyImageRequest, router.current_event.body)
    image = _container().image_repository.update(ImageId(image_id), request.to_changes())
    if image is None:
        raise ResourceNotFoundException(RESOURCE)
    return api_response(200, to_response(image))


@router.delete("/api/images/<image_id>")
def delete_image(image_id: str) -> Response:
    if not _container().image_repository.delete(ImageId(image_id)):
        raise ResourceNotFoundException(RESOURCE)
    logger.info("Property image deleted", extra={"image_id": image_id})
    return api_response(200, {"message": "Image deleted successfully"})
