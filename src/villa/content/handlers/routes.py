from __future__ import annotations

from typing import TYPE_CHECKING

from aws_lambda_powertools import Logger
from aws_lambda_powertools.event_handler import Response
from aws_lambda_powertools.event_handler.api_gateway import Router

from villa.content.domain.value_object import SectionKey
from villa.content.handlers.request_models import (
    CreateContentSectionRequest,
    UpdateContentSectionRequest,
)
from villa.content.handlers.response_models import to_response
from villa.shared.domain import ResourceNotFoundException
from villa.shared.utils import api_response, parse_json_body

if TYPE_CHECKING:
    from villa.api.container import Container

logger = Logger(child=True)
router = Router()

RESOURCE = "Content section"


def _container() -> Container:
    return router.context["container"]


def _parse_key(section_key: str) -> SectionKey:
    # 形式が不正なキーは存在しないキーとして扱う
    try:
        return SectionKey(section_key)
    except ValueError:
        raise ResourceNotFoundException(RESOURCE) from None


@router.get("/api/content")
def list_content_sections() -> Response:
    sections = _container().content_repository.find_all()
    return api_response(200, [to_response(section) for section in sections])


@router.get("/api/content/<section_key>")
def get_content_section(section_key: str) -> Response:
    section = _container().content_repository.find_by_key(_parse_key(section_key))
    if section is None:
        raise ResourceNotFoundException(RESOURCE)
    return api_response(200, to_response(section))


@router.post("/api/content")
def create_content_section() -> Response:
    request = parse_json_body(CreateContentSectionRequest, router.current_event.body)
    section = _container().content_repository.create(request.to_details())
    logger.info("Content section created", extra={"section_key": request.section_key})
    return api_response(201, to_response(section))


@router.put("/api/content/<section_key>")
def update_content_section(section_key: str) -> Response:
    request = parse_json_body(UpdateContentSectionRequest, router.current_event.body)
    section = _container().content_repository.update(
        _parse_key(section_key), request.to_changes()
    )
    if section is None:
        raise ResourceNotFoundException(RESOURCE)
    logger.info("Content section updated", extra={"section_key": section_key})
    return api_response(200, to_response(section))
