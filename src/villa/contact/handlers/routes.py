from __future__ import annotations

from typing import TYPE_CHECKING

from aws_lambda_powertools import Logger
from aws_lambda_powertools.event_handler import Response
from aws_lambda_powertools.event_handler.api_gateway import Router

from villa.contact.handlers.request_models import CreateContactRequest
from villa.contact.handlers.response_models import to_response
from villa.shared.utils import api_response, parse_json_body

if TYPE_CHECKING:
    from villa.api.container import Container

logger = Logger(child=True)
router = Router()


def _container() -> Container:
    return router.context["container"]


@router.get("/api/contacts")
def list_contacts() -> Response:
    contacts = _container().contact_repository.find_all()
    return api_response(200, [to_response(contact) for contact in contacts])


@router.post("/api/contacts")
def create_contact() -> Response:
    request = parse_json_body(CreateContactRequest, router.current_event.body)
    contact = _container().contact_repository.create(request.to_details())
    logger.info("Contact message received", extra={"contact_id": str(contact.id)})
    return api_response(201, to_response(contact))
