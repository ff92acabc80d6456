from datetime import datetime

from villa.contact.domain.entity import Contact
from villa.shared.utils import ApiModel


class ContactData(ApiModel):
    """問い合わせデータのレスポンスモデル"""

    id: str
    name: str
    email: str
    message: str
    created_at: datetime


def to_response(contact: Contact) -> dict:
    return ContactData(
        id=str(contact.id),
        name=contact.name,
        email=contact.email,
        message=contact.message,
        created_at=contact.created_at,
    ).to_json_dict()
