from collections.abc import Callable
from datetime import datetime, timezone

from villa.contact.domain.entity import Contact
from villa.contact.domain.repository import ContactDetails, ContactRepository
from villa.contact.domain.value_object import ContactId


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryContactRepository(ContactRepository):
    """プロセスメモリ上の dict を使った ContactRepository の具象実装

    Contact は不変なので、エンティティをそのまま保持して返す。
    """

    def __init__(
        self,
        id_factory: Callable[[], ContactId] = ContactId.generate,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._id_factory = id_factory
        self._clock = clock
        self._contacts: dict[ContactId, Contact] = {}

    def create(self, details: ContactDetails) -> Contact:
        contact = Contact(
            id=self._id_factory(),
            name=details["name"],
            email=details["email"],
            message=details["message"],
            created_at=self._clock(),
        )
        self._contacts[contact.id] = contact
        return contact

    def find_by_id(self, contact_id: ContactId) -> Contact | None:
        return self._contacts.get(contact_id)

    def find_all(self) -> list[Contact]:
        return sorted(
            self._contacts.values(),
            key=lambda contact: contact.created_at,
            reverse=True,
        )
