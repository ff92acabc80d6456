from datetime import datetime

from villa.contact.domain.value_object import ContactId
from villa.shared.domain import Entity


class Contact(Entity[ContactId]):
    """問い合わせエンティティ（作成後は変更しない）"""

    def __init__(
        self,
        id: ContactId,
        name: str,
        email: str,
        message: str,
        created_at: datetime,
    ) -> None:
        super().__init__(id)
        if not name.strip():
            raise ValueError("Name is required")
        if not message.strip():
            raise ValueError("Message is required")
        self._name = name
        self._email = email
        self._message = message
        self._created_at = created_at

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email

    @property
    def message(self) -> str:
        return self._message

    @property
    def created_at(self) -> datetime:
        return self._created_at
