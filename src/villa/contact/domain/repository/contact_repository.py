from abc import abstractmethod
from typing import TypedDict

from villa.contact.domain.entity import Contact
from villa.contact.domain.value_object import ContactId
from villa.shared.domain import Repository


class ContactDetails(TypedDict):
    """問い合わせの入力データ"""

    name: str
    email: str
    message: str


class ContactRepository(Repository[Contact, ContactId]):
    """問い合わせレポジトリのインターフェース"""

    @abstractmethod
    def create(self, details: ContactDetails) -> Contact:
        """問い合わせIDと作成日時を採番して保存する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, contact_id: ContactId) -> Contact | None:
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Contact]:
        """作成日時の新しい順に返す"""
        raise NotImplementedError
