from abc import abstractmethod
from typing import NotRequired, TypedDict

from villa.content.domain.entity import ContentSection
from villa.content.domain.value_object import (
    ContentSectionId,
    SectionKey,
    SectionMetadata,
)
from villa.shared.domain import Repository


class ContentSectionDetails(TypedDict):
    """コンテンツセクションの入力データ"""

    section_key: str
    title: str
    content: str
    metadata: NotRequired[SectionMetadata | None]


class ContentSectionChanges(TypedDict, total=False):
    title: str
    content: str
    metadata: SectionMetadata


class ContentSectionRepository(Repository[ContentSection, ContentSectionId]):
    """コンテンツセクションレポジトリのインターフェース"""

    @abstractmethod
    def find_all(self) -> list[ContentSection]:
        """更新日時の新しい順に返す"""
        raise NotImplementedError

    @abstractmethod
    def find_by_key(self, section_key: SectionKey) -> ContentSection | None:
        raise NotImplementedError

    @abstractmethod
    def create(self, details: ContentSectionDetails) -> ContentSection:
        """セクションを追加する（キー重複時は DuplicateResourceException）"""
        raise NotImplementedError

    @abstractmethod
    def update(
        self, section_key: SectionKey, changes: ContentSectionChanges
    ) -> ContentSection | None:
        """指定項目だけを更新する（存在しない場合は None）"""
        raise NotImplementedError
