from datetime import datetime

from villa.content.domain.value_object import (
    ContentSectionId,
    SectionKey,
    SectionMetadata,
)
from villa.shared.domain import Entity


def _require(value: str, label: str) -> str:
    if not value or not value.strip():
        raise ValueError(f"{label} is required")
    return value


class ContentSection(Entity[ContentSectionId]):
    """公開ページに表示する編集可能なテキストブロック"""

    def __init__(
        self,
        id: ContentSectionId,
        section_key: SectionKey,
        title: str,
        content: str,
        updated_at: datetime,
        metadata: SectionMetadata | None = None,
    ) -> None:
        super().__init__(id)
        self._section_key = section_key
        self._title = _require(title, "Title")
        self._content = _require(content, "Content")
        self._metadata = metadata
        self._updated_at = updated_at

    @property
    def section_key(self) -> SectionKey:
        return self._section_key

    @property
    def title(self) -> str:
        return self._title

    @property
    def content(self) -> str:
        return self._content

    @property
    def metadata(self) -> SectionMetadata | None:
        return self._metadata

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def revise(
        self,
        updated_at: datetime,
        title: str | None = None,
        content: str | None = None,
        metadata: SectionMetadata | None = None,
    ) -> None:
        """指定された項目だけを書き換え、更新日時を進める"""
        if title is not None:
            self._title = _require(title, "Title")
        if content is not None:
            self._content = _require(content, "Content")
        if metadata is not None:
            self._metadata = metadata
        self._updated_at = updated_at
