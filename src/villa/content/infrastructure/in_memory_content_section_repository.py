import copy
from collections.abc import Callable, Iterable
from datetime import datetime, timezone

from villa.content.domain.entity import ContentSection
from villa.content.domain.repository import (
    ContentSectionChanges,
    ContentSectionDetails,
    ContentSectionRepository,
)
from villa.content.domain.value_object import ContentSectionId, SectionKey
from villa.content.infrastructure.default_content import DEFAULT_SECTIONS
from villa.shared.domain import DuplicateResourceException


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryContentSectionRepository(ContentSectionRepository):
    """プロセスメモリ上の dict を使った ContentSectionRepository の具象実装

    セクションキーで管理し、取得時はコピーを返す。
    """

    def __init__(
        self,
        seed: Iterable[ContentSectionDetails] = DEFAULT_SECTIONS,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._clock = clock
        self._sections: dict[SectionKey, ContentSection] = {}
        for details in seed:
            self.create(details)

    def find_by_id(self, id: ContentSectionId) -> ContentSection | None:
        for section in self._sections.values():
            if section.id == id:
                return copy.copy(section)
        return None

    def find_all(self) -> list[ContentSection]:
        sections = [copy.copy(section) for section in self._sections.values()]
        return sorted(sections, key=lambda section: section.updated_at, reverse=True)

    def find_by_key(self, section_key: SectionKey) -> ContentSection | None:
        section = self._sections.get(section_key)
        return copy.copy(section) if section is not None else None

    def create(self, details: ContentSectionDetails) -> ContentSection:
        section_key = SectionKey(details["section_key"])
        if section_key in self._sections:
            raise DuplicateResourceException("Content section", str(section_key))

        section = ContentSection(
            id=ContentSectionId.generate(),
            section_key=section_key,
            title=details["title"],
            content=details["content"],
            metadata=details.get("metadata"),
            updated_at=self._clock(),
        )
        self._sections[section_key] = section
        return copy.copy(section)

    def update(
        self, section_key: SectionKey, changes: ContentSectionChanges
    ) -> ContentSection | None:
        existing = self._sections.get(section_key)
        if existing is None:
            return None

        # 検証に失敗しても保存済みの値が壊れないよう、コピーに適用してから差し替える
        section = copy.copy(existing)
        section.revise(
            updated_at=self._clock(),
            title=changes.get("title"),
            content=changes.get("content"),
            metadata=changes.get("metadata"),
        )
        self._sections[section_key] = section
        return copy.copy(section)
