from typing import TypedDict

from villa.gallery.domain.enum import ImageCategory
from villa.gallery.domain.value_object import ImageId
from villa.shared.domain import Entity


class PropertyImageChanges(TypedDict, total=False):
    """物件画像の部分更新データ"""

    url: str
    title: str | None
    description: str | None
    sort_order: int
    is_active: bool


class PropertyImage(Entity[ImageId]):
    """ギャラリーに表示する物件画像"""

    def __init__(
        self,
        id: ImageId,
        category: ImageCategory,
        url: str,
        title: str | None = None,
        description: str | None = None,
        sort_order: int = 0,
        is_active: bool = True,
    ) -> None:
        super().__init__(id)
        if not url:
            raise ValueError("Image url is required")
        self._category = category
        self._url = url
        self._title = title or None
        self._description = description or None
        self._sort_order = sort_order
        self._is_active = is_active

    @property
    def category(self) -> ImageCategory:
        return self._category

    @property
    def url(self) -> str:
        return self._url

    @property
    def title(self) -> str | None:
        return self._title

    @property
    def description(self) -> str | None:
        return self._description

    @property
    def sort_order(self) -> int:
        return self._sort_order

    @property
    def is_active(self) -> bool:
        return self._is_active

    def apply(self, changes: PropertyImageChanges) -> None:
        """指定された項目だけを書き換える"""
        if "url" in changes:
            if not changes["url"]:
                raise ValueError("Image url is required")
            self._url = changes["url"]
        if "title" in changes:
            self._title = changes["title"] or None
        if "description" in changes:
            self._description = changes["description"] or None
        if "sort_order" in changes:
            self._sort_order = changes["sort_order"]
        if "is_active" in changes:
            self._is_active = changes["is_active"]
