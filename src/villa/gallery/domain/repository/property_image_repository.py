from abc import abstractmethod
from typing import NotRequired, TypedDict

from villa.gallery.domain.entity import PropertyImage, PropertyImageChanges
from villa.gallery.domain.enum import ImageCategory
from villa.gallery.domain.value_object import ImageId
from villa.shared.domain import Repository


class PropertyImageDetails(TypedDict):
    """物件画像の入力データ"""

    category: ImageCategory
    url: str
    title: NotRequired[str | None]
    description: NotRequired[str | None]
    sort_order: NotRequired[int]
    is_active: NotRequired[bool]


class PropertyImageRepository(Repository[PropertyImage, ImageId]):
    """物件画像レポジトリのインターフェース"""

    @abstractmethod
    def find_all(self, category: ImageCategory | None = None) -> list[PropertyImage]:
        """公開中の画像を表示順に返す（カテゴリ指定時は絞り込む）"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, image_id: ImageId) -> PropertyImage | None:
        raise NotImplementedError

    @abstractmethod
    def create(self, details: PropertyImageDetails) -> PropertyImage:
        raise NotImplementedError

    @abstractmethod
    def update(
        self, image_id: ImageId, changes: PropertyImageChanges
    ) -> PropertyImage | None:
        raise NotImplementedError

    @abstractmethod
    def delete(self, image_id: ImageId) -> bool:
        """削除できた場合は True、存在しない場合は False"""
        raise NotImplementedError
