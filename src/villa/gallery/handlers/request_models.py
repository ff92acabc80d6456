from pydantic import AnyHttpUrl, Field

from villa.gallery.domain.entity import PropertyImageChanges
from villa.gallery.domain.enum import ImageCategory
from villa.gallery.domain.repository import PropertyImageDetails
from villa.shared.utils import ApiModel


class CreatePropertyImageRequest(ApiModel):
    """物件画像登録リクエストモデル"""

    category: ImageCategory
    url: AnyHttpUrl
    title: str | None = Field(default=None, max_length=200)
    description: str | None = Field(default=None, max_length=1000)
    sort_order: int = Field(default=0, ge=0)
    is_active: bool = True

    def to_details(self) -> PropertyImageDetails:
        return {
            "category": self.category,
            "url": str(self.url),
            "title": self.title,
            "description": self.description,
            "sort_order": self.sort_order,
            "is_active": self.is_active,
        }


class UpdatePropertyImageRequest(ApiModel):
    """物件画像更新リクエストモデル（送られた項目だけを変更する）"""

    url: AnyHttpUrl | None = None
    title: str | None = Field(default=None, max_length=200)
    description: str | None = Field(default=None, max_length=1000)
    sort_order: int | None = Field(default=None, ge=0)
    is_active: bool | None = None

    def to_changes(self) -> PropertyImageChanges:
        changes: PropertyImageChanges = {}
        sent = self.model_fields_set
        if "url" in sent and self.url is not None:
            changes["url"] = str(self.url)
        if "title" in sent:
            changes["title"] = self.title
        if "description" in sent:
            changes["description"] = self.description
        if "sort_order" in sent and self.sort_order is not None:
            changes["sort_order"] = self.sort_order
        if "is_active" in sent and self.is_active is not None:
            changes["is_active"] = self.is_active
        return changes


class ImageQuery(ApiModel):
    """画像一覧のクエリ文字列"""

    category: ImageCategory | None = None
