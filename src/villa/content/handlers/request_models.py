import json

from pydantic import ConfigDict, Field, field_validator

from villa.content.domain.enum import SectionType
from villa.content.domain.repository import (
    ContentSectionChanges,
    ContentSectionDetails,
)
from villa.content.domain.value_object import SectionMetadata
from villa.shared.utils import ApiModel


class SectionMetadataModel(ApiModel):
    """セクション付加情報のモデル（未定義のキーは受け付けない）"""

    model_config = ConfigDict(extra="forbid")

    editable: bool = True
    type: SectionType = SectionType.TEXT

    def to_value_object(self) -> SectionMetadata:
        return SectionMetadata(editable=self.editable, type=self.type)


def _decode_metadata(v: object) -> object:
    # 旧クライアントは metadata を JSON 文字列で送ってくる
    if isinstance(v, str):
        try:
            return json.loads(v)
        except json.JSONDecodeError:
            raise ValueError("metadata must be a JSON object") from None
    return v


class CreateContentSectionRequest(ApiModel):
    """コンテンツセクション作成リクエストモデル"""

    section_key: str = Field(..., min_length=1, max_length=100)
    title: str = Field(..., min_length=1, max_length=200)
    content: str = Field(..., min_length=1)
    metadata: SectionMetadataModel | None = None

    decode_metadata = field_validator("metadata", mode="before")(_decode_metadata)

    def to_details(self) -> ContentSectionDetails:
        return {
            "section_key": self.section_key,
            "title": self.title,
            "content": self.content,
            "metadata": self.metadata.to_value_object() if self.metadata else None,
        }


class UpdateContentSectionRequest(ApiModel):
    """コンテンツセクション更新リクエストモデル（未指定の項目は変更しない）"""

    title: str | None = Field(default=None, min_length=1, max_length=200)
    content: str | None = Field(default=None, min_length=1)
    metadata: SectionMetadataModel | None = None

    decode_metadata = field_validator("metadata", mode="before")(_decode_metadata)

    def to_changes(self) -> ContentSectionChanges:
        changes: ContentSectionChanges = {}
        if self.title is not None:
            changes["title"] = self.title
        if self.content is not None:
            changes["content"] = self.content
        if self.metadata is not None:
            changes["metadata"] = self.metadata.to_value_object()
        return changes
