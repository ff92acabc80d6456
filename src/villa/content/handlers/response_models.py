from datetime import datetime

from villa.content.domain.entity import ContentSection
from villa.shared.utils import ApiModel


class ContentSectionData(ApiModel):
    """コンテンツセクションのレスポンスモデル"""

    id: str
    section_key: str
    title: str
    content: str
    metadata: dict | None
    updated_at: datetime


def to_response(section: ContentSection) -> dict:
    return ContentSectionData(
        id=str(section.id),
        section_key=str(section.section_key),
        title=section.title,
        content=section.content,
        metadata=section.metadata.to_dict() if section.metadata else None,
        updated_at=section.updated_at,
    ).to_json_dict()
