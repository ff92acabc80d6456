from .content_section_id import ContentSectionId
from .section_key import SectionKey
from .section_metadata import SectionMetadata

__all__ = ["ContentSectionId", "SectionKey", "SectionMetadata"]
