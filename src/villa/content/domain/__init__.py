from .entity import ContentSection
from .enum import SectionType
from .repository import (
    ContentSectionChanges,
    ContentSectionDetails,
    ContentSectionRepository,
)
from .value_object import ContentSectionId, SectionKey, SectionMetadata

__all__ = [
    "ContentSection",
    "SectionType",
    "ContentSectionChanges",
    "ContentSectionDetails",
    "ContentSectionRepository",
    "ContentSectionId",
    "SectionKey",
    "SectionMetadata",
]
