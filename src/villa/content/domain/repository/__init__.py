from .content_section_repository import (
    ContentSectionChanges,
    ContentSectionDetails,
    ContentSectionRepository,
)

__all__ = ["ContentSectionChanges", "ContentSectionDetails", "ContentSectionRepository"]
