from .in_memory_content_section_repository import InMemoryContentSectionRepository

__all__ = ["InMemoryContentSectionRepository"]
