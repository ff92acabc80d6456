from .content_section import ContentSection

__all__ = ["ContentSection"]
