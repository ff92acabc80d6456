from .section_type import SectionType

__all__ = ["SectionType"]
