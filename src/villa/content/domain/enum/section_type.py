from enum import Enum


class SectionType(str, Enum):
    """エディタでの入力欄の種類"""

    TEXT = "text"
    TEXTAREA = "textarea"
