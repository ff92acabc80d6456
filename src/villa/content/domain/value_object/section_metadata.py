from dataclasses import dataclass

from villa.content.domain.enum import SectionType


@dataclass(frozen=True)
class SectionMetadata:
    """セクションの付加情報（エディタで編集可能か、入力欄の種類）"""

    editable: bool = True
    type: SectionType = SectionType.TEXT

    def to_dict(self) -> dict:
        return {"editable": self.editable, "type": self.type.value}
