from __future__ import annotations

import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class ImageId:
    """物件画像ID"""

    value: str

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> ImageId:
        return cls(value=str(uuid.uuid4()))
