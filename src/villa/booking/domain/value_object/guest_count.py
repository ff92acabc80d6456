from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class GuestCount:
    """宿泊人数（1〜10名）"""

    MIN: ClassVar[int] = 1
    MAX: ClassVar[int] = 10

    value: int

    def __post_init__(self) -> None:
        if self.value < self.MIN:
            raise ValueError(f"At least {self.MIN} guest is required")
        if self.value > self.MAX:
            raise ValueError(f"Maximum {self.MAX} guests allowed")

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        suffix = "" if self.value == 1 else "s"
        return f"{self.value} guest{suffix}"
