import re
from dataclasses import dataclass

_KEY_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_-]*$")


@dataclass(frozen=True)
class SectionKey:
    """コンテンツセクションキー（例: hero-title, heroTitle, hero_title）

    URL パスにそのまま載せられるよう、英数字・'-'・'_' のみ許可する。
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("Section key is required")
        if not _KEY_PATTERN.match(self.value):
            raise ValueError(
                f"Invalid section key: {self.value}. "
                "Use letters, digits, '-' or '_', starting with a letter or digit"
            )

    def __str__(self) -> str:
        return self.value
