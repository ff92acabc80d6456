"""カード情報の整形と検証

決済はモックのため、カード番号は桁数のみ確認する（Luhn チェックはしない）。
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date

_NON_DIGITS = re.compile(r"\D")
_EXPIRY_PATTERN = re.compile(r"^(\d{2})/(\d{2})$")


def format_card_number(value: str) -> str:
    """数字以外を取り除き、4桁ごとに空白で区切る

    例: "4242424242424242" -> "4242 4242 4242 4242"
    """
    digits = _NON_DIGITS.sub("", value)
    return " ".join(digits[i : i + 4] for i in range(0, len(digits), 4))


def format_expiry(value: str) -> str:
    """有効期限を MM/YY 形式に整形する

    例: "1228" -> "12/28"。2桁未満の入力は数字のみ返す。
    """
    digits = _NON_DIGITS.sub("", value)
    if len(digits) >= 2:
        return f"{digits[:2]}/{digits[2:4]}"
    return digits


@dataclass(frozen=True)
class CardNumber:
    """カード番号（13〜19桁）"""

    MIN_DIGITS = 13
    MAX_DIGITS = 19

    digits: str

    def __post_init__(self) -> None:
        normalized = _NON_DIGITS.sub("", self.digits)
        if not self.MIN_DIGITS <= len(normalized) <= self.MAX_DIGITS:
            raise ValueError(
                f"Card number must be {self.MIN_DIGITS}-{self.MAX_DIGITS} digits"
            )
        object.__setattr__(self, "digits", normalized)

    @property
    def last4(self) -> str:
        return self.digits[-4:]

    def __str__(self) -> str:
        return f"**** {self.last4}"


@dataclass(frozen=True)
class CardExpiry:
    """カード有効期限（当月末まで有効）"""

    month: int
    year: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValueError("Expiry month must be between 01 and 12")

    @classmethod
    def parse(cls, value: str) -> CardExpiry:
        match = _EXPIRY_PATTERN.match(value.strip())
        if match is None:
            raise ValueError("Expiry date must be in MM/YY format")
        return cls(month=int(match.group(1)), year=2000 + int(match.group(2)))

    def is_expired(self, today: date) -> bool:
        return (self.year, self.month) < (today.year, today.month)

    def __str__(self) -> str:
        return f"{self.month:02d}/{self.year % 100:02d}"
