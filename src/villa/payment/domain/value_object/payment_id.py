from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class PaymentId:
    """決済ID（pay_<エポックミリ秒>）"""

    value: str

    def __post_init__(self) -> None:
        if not self.value.startswith("pay_"):
            raise ValueError(f"Invalid payment id: {self.value}")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_timestamp(cls, timestamp: datetime) -> PaymentId:
        """決済日時から PaymentId を生成する"""
        return cls(value=f"pay_{int(timestamp.timestamp() * 1000)}")
