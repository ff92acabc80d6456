from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from .currency import Currency

CENTS = Decimal("0.01")


@dataclass(frozen=True)
class Money:
    """金額（通貨情報含む）"""

    amount: Decimal
    currency: Currency

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, "amount", Decimal(str(self.amount)))
        if not self.amount.is_finite():
            raise ValueError(f"Invalid amount: {self.amount}")
        if self.amount < 0:
            raise ValueError("Amount cannot be negative")

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"

    def add(self, other: Money) -> Money:
        """金額を加算する"""
        if self.currency != other.currency:
            raise ValueError("Cannot add money with different currencies")
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def multiply(self, factor: int | Decimal) -> Money:
        """金額に係数を掛ける（端数処理は行わない）"""
        return Money(amount=self.amount * Decimal(factor), currency=self.currency)

    def round_half_up(self) -> Money:
        """1通貨単位に四捨五入する（0.5 は切り上げ）"""
        return Money(
            amount=self.amount.quantize(Decimal("1"), rounding=ROUND_HALF_UP),
            currency=self.currency,
        )

    def to_decimal_string(self) -> str:
        """小数点以下2桁の文字列に変換する（例: "969.00"）"""
        return str(self.amount.quantize(CENTS, rounding=ROUND_HALF_UP))

    @classmethod
    def usd(cls, amount: Decimal | int | str) -> Money:
        """米ドルで Money を生成"""
        return cls(amount=Decimal(str(amount)), currency=Currency.usd())

    @classmethod
    def zero(cls) -> Money:
        return cls.usd(0)
