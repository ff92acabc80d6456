"""宿泊料金の計算

料金 = 1泊料金 x 泊数 + サービス料(6%) + 税(8%)
サービス料と税はそれぞれ個別に1通貨単位へ四捨五入する。
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from decimal import Decimal

from villa.shared.domain import Money

NIGHTLY_RATE = Money.usd(850)
SERVICE_FEE_RATE = Decimal("0.06")
TAX_RATE = Decimal("0.08")

SECONDS_PER_DAY = 24 * 60 * 60

DateInput = date | datetime | str | None


@dataclass(frozen=True)
class PriceBreakdown:
    """料金の内訳"""

    nights: int
    nightly_rate: Money
    subtotal: Money
    service_fee: Money
    taxes: Money
    total: Money

    @classmethod
    def empty(cls) -> PriceBreakdown:
        """日付が不正な場合の 0 円の内訳"""
        return cls(
            nights=0,
            nightly_rate=NIGHTLY_RATE,
            subtotal=Money.zero(),
            service_fee=Money.zero(),
            taxes=Money.zero(),
            total=Money.zero(),
        )


def _to_naive_utc(value: DateInput) -> datetime | None:
    if value is None:
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time.min)
    else:
        text = value.strip()
        if not text:
            return None
        try:
            parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError:
            return None

    # aware と naive を比較できるよう UTC の naive に揃える
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def count_nights(check_in: DateInput, check_out: DateInput) -> int:
    """泊数を計算する（端数の日は切り上げ）

    日付が未入力・解析不能、またはチェックアウトがチェックイン以前なら 0 を返す。
    """
    start = _to_naive_utc(check_in)
    end = _to_naive_utc(check_out)
    if start is None or end is None:
        return 0

    seconds = (end - start).total_seconds()
    if seconds <= 0:
        return 0
    return math.ceil(seconds / SECONDS_PER_DAY)


def calculate_price(
    check_in: DateInput, check_out: DateInput, guests: int | None = None
) -> PriceBreakdown:
    """宿泊料金の内訳を計算する

    人数は料金に影響しない（1棟貸しのため）。
    """
    del guests  # unused
    nights = count_nights(check_in, check_out)
    if nights <= 0:
        return PriceBreakdown.empty()

    subtotal = NIGHTLY_RATE.multiply(nights)
    service_fee = subtotal.multiply(SERVICE_FEE_RATE).round_half_up()
    taxes = subtotal.multiply(TAX_RATE).round_half_up()

    return PriceBreakdown(
        nights=nights,
        nightly_rate=NIGHTLY_RATE,
        subtotal=subtotal,
        service_fee=service_fee,
        taxes=taxes,
        total=subtotal.add(service_fee).add(taxes),
    )
