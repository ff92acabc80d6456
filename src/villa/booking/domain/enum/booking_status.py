from enum import Enum


class BookingStatus(str, Enum):
    """予約ステータス

    PENDING -> CONFIRMED の一方向のみ遷移する。
    """

    PENDING = "pending"
    CONFIRMED = "confirmed"
