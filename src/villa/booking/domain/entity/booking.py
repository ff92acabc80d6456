from datetime import datetime

from villa.booking.domain.enum import BookingStatus
from villa.booking.domain.value_object import (
    BookingId,
    GuestContact,
    GuestCount,
    StayPeriod,
)
from villa.shared.domain import BusinessRuleViolationException, Entity, Money


class Booking(Entity[BookingId]):
    """宿泊予約エンティティ"""

    def __init__(
        self,
        id: BookingId,
        stay_period: StayPeriod,
        guests: GuestCount,
        guest: GuestContact,
        total_amount: Money,
        created_at: datetime,
        status: BookingStatus = BookingStatus.PENDING,
    ) -> None:
        super().__init__(id)
        self._stay_period = stay_period
        self._guests = guests
        self._guest = guest
        self._total_amount = total_amount
        self._created_at = created_at
        self._status = status

    @property
    def stay_period(self) -> StayPeriod:
        return self._stay_period

    @property
    def guests(self) -> GuestCount:
        return self._guests

    @property
    def guest(self) -> GuestContact:
        return self._guest

    @property
    def total_amount(self) -> Money:
        return self._total_amount

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def status(self) -> BookingStatus:
        return self._status

    def nights(self) -> int:
        return self._stay_period.nights()

    def confirm(self) -> None:
        """予約を確定する（確定済みなら何もしない）"""
        self._status = BookingStatus.CONFIRMED

    def change_status(self, status: BookingStatus) -> None:
        """ステータスを変更する

        確定済みの予約を仮予約に戻すことはできない。
        """
        if status == self._status:
            return
        if status == BookingStatus.CONFIRMED:
            self.confirm()
            return
        raise BusinessRuleViolationException(
            f"Cannot change booking status from {self._status.value} to {status.value}"
        )
