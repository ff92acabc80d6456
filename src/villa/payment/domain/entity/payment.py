from datetime import datetime

from villa.payment.domain.enum import PaymentStatus
from villa.payment.domain.value_object import PaymentId
from villa.shared.domain import BusinessRuleViolationException, Entity, Money


class Payment(Entity[PaymentId]):
    """決済エンティティ

    カード番号は末尾4桁のみ保持する。
    """

    def __init__(
        self,
        id: PaymentId,
        amount: Money,
        card_last4: str,
        created_at: datetime,
        status: PaymentStatus = PaymentStatus.PENDING,
    ) -> None:
        super().__init__(id)
        self._amount = amount
        self._card_last4 = card_last4
        self._created_at = created_at
        self._status = status

    @property
    def amount(self) -> Money:
        return self._amount

    @property
    def card_last4(self) -> str:
        return self._card_last4

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def status(self) -> PaymentStatus:
        return self._status

    def complete(self) -> None:
        """決済を完了状態にする"""
        if self._status != PaymentStatus.PENDING:
            raise BusinessRuleViolationException(
                f"Cannot complete payment in status: {self._status.value}"
            )
        self._status = PaymentStatus.COMPLETED
