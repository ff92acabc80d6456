from datetime import datetime

from villa.payment.domain.entity import Payment
from villa.payment.domain.value_object import CardNumber, PaymentId
from villa.shared.domain import Money


class PaymentFactory:
    """決済エンティティを生成するFactory"""

    def create(
        self, amount: Money, card_number: CardNumber, created_at: datetime
    ) -> Payment:
        return Payment(
            id=PaymentId.from_timestamp(created_at),
            amount=amount,
            card_last4=card_number.last4,
            created_at=created_at,
        )
