from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone

from aws_lambda_powertools import Logger

from villa.booking.applications import CreateBookingService
from villa.booking.domain.entity import Booking
from villa.booking.domain.enum import BookingStatus
from villa.booking.domain.factory import BookingDetails
from villa.booking.domain.service import calculate_price
from villa.payment.domain.entity import Payment
from villa.payment.domain.factory import PaymentFactory
from villa.payment.domain.value_object import CardNumber
from villa.shared.domain import Money

logger = Logger(child=True)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class PaymentResult:
    """決済処理の結果"""

    payment: Payment
    booking: Booking


class ProcessPaymentService:
    """決済（モック）と予約確定をまとめて行うユースケース

    実際のカード決済は行わず、入力検証を通過した決済は常に成功とする。
    決済が完了した予約は確定済みで作成され、確定メールが送られる。
    """

    def __init__(
        self,
        create_booking: CreateBookingService,
        factory: PaymentFactory | None = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._create_booking = create_booking
        self._factory = factory or PaymentFactory()
        self._clock = clock

    def process(
        self, card_number: CardNumber, booking_details: BookingDetails
    ) -> PaymentResult:
        amount = self._amount_for(booking_details)

        payment = self._factory.create(amount, card_number, self._clock())
        payment.complete()
        logger.info(
            "Payment processed",
            extra={
                "payment_id": str(payment.id),
                "amount": amount.to_decimal_string(),
                "card_last4": payment.card_last4,
            },
        )

        booking = self._create_booking.create(
            {
                **booking_details,
                "total_amount": amount.amount,
                "status": BookingStatus.CONFIRMED,
            }
        )
        return PaymentResult(payment=payment, booking=booking)

    @staticmethod
    def _amount_for(details: BookingDetails) -> Money:
        total_amount = details.get("total_amount")
        if total_amount is not None:
            return Money.usd(total_amount)
        return calculate_price(
            details["checkin_date"], details["checkout_date"], details["guests"]
        ).total
