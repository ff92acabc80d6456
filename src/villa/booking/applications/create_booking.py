from aws_lambda_powertools import Logger

from villa.booking.domain.entity import Booking
from villa.booking.domain.enum import BookingStatus
from villa.booking.domain.factory import BookingDetails
from villa.booking.domain.notifier import BookingNotifier
from villa.booking.domain.repository import BookingRepository
from villa.booking.domain.service import calculate_price

logger = Logger(child=True)


class CreateBookingService:
    """予約作成のユースケース

    - 合計金額が未指定ならサーバ側で計算する
    - 確定済みで作成された予約には確定メールを送る（失敗しても予約は成立）
    """

    def __init__(
        self, repository: BookingRepository, notifier: BookingNotifier
    ) -> None:
        self._repository = repository
        self._notifier = notifier

    def create(self, details: BookingDetails) -> Booking:
        """予約を作成する"""

        if details.get("total_amount") is None:
            quote = calculate_price(
                details["checkin_date"], details["checkout_date"], details["guests"]
            )
            details = {**details, "total_amount": quote.total.amount}

        booking = self._repository.create(details)
        logger.info(
            "Booking created",
            extra={"booking_id": str(booking.id), "status": booking.status.value},
        )

        if booking.status == BookingStatus.CONFIRMED:
            self._send_confirmation(booking)
        return booking

    def _send_confirmation(self, booking: Booking) -> None:
        try:
            sent = self._notifier.notify(booking)
        except Exception:
            logger.exception(
                "Error sending confirmation email",
                extra={"booking_id": str(booking.id)},
            )
            return

        if not sent:
            logger.warning(
                "Failed to send confirmation email",
                extra={"booking_id": str(booking.id)},
            )
