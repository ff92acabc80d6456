from aws_lambda_powertools import Logger

from villa.booking.domain.entity import Booking
from villa.booking.domain.enum import BookingStatus
from villa.booking.domain.repository import BookingRepository
from villa.booking.domain.value_object import BookingId

logger = Logger(child=True)


class UpdateBookingStatusService:
    """予約ステータス更新のユースケース"""

    def __init__(self, repository: BookingRepository) -> None:
        self._repository = repository

    def update_status(
        self, booking_id: BookingId, status: BookingStatus
    ) -> Booking | None:
        """ステータスを更新する（予約が存在しない場合は None）"""

        booking = self._repository.find_by_id(booking_id)
        if booking is None:
            return None

        booking.change_status(status)
        updated = self._repository.update(booking_id, {"status": booking.status})
        logger.info(
            "Booking status updated",
            extra={"booking_id": str(booking_id), "status": status.value},
        )
        return updated
