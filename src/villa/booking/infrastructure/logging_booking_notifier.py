from aws_lambda_powertools import Logger

from villa.booking.domain.entity import Booking
from villa.booking.domain.notifier import BookingNotifier
from villa.booking.infrastructure.confirmation_email import render_confirmation_email

logger = Logger(child=True)


class LoggingBookingNotifier(BookingNotifier):
    """送信元アドレス未設定時に使う BookingNotifier（ログ出力のみ）"""

    def notify(self, booking: Booking) -> bool:
        message = render_confirmation_email(booking)
        logger.info(
            "Confirmation email not sent (SENDER_EMAIL is not configured)",
            extra={
                "booking_id": str(booking.id),
                "recipient": booking.guest.email,
                "subject": message.subject,
            },
        )
        return True
