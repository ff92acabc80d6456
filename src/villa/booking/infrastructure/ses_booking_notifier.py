import os

import boto3
from aws_lambda_powertools import Logger
from botocore.exceptions import BotoCoreError, ClientError

from villa.booking.domain.entity import Booking
from villa.booking.domain.notifier import BookingNotifier
from villa.booking.infrastructure.confirmation_email import render_confirmation_email

logger = Logger(child=True)

CHARSET = "UTF-8"


class SesBookingNotifier(BookingNotifier):
    """Amazon SES を使って予約確定メールを送る BookingNotifier"""

    def __init__(self, sender: str | None = None, client=None) -> None:
        self.sender = sender or os.environ["SENDER_EMAIL"]
        self.client = client or boto3.client("ses")

    def notify(self, booking: Booking) -> bool:
        message = render_confirmation_email(booking)
        try:
            self.client.send_email(
                Source=self.sender,
                Destination={"ToAddresses": [booking.guest.email]},
                Message={
                    "Subject": {"Data": message.subject, "Charset": CHARSET},
                    "Body": {
                        "Html": {"Data": message.html, "Charset": CHARSET},
                        "Text": {"Data": message.text, "Charset": CHARSET},
                    },
                },
            )
        except (BotoCoreError, ClientError):
            logger.exception(
                "Failed to send confirmation email via SES",
                extra={"booking_id": str(booking.id)},
            )
            return False

        logger.info("Confirmation email sent", extra={"booking_id": str(booking.id)})
        return True
