"""予約確定メールの本文生成"""

from dataclasses import dataclass
from datetime import date
from html import escape

from villa.booking.domain.entity import Booking

SENDER_NAME = "LuxeStay"
CONCIERGE_PHONE = "+1 (555) 123-4567"
RESERVATIONS_EMAIL = "reservations@luxestay.com"
CONCIERGE_EMAIL = "concierge@luxestay.com"


@dataclass(frozen=True)
class EmailMessage:
    subject: str
    html: str
    text: str


def format_long_date(value: date) -> str:
    """例: Monday, July 1, 2025"""
    return f"{value:%A}, {value:%B} {value.day}, {value.year}"


def _pluralize(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


def render_confirmation_email(booking: Booking) -> EmailMessage:
    """予約確定メールの件名・HTML・テキスト本文を生成する"""

    booking_id = str(booking.id)
    checkin = format_long_date(booking.stay_period.check_in)
    checkout = format_long_date(booking.stay_period.check_out)
    duration = _pluralize(booking.nights(), "night")
    guests = str(booking.guests)
    total = f"${booking.total_amount.to_decimal_string()}"

    rows = [
        ("Booking ID", booking_id),
        ("Check-in", checkin),
        ("Check-out", checkout),
        ("Duration", duration),
        ("Guests", guests),
        ("Total Amount", total),
    ]

    html_rows = "\n".join(
        f'<tr><td class="label">{escape(label)}:</td>'
        f'<td class="value">{escape(value)}</td></tr>'
        for label, value in rows
    )
    html = f"""<!DOCTYPE html>
<html>
<head><meta charset="utf-8"><title>Booking Confirmation - {SENDER_NAME}</title></head>
<body>
  <h1>Booking Confirmed!</h1>
  <p>Dear {escape(booking.guest.name)},</p>
  <p>Thank you for choosing {SENDER_NAME}! We're excited to confirm your reservation at our luxury villa.</p>
  <table>
{html_rows}
  </table>
  <h3>What's Next?</h3>
  <ul>
    <li>Our concierge team will contact you 48 hours before your arrival</li>
    <li>Check-in time is 3:00 PM, check-out is 11:00 AM</li>
    <li>Airport transfer can be arranged upon request</li>
  </ul>
  <p><strong>Phone:</strong> {CONCIERGE_PHONE}<br>
  <strong>Email:</strong> {RESERVATIONS_EMAIL}<br>
  <strong>24/7 Concierge:</strong> {CONCIERGE_EMAIL}</p>
  <p>Best regards,<br><strong>The {SENDER_NAME} Team</strong></p>
</body>
</html>
"""

    text_rows = "\n".join(f"{label}: {value}" for label, value in rows)
    text = (
        f"Dear {booking.guest.name},\n\n"
        f"Thank you for choosing {SENDER_NAME}! Your reservation is confirmed.\n\n"
        f"{text_rows}\n\n"
        f"Phone: {CONCIERGE_PHONE}\n"
        f"Email: {RESERVATIONS_EMAIL}\n"
    )

    return EmailMessage(
        subject=(
            f"Booking Confirmed - {SENDER_NAME} Villa Reservation #{booking_id[-8:]}"
        ),
        html=html,
        text=text,
    )
