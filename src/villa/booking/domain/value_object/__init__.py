from .booking_id import BookingId
from .guest_contact import GuestContact
from .guest_count import GuestCount
from .stay_period import StayPeriod

__all__ = ["BookingId", "GuestContact", "GuestCount", "StayPeriod"]
