from .entity import Booking
from .enum import BookingStatus
from .factory import BookingChanges, BookingDetails, BookingFactory
from .notifier import BookingNotifier
from .repository import BookingRepository
from .value_object import BookingId, GuestContact, GuestCount, StayPeriod

__all__ = [
    "Booking",
    "BookingStatus",
    "BookingChanges",
    "BookingDetails",
    "BookingFactory",
    "BookingNotifier",
    "BookingRepository",
    "BookingId",
    "GuestContact",
    "GuestCount",
    "StayPeriod",
]
