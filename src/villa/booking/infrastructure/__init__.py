from .in_memory_booking_repository import InMemoryBookingRepository
from .logging_booking_notifier import LoggingBookingNotifier
from .ses_booking_notifier import SesBookingNotifier

__all__ = ["InMemoryBookingRepository", "LoggingBookingNotifier", "SesBookingNotifier"]
