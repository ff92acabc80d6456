from .create_booking import CreateBookingService
from .update_booking_status import UpdateBookingStatusService

__all__ = ["CreateBookingService", "UpdateBookingStatusService"]
