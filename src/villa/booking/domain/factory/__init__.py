from .booking_factory import BookingChanges, BookingDetails, BookingFactory

__all__ = ["BookingChanges", "BookingDetails", "BookingFactory"]
