from .booking_notifier import BookingNotifier

__all__ = ["BookingNotifier"]
