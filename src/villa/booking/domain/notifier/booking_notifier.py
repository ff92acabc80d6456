from abc import ABC, abstractmethod

from villa.booking.domain.entity import Booking


class BookingNotifier(ABC):
    """予約確定通知のインターフェース

    送信に失敗しても例外は投げず、False を返す。
    """

    @abstractmethod
    def notify(self, booking: Booking) -> bool:
        raise NotImplementedError
