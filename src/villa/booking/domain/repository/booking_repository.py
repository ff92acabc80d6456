from abc import abstractmethod

from villa.booking.domain.entity import Booking
from villa.booking.domain.factory import BookingChanges, BookingDetails
from villa.booking.domain.value_object import BookingId
from villa.shared.domain import Repository


class BookingRepository(Repository[Booking, BookingId]):
    """予約レポジトリのインターフェース"""

    @abstractmethod
    def create(self, details: BookingDetails) -> Booking:
        """予約IDと作成日時を採番して保存する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        """予約IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Booking]:
        """作成日時の新しい順に返す"""
        raise NotImplementedError

    @abstractmethod
    def update(self, booking_id: BookingId, changes: BookingChanges) -> Booking | None:
        """指定項目だけを更新する（存在しない場合は None）"""
        raise NotImplementedError
