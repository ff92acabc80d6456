from collections.abc import Callable
from datetime import datetime, timezone

from villa.booking.domain.entity import Booking
from villa.booking.domain.factory import BookingChanges, BookingDetails, BookingFactory
from villa.booking.domain.repository import BookingRepository
from villa.booking.domain.value_object import BookingId


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryBookingRepository(BookingRepository):
    """プロセスメモリ上の dict を使った BookingRepository の具象実装

    - 保存するのはエンティティそのものではなく入力データのコピー
    - 取得のたびにエンティティを組み立て直すため、呼び出し側の変更は保存内容に影響しない
    """

    def __init__(
        self,
        factory: BookingFactory | None = None,
        id_factory: Callable[[], BookingId] = BookingId.generate,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._factory = factory or BookingFactory()
        self._id_factory = id_factory
        self._clock = clock
        self._items: dict[str, tuple[BookingDetails, datetime]] = {}

    def create(self, details: BookingDetails) -> Booking:
        """予約を保存する"""
        booking_id = self._id_factory()
        created_at = self._clock()
        booking = self._factory.create(booking_id, details, created_at)
        self._items[str(booking_id)] = (self._factory.to_details(booking), created_at)
        return self._to_entity(str(booking_id))

    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        """予約IDで検索"""
        if str(booking_id) not in self._items:
            return None
        return self._to_entity(str(booking_id))

    def find_all(self) -> list[Booking]:
        """作成日時の降順で返す（同時刻は登録順のまま）"""
        bookings = [self._to_entity(key) for key in self._items]
        return sorted(bookings, key=lambda booking: booking.created_at, reverse=True)

    def update(self, booking_id: BookingId, changes: BookingChanges) -> Booking | None:
        """指定された項目だけをマージして保存する"""
        key = str(booking_id)
        if key not in self._items:
            return None

        details, created_at = self._items[key]
        merged: BookingDetails = {**details, **changes}

        # 不正な組み合わせ（チェックアウト日がチェックイン日以前など）は保存前に弾く
        booking = self._factory.create(booking_id, merged, created_at)
        self._items[key] = (self._factory.to_details(booking), created_at)
        return self._to_entity(key)

    def _to_entity(self, key: str) -> Booking:
        """保存データをドメインエンティティに変換する"""
        details, created_at = self._items[key]
        return self._factory.create(BookingId(value=key), details, created_at)
