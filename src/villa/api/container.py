from __future__ import annotations

import os
from dataclasses import dataclass, field

from villa.booking.applications import CreateBookingService, UpdateBookingStatusService
from villa.booking.domain.notifier import BookingNotifier
from villa.booking.domain.repository import BookingRepository
from villa.booking.infrastructure import (
    InMemoryBookingRepository,
    LoggingBookingNotifier,
    SesBookingNotifier,
)
from villa.contact.domain.repository import ContactRepository
from villa.contact.infrastructure import InMemoryContactRepository
from villa.content.domain.repository import ContentSectionRepository
from villa.content.infrastructure import InMemoryContentSectionRepository
from villa.gallery.domain.repository import PropertyImageRepository
from villa.gallery.infrastructure import InMemoryPropertyImageRepository
from villa.payment.applications import ProcessPaymentService


@dataclass
class Container:
    """ルートハンドラに渡す依存オブジェクト一式

    リポジトリは Lambda 実行環境ごとに1度だけ生成し、呼び出しをまたいで共有する。
    """

    booking_repository: BookingRepository
    contact_repository: ContactRepository
    content_repository: ContentSectionRepository
    image_repository: PropertyImageRepository
    notifier: BookingNotifier
    create_booking: CreateBookingService = field(init=False)
    update_booking_status: UpdateBookingStatusService = field(init=False)
    process_payment: ProcessPaymentService = field(init=False)

    def __post_init__(self) -> None:
        self.create_booking = CreateBookingService(
            repository=self.booking_repository, notifier=self.notifier
        )
        self.update_booking_status = UpdateBookingStatusService(
            repository=self.booking_repository
        )
        self.process_payment = ProcessPaymentService(
            create_booking=self.create_booking
        )

    @classmethod
    def in_memory(cls, notifier: BookingNotifier | None = None) -> Container:
        """インメモリのリポジトリで組み立てる"""
        return cls(
            booking_repository=InMemoryBookingRepository(),
            contact_repository=InMemoryContactRepository(),
            content_repository=InMemoryContentSectionRepository(),
            image_repository=InMemoryPropertyImageRepository(),
            notifier=notifier or LoggingBookingNotifier(),
        )

    @classmethod
    def from_env(cls) -> Container:
        """環境変数から組み立てる（SENDER_EMAIL があれば SES で確定メールを送る）"""
        sender = os.getenv("SENDER_EMAIL")
        notifier = SesBookingNotifier(sender=sender) if sender else None
        return cls.in_memory(notifier=notifier)
