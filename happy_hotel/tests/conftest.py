"""
Общие фикстуры для тестов сервиса бронирования.
"""

from datetime import date

import pytest

from happy_hotel.application.services import BookingService
from happy_hotel.domain.value_objects import BookingRequest
from happy_hotel.tests.doubles import (
    Journal,
    RecordingBookingStore,
    RecordingLogger,
    RecordingNotifier,
    RecordingPaymentProcessor,
    StubRoomInventory,
)


@pytest.fixture
def journal() -> Journal:
    return Journal()


@pytest.fixture
def room_inventory(journal: Journal) -> StubRoomInventory:
    return StubRoomInventory(journal)


@pytest.fixture
def payment_processor(journal: Journal) -> RecordingPaymentProcessor:
    return RecordingPaymentProcessor(journal)


@pytest.fixture
def booking_store(journal: Journal) -> RecordingBookingStore:
    return RecordingBookingStore(journal)


@pytest.fixture
def notifier(journal: Journal) -> RecordingNotifier:
    return RecordingNotifier(journal)


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def booking_service(
    payment_processor: RecordingPaymentProcessor,
    room_inventory: StubRoomInventory,
    booking_store: RecordingBookingStore,
    notifier: RecordingNotifier,
    recording_logger: RecordingLogger,
) -> BookingService:
    """Фикстура, предоставляющая сервис бронирования с тестовыми двойниками."""
    return BookingService(
        payment_processor=payment_processor,
        room_inventory=room_inventory,
        booking_store=booking_store,
        notifier=notifier,
        logger=recording_logger,
    )


@pytest.fixture
def booking_request() -> BookingRequest:
    """Запрос: номер 1.01, 4 ночи, 2 гостя, без предоплаты."""
    return BookingRequest(
        room_id="1.01",
        check_in=date(2020, 1, 1),
        check_out=date(2020, 1, 5),
        person_count=2,
        prepaid=False,
    )
