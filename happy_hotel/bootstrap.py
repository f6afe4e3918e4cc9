from typing import Iterable, Optional

from happy_hotel.application.services import BookingService
from happy_hotel.config import Settings, get_settings
from happy_hotel.domain.value_objects import Room
from happy_hotel.infrastructure import (
    ConsoleLogger,
    ConsoleNotifier,
    InMemoryBookingStore,
    InMemoryRoomInventory,
    JsonFileBookingStore,
    ThresholdPaymentProcessor,
    configure_logging,
)

SAMPLE_ROOMS = (
    Room(room_id="1.01", capacity=2),
    Room(room_id="1.02", capacity=2),
    Room(room_id="1.03", capacity=5),
    Room(room_id="2.01", capacity=3),
    Room(room_id="2.02", capacity=4),
)


def bootstrap_app(
    settings: Optional[Settings] = None, rooms: Optional[Iterable[Room]] = None
):
    """Создает и настраивает все компоненты приложения."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    # 1. Создаем адаптеры внешних сервисов
    room_inventory = InMemoryRoomInventory(SAMPLE_ROOMS if rooms is None else rooms)
    payment_processor = ThresholdPaymentProcessor(limit=settings.payment_limit)
    if settings.bookings_file:
        booking_store = JsonFileBookingStore(settings.bookings_file)
    else:
        booking_store = InMemoryBookingStore()
    notifier = ConsoleNotifier()

    # 2. Создаем сервис, передавая ему зависимости
    booking_service = BookingService(
        payment_processor=payment_processor,
        room_inventory=room_inventory,
        booking_store=booking_store,
        notifier=notifier,
        rate_per_person_per_night=settings.rate_per_person_per_night,
        logger=ConsoleLogger(),
    )

    return {
        "booking_service": booking_service,
        "room_inventory": room_inventory,
        "payment_processor": payment_processor,
        "booking_store": booking_store,
        "notifier": notifier,
    }
