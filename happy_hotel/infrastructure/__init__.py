"""
Инфраструктурный слой: простые реализации портов сервиса бронирования.
"""

from .logger import ConsoleLogger, configure_logging
from .bookings import BookingRecord, InMemoryBookingStore, JsonFileBookingStore
from .notifications import ConsoleNotifier
from .payments import PaymentRecord, ThresholdPaymentProcessor
from .rooms import InMemoryRoomInventory

__all__ = [
    "ConsoleLogger",
    "configure_logging",
    "BookingRecord",
    "InMemoryBookingStore",
    "JsonFileBookingStore",
    "ConsoleNotifier",
    "PaymentRecord",
    "ThresholdPaymentProcessor",
    "InMemoryRoomInventory",
]
