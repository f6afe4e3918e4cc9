"""
Доменный слой: запрос на бронирование, номер, бронирование,
расчет стоимости и исключения.
"""

from .exceptions import (
    BusinessException,
    DomainException,
    NotFoundException,
    ValidationException,
)
from .pricing import RATE_PER_PERSON_PER_NIGHT, calculate_price, validate_request
from .value_objects import Booking, BookingId, BookingRequest, Room, RoomId

__all__ = [
    # Объекты-значения
    "BookingId",
    "RoomId",
    "BookingRequest",
    "Room",
    "Booking",
    # Расчет стоимости
    "RATE_PER_PERSON_PER_NIGHT",
    "calculate_price",
    "validate_request",
    # Исключения
    "DomainException",
    "ValidationException",
    "BusinessException",
    "NotFoundException",
]
