"""
Правило расчета стоимости проживания.

Стоимость = ночи × гости × тариф за человека в сутки.
"""

from .exceptions import ValidationException
from .value_objects import BookingRequest

RATE_PER_PERSON_PER_NIGHT = 50.0


def validate_request(request: BookingRequest) -> None:
    """Проверяет период проживания и количество гостей."""
    if request.nights <= 0:
        raise ValidationException("Дата выезда должна быть позже даты заезда.")
    if request.person_count <= 0:
        raise ValidationException("Количество гостей должно быть положительным.")


def calculate_price(
    request: BookingRequest, rate_per_person_per_night: float = RATE_PER_PERSON_PER_NIGHT
) -> float:
    """Рассчитывает стоимость проживания по запросу."""
    validate_request(request)
    return float(request.nights * request.person_count * rate_per_person_per_night)
