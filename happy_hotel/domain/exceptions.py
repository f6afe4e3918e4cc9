"""
Исключения доменного слоя.
"""


class DomainException(Exception):
    """Базовое исключение для доменных ошибок."""

    pass


class ValidationException(DomainException):
    """Исключение: некорректный запрос на бронирование."""

    pass


class BusinessException(DomainException):
    """Исключение: внешний сервис отказал в выполнении операции."""

    pass


class NotFoundException(DomainException):
    """Исключение: бронирование не найдено."""

    def __init__(self, booking_id: str):
        super().__init__(f"Бронирование с ID {booking_id} не найдено.")
        self.booking_id = booking_id
