"""
Интерфейсы (порты) внешних сервисов, с которыми работает сервис бронирования.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, List, Protocol

from happy_hotel.domain.value_objects import (
    Booking,
    BookingId,
    BookingRequest,
    Room,
    RoomId,
)


class ILogger(Protocol):
    """Интерфейс для логгера."""

    def info(self, message: str, **kwargs: Any) -> None: ...
    def error(self, message: str, **kwargs: Any) -> None: ...
    def warning(self, message: str, **kwargs: Any) -> None: ...
    def debug(self, message: str, **kwargs: Any) -> None: ...


class RoomInventory(ABC):
    """Источник сведений о номерах отеля."""

    @abstractmethod
    def list_available_rooms(self) -> List[Room]:
        """Возвращает номера, свободные в данный момент."""
        raise NotImplementedError

    @abstractmethod
    def select_room_for(self, request: BookingRequest) -> RoomId:
        """Подбирает номер для запроса.

        Raises:
            BusinessException: если подходящего номера нет
        """
        raise NotImplementedError

    @abstractmethod
    def reserve(self, room_id: RoomId) -> None:
        """Помечает номер как занятый."""
        raise NotImplementedError

    @abstractmethod
    def release(self, room_id: RoomId) -> None:
        """Возвращает номер в число свободных."""
        raise NotImplementedError


class PaymentProcessor(ABC):
    """Платежный сервис."""

    @abstractmethod
    def charge(self, request: BookingRequest, amount: float) -> None:
        """Списывает оплату за бронирование.

        Raises:
            BusinessException: если платеж отклонен
        """
        raise NotImplementedError


class BookingStore(ABC):
    """Хранилище бронирований."""

    @abstractmethod
    def save(self, request: BookingRequest) -> BookingId:
        """Сохраняет запрос и возвращает идентификатор бронирования."""
        raise NotImplementedError

    @abstractmethod
    def get(self, booking_id: BookingId) -> Booking:
        """Находит бронирование по идентификатору.

        Raises:
            NotFoundException: если бронирования нет
        """
        raise NotImplementedError

    @abstractmethod
    def remove(self, booking_id: BookingId) -> None:
        """Удаляет бронирование."""
        raise NotImplementedError


class Notifier(ABC):
    """Сервис уведомлений гостей."""

    @abstractmethod
    def send_booking_confirmation(
        self, request: BookingRequest, booking_id: BookingId
    ) -> None:
        """Отправляет подтверждение бронирования по сохраненному запросу.

        Raises:
            BusinessException: если сообщение не доставлено
        """
        raise NotImplementedError
