from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

BookingId = str
RoomId = str


@dataclass
class BookingRequest:
    """Запрос на бронирование.

    Номер (room_id) может быть не указан: тогда его назначает
    сервис бронирования при оформлении.
    """

    room_id: Optional[RoomId]
    check_in: date
    check_out: date
    person_count: int
    prepaid: bool = False

    @property
    def nights(self) -> int:
        """Количество ночей в бронировании."""
        return (self.check_out - self.check_in).days


@dataclass(frozen=True)
class Room:
    """Номер отеля и его вместимость."""

    room_id: RoomId
    capacity: int

    def __post_init__(self):
        if self.capacity <= 0:
            raise ValueError("Вместимость номера должна быть положительной.")


@dataclass(frozen=True)
class Booking:
    """Сохраненное бронирование: запрос и присвоенный ему идентификатор."""

    booking_id: BookingId
    request: BookingRequest

    def __post_init__(self):
        if not self.booking_id:
            raise ValueError("Идентификатор бронирования не может быть пустым.")

    @property
    def room_id(self) -> Optional[RoomId]:
        return self.request.room_id

    @property
    def nights(self) -> int:
        return self.request.nights
