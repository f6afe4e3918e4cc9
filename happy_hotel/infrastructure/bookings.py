"""
Хранилища бронирований: в памяти и в JSON-файле.
"""

import json
from dataclasses import replace
from datetime import date
from pathlib import Path
from typing import Dict, List, Optional, Union
from uuid import uuid4

from pydantic import BaseModel, Field, TypeAdapter

from happy_hotel.application import ports
from happy_hotel.domain.exceptions import NotFoundException
from happy_hotel.domain.value_objects import Booking, BookingId, BookingRequest


def generate_booking_id() -> BookingId:
    """Генерирует новый идентификатор бронирования."""
    return str(uuid4())


class InMemoryBookingStore(ports.BookingStore):
    """Реализация хранилища бронирований в памяти."""

    def __init__(self):
        self._bookings: Dict[BookingId, BookingRequest] = {}

    def save(self, request: BookingRequest) -> BookingId:
        booking_id = generate_booking_id()
        # Храним копию запроса
        self._bookings[booking_id] = replace(request)
        return booking_id

    def get(self, booking_id: BookingId) -> Booking:
        if booking_id not in self._bookings:
            raise NotFoundException(booking_id)
        return Booking(booking_id=booking_id, request=replace(self._bookings[booking_id]))

    def remove(self, booking_id: BookingId) -> None:
        if booking_id not in self._bookings:
            raise NotFoundException(booking_id)
        del self._bookings[booking_id]

    def __len__(self) -> int:
        return len(self._bookings)


class BookingRecord(BaseModel):
    """Запись о бронировании в JSON-файле."""

    id: str = Field(..., min_length=1)
    room_id: Optional[str] = None
    check_in: date
    check_out: date
    person_count: int
    prepaid: bool = False

    @classmethod
    def from_request(cls, booking_id: BookingId, request: BookingRequest) -> "BookingRecord":
        return cls(
            id=booking_id,
            room_id=request.room_id,
            check_in=request.check_in,
            check_out=request.check_out,
            person_count=request.person_count,
            prepaid=request.prepaid,
        )

    def to_domain(self) -> Booking:
        return Booking(
            booking_id=self.id,
            request=BookingRequest(
                room_id=self.room_id,
                check_in=self.check_in,
                check_out=self.check_out,
                person_count=self.person_count,
                prepaid=self.prepaid,
            ),
        )


_RECORDS = TypeAdapter(List[BookingRecord])


class JsonFileBookingStore(ports.BookingStore):
    """Хранилище бронирований в JSON-файле."""

    def __init__(self, file_path: Union[str, Path]):
        """
        Инициализирует хранилище.

        Args:
            file_path: Путь к JSON-файлу с данными
        """
        self._file_path = Path(file_path)
        self._data: Dict[BookingId, BookingRecord] = {}
        self._load_data()

    def _load_data(self) -> None:
        """Загружает данные из JSON-файла."""
        if not self._file_path.exists():
            self._data = {}
            return

        with open(self._file_path, "r", encoding="utf-8") as f:
            raw_data = f.read()

        if not raw_data.strip():
            self._data = {}
            return

        records = _RECORDS.validate_json(raw_data)
        self._data = {record.id: record for record in records}

    def _save_data(self) -> None:
        """Сохраняет данные в JSON-файл."""
        # Создаем директорию, если она не существует
        self._file_path.parent.mkdir(parents=True, exist_ok=True)

        data = [record.model_dump(mode="json") for record in self._data.values()]
        with open(self._file_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

    def save(self, request: BookingRequest) -> BookingId:
        booking_id = generate_booking_id()
        self._data[booking_id] = BookingRecord.from_request(booking_id, request)
        self._save_data()
        return booking_id

    def get(self, booking_id: BookingId) -> Booking:
        record = self._data.get(booking_id)
        if record is None:
            raise NotFoundException(booking_id)
        return record.to_domain()

    def remove(self, booking_id: BookingId) -> None:
        if booking_id not in self._data:
            raise NotFoundException(booking_id)
        del self._data[booking_id]
        self._save_data()

    def __len__(self) -> int:
        return len(self._data)
