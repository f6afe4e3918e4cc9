from typing import Dict, Iterable, List, Optional, Set

from happy_hotel.application import ports
from happy_hotel.domain.exceptions import BusinessException
from happy_hotel.domain.value_objects import BookingRequest, Room, RoomId


class InMemoryRoomInventory(ports.RoomInventory):
    """Реализация источника номеров в памяти."""

    def __init__(self, rooms: Optional[Iterable[Room]] = None):
        self._rooms: Dict[RoomId, Room] = {}
        self._taken: Set[RoomId] = set()
        for room in rooms or ():
            self.add(room)

    def add(self, room: Room) -> None:
        if room.room_id in self._rooms:
            raise ValueError(f"Номер {room.room_id} уже добавлен")
        self._rooms[room.room_id] = room

    def list_available_rooms(self) -> List[Room]:
        return [
            room for room in self._rooms.values() if room.room_id not in self._taken
        ]

    def select_room_for(self, request: BookingRequest) -> RoomId:
        for room in self.list_available_rooms():
            if room.capacity >= request.person_count:
                return room.room_id
        raise BusinessException(
            f"Нет свободного номера для {request.person_count} гостей"
        )

    def reserve(self, room_id: RoomId) -> None:
        if room_id not in self._rooms:
            raise BusinessException(f"Номер {room_id} не существует")
        if room_id in self._taken:
            raise BusinessException(f"Номер {room_id} уже занят")
        self._taken.add(room_id)

    def release(self, room_id: RoomId) -> None:
        if room_id not in self._rooms:
            raise BusinessException(f"Номер {room_id} не существует")
        # Освобождение свободного номера ничего не меняет
        self._taken.discard(room_id)
