import sys
from typing import List, Optional, TextIO

from happy_hotel.application import ports
from happy_hotel.domain.exceptions import BusinessException
from happy_hotel.domain.value_objects import BookingId, BookingRequest


def render_confirmation(request: BookingRequest, booking_id: BookingId) -> str:
    """Формирует текст подтверждения бронирования."""
    return "\n".join(
        [
            "--- [Подтверждение бронирования] ---",
            f"Бронирование: {booking_id}",
            f"Номер: {request.room_id}",
            f"Заезд: {request.check_in.isoformat()}",
            f"Выезд: {request.check_out.isoformat()}",
            f"Ночей: {request.nights}",
            f"Гостей: {request.person_count}",
            f"Предоплата: {'да' if request.prepaid else 'нет'}",
            "--- [Конец сообщения] ---",
        ]
    )


class ConsoleNotifier(ports.Notifier):
    """Сервис уведомлений, который выводит сообщения в консоль."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream
        self.sent: List[BookingId] = []

    def send_booking_confirmation(
        self, request: BookingRequest, booking_id: BookingId
    ) -> None:
        stream = self._stream or sys.stdout
        try:
            print(render_confirmation(request, booking_id), file=stream, flush=True)
        except (OSError, ValueError) as e:
            raise BusinessException(
                f"Не удалось отправить подтверждение бронирования {booking_id}: {e}"
            ) from e
        self.sent.append(booking_id)
