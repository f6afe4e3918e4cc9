"""
Сервис приложения для оформления и отмены бронирований.

Координирует расчет стоимости, оплату, сохранение бронирования
и уведомление гостя. Собственного состояния между вызовами не хранит.
"""

from typing import Optional

from happy_hotel.application import ports
from happy_hotel.domain.exceptions import DomainException
from happy_hotel.domain.pricing import (
    RATE_PER_PERSON_PER_NIGHT,
    calculate_price,
    validate_request,
)
from happy_hotel.domain.value_objects import Booking, BookingId, BookingRequest
from happy_hotel.infrastructure.logger import ConsoleLogger


class BookingService:
    """Сервис приложения для работы с бронированиями."""

    def __init__(
        self,
        payment_processor: ports.PaymentProcessor,
        room_inventory: ports.RoomInventory,
        booking_store: ports.BookingStore,
        notifier: ports.Notifier,
        rate_per_person_per_night: float = RATE_PER_PERSON_PER_NIGHT,
        logger: Optional[ports.ILogger] = None,
    ):
        """Инициализирует сервис."""
        self._payment_processor = payment_processor
        self._room_inventory = room_inventory
        self._booking_store = booking_store
        self._notifier = notifier
        self._rate = rate_per_person_per_night
        self._logger = logger or ConsoleLogger()

    def calculate_price(self, request: BookingRequest) -> float:
        """Рассчитывает стоимость проживания по запросу."""
        return calculate_price(request, self._rate)

    def get_available_place_count(self) -> int:
        """Возвращает суммарную вместимость свободных номеров."""
        rooms = self._room_inventory.list_available_rooms()
        return sum(room.capacity for room in rooms)

    def make_booking(self, request: BookingRequest) -> BookingId:
        """Оформляет бронирование и возвращает его идентификатор.

        Порядок шагов: подбор номера, занятие номера, расчет стоимости,
        оплата (только для предоплаты), сохранение, уведомление.
        Ошибка на любом шаге прерывает оформление и пробрасывается
        вызывающему коду без изменений. Если ошибка произошла до
        сохранения, номер освобождается, а запрос возвращается
        в исходное состояние. Сохраненное бронирование при ошибке
        уведомления не удаляется.
        """
        validate_request(request)
        self._logger.debug(
            "Оформление бронирования",
            room_id=request.room_id,
            check_in=request.check_in,
            check_out=request.check_out,
            person_count=request.person_count,
            prepaid=request.prepaid,
        )

        requested_room_id = request.room_id
        try:
            room_id = requested_room_id or self._room_inventory.select_room_for(request)
            self._room_inventory.reserve(room_id)

            try:
                request.room_id = room_id
                price = self.calculate_price(request)

                if request.prepaid:
                    self._payment_processor.charge(request, price)
                    self._logger.info(
                        "Оплата бронирования принята", room_id=room_id, amount=price
                    )

                booking_id = self._booking_store.save(request)
            except Exception:
                request.room_id = requested_room_id
                self._room_inventory.release(room_id)
                raise

            self._notifier.send_booking_confirmation(request, booking_id)
        except DomainException as e:
            self._logger.error(
                "Не удалось оформить бронирование",
                room_id=request.room_id,
                error=str(e),
            )
            raise

        self._logger.info(
            "Бронирование оформлено",
            booking_id=booking_id,
            room_id=room_id,
            price=price,
        )
        return booking_id

    def get_booking(self, booking_id: BookingId) -> Booking:
        """Возвращает сохраненное бронирование."""
        return self._booking_store.get(booking_id)

    def cancel_booking(self, booking_id: BookingId) -> None:
        """Отменяет бронирование и освобождает номер."""
        booking = self._booking_store.get(booking_id)
        self._room_inventory.release(booking.room_id)
        self._booking_store.remove(booking_id)
        self._logger.info(
            "Бронирование отменено", booking_id=booking_id, room_id=booking.room_id
        )
