from dataclasses import dataclass
from typing import List, Optional
from uuid import uuid4

from happy_hotel.application import ports
from happy_hotel.domain.exceptions import BusinessException
from happy_hotel.domain.value_objects import BookingRequest, RoomId

DEFAULT_PAYMENT_LIMIT = 200.0


@dataclass(frozen=True)
class PaymentRecord:
    """Принятый платеж."""

    payment_id: str
    room_id: Optional[RoomId]
    amount: float


class ThresholdPaymentProcessor(ports.PaymentProcessor):
    """Заглушка платежного сервиса: отклоняет суммы выше лимита."""

    def __init__(self, limit: float = DEFAULT_PAYMENT_LIMIT):
        self.limit = limit
        self.processed_payments: List[PaymentRecord] = []

    def charge(self, request: BookingRequest, amount: float) -> None:
        if amount <= 0:
            raise BusinessException("Сумма платежа должна быть положительной")
        if amount > self.limit:
            raise BusinessException(
                f"Сумма платежа {amount} превышает лимит {self.limit}"
            )
        self.processed_payments.append(
            PaymentRecord(payment_id=str(uuid4()), room_id=request.room_id, amount=amount)
        )
