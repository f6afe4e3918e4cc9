"""
Прикладной слой: порты внешних сервисов и сервис бронирования.
"""

from . import ports
from .services import BookingService

__all__ = [
    "ports",
    "BookingService",
]
