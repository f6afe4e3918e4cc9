"""
Настройки приложения.

Значения по умолчанию можно переопределить переменными окружения
с префиксом HAPPY_HOTEL_.
"""

import os
from functools import lru_cache
from typing import Mapping, Optional

from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "HAPPY_HOTEL_"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    """Настройки сервиса бронирования."""

    rate_per_person_per_night: float = Field(
        50.0, gt=0, description="Тариф за одного гостя в сутки"
    )
    payment_limit: float = Field(
        200.0, gt=0, description="Максимальная сумма одного платежа"
    )
    bookings_file: Optional[str] = Field(
        None, description="JSON-файл с бронированиями; если не задан, хранение в памяти"
    )
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def log_level_is_known(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Неизвестный уровень логирования: {v}")
        return level

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Создает настройки из переменных окружения."""
        environ = os.environ if environ is None else environ
        values = {}
        for name in cls.model_fields:
            key = ENV_PREFIX + name.upper()
            if key in environ:
                values[name] = environ[key]
        return cls(**values)


@lru_cache
def get_settings() -> Settings:
    """Возвращает настройки процесса (читаются один раз)."""
    return Settings.from_env()
