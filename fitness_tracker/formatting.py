"""Plain-text rendering of training summaries."""

from __future__ import annotations

from datetime import timedelta
from typing import TYPE_CHECKING

from .constants import SEC_IN_MIN

if TYPE_CHECKING:
    from .models import InfoMessage
    from .trainings import CaloriesCalculator

__all__ = ["format_minutes", "format_message", "read_data"]

MESSAGE_TEMPLATE = (
    "Тип тренировки: {training_type}\n"
    "Длительность: {minutes} мин\n"
    "Дистанция: {distance:.2f} км.\n"
    "Ср. скорость: {speed:.2f} км/ч\n"
    "Потрачено ккал: {calories:.2f}\n"
)


def format_minutes(duration: timedelta) -> str:
    """Return the duration in minutes using the shortest exact form.

    Whole minutes render without a fractional part (``90``); anything else
    uses the shortest round-tripping representation (``1.5``).
    """

    minutes = duration.total_seconds() / SEC_IN_MIN
    if minutes.is_integer():
        return str(int(minutes))
    return repr(minutes)


def format_message(info: InfoMessage) -> str:
    """Render ``info`` into the fixed multi-line report."""

    return MESSAGE_TEMPLATE.format(
        training_type=info.training_type,
        minutes=format_minutes(info.duration),
        distance=info.distance,
        speed=info.speed,
        calories=info.calories,
    )


def read_data(training: CaloriesCalculator) -> str:
    """Summarise ``training`` and return its formatted report."""

    return format_message(training.training_info())
