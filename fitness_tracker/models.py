from dataclasses import dataclass
from datetime import timedelta

from .formatting import format_message


@dataclass(frozen=True)
class InfoMessage:
    training_type: str
    duration: timedelta
    # Kilometres
    distance: float
    # km/h
    speed: float
    # kcal
    calories: float

    def get_message(self) -> str:
        return format_message(self)

    def __str__(self) -> str:
        return self.get_message()
