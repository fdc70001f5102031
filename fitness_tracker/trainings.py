"""Training variants and their distance, speed and calorie calculations.

The variants form a closed set: :class:`Running`, :class:`Walking` and
:class:`Swimming`. Each shares the distance/speed baseline from
:class:`Training` and supplies its own calorie formula; swimming also
derives its speed from pool geometry instead of stroke count.

Every calculation is a pure function of the frozen record. Zero
denominators (duration, height) resolve to ``0.0`` so the model never
produces NaN or infinity.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import Protocol, final

from .constants import (
    CALORIES_MEAN_SPEED_MULTIPLIER,
    CALORIES_MEAN_SPEED_SHIFT,
    CALORIES_SPEED_HEIGHT_MULTIPLIER,
    CALORIES_WEIGHT_MULTIPLIER,
    KMH_IN_MSEC,
    LEN_STEP,
    M_IN_KM,
    MIN_IN_H,
    SEC_IN_H,
    SWIMMING_CALORIES_MEAN_SPEED_SHIFT,
    SWIMMING_CALORIES_WEIGHT_MULTIPLIER,
    SWIMMING_LEN_STEP,
)
from .models import InfoMessage

LOGGER = logging.getLogger(__name__)

__all__ = [
    "CaloriesCalculator",
    "Training",
    "Running",
    "Walking",
    "Swimming",
]


class CaloriesCalculator(Protocol):
    """Capabilities shared by every training variant."""

    def distance(self) -> float: ...

    def mean_speed(self) -> float: ...

    def calories(self) -> float: ...

    def training_info(self) -> InfoMessage: ...


@dataclass(frozen=True, kw_only=True)
class Training:
    """Fields and baseline calculations common to all trainings."""

    training_type: str
    # Repetitions: steps, or strokes when swimming.
    action: int
    duration: timedelta
    # Kilograms
    weight: float
    # Metres covered by one repetition.
    len_step: float = LEN_STEP

    @property
    def duration_hours(self) -> float:
        return self.duration.total_seconds() / SEC_IN_H

    def distance(self) -> float:
        """Return the distance covered in kilometres."""

        return self.action * self.len_step / M_IN_KM

    def mean_speed(self) -> float:
        """Return the mean speed in km/h, or ``0.0`` for a zero duration."""

        hours = self.duration_hours
        if hours == 0:
            LOGGER.debug("Zero duration for %s; mean speed is 0", self.training_type)
            return 0.0
        return self.distance() / hours

    def calories(self) -> float:
        return 0.0

    def training_info(self) -> InfoMessage:
        """Return an immutable summary of the training."""

        return InfoMessage(
            training_type=self.training_type,
            duration=self.duration,
            distance=self.distance(),
            speed=self.mean_speed(),
            calories=self.calories(),
        )


@final
@dataclass(frozen=True, kw_only=True)
class Running(Training):
    training_type: str = "Бег"

    def calories(self) -> float:
        speed = self.mean_speed()
        return (
            (CALORIES_MEAN_SPEED_MULTIPLIER * speed + CALORIES_MEAN_SPEED_SHIFT)
            * self.weight
            / M_IN_KM
            * self.duration_hours
            * MIN_IN_H
        )


@final
@dataclass(frozen=True, kw_only=True)
class Walking(Training):
    training_type: str = "Ходьба"
    # Centimetres; used as-is in the calorie formula.
    height: float

    def calories(self) -> float:
        if self.height == 0:
            LOGGER.debug("Zero height for %s; calories are 0", self.training_type)
            return 0.0
        speed_m_per_sec = self.mean_speed() * KMH_IN_MSEC
        return (
            (
                CALORIES_WEIGHT_MULTIPLIER * self.weight
                + (speed_m_per_sec**2 / self.height)
                * CALORIES_SPEED_HEIGHT_MULTIPLIER
                * self.weight
            )
            * self.duration_hours
            * MIN_IN_H
        )


@final
@dataclass(frozen=True, kw_only=True)
class Swimming(Training):
    training_type: str = "Плавание"
    len_step: float = SWIMMING_LEN_STEP
    # Metres
    length_pool: float
    # Number of pool lengths swum.
    count_pool: int

    def mean_speed(self) -> float:
        """Return the speed derived from pool length and lengths swum."""

        hours = self.duration_hours
        if hours == 0:
            LOGGER.debug("Zero duration for %s; mean speed is 0", self.training_type)
            return 0.0
        return self.length_pool * self.count_pool / M_IN_KM / hours

    def calories(self) -> float:
        return (
            (self.mean_speed() + SWIMMING_CALORIES_MEAN_SPEED_SHIFT)
            * SWIMMING_CALORIES_WEIGHT_MULTIPLIER
            * self.weight
            * self.duration_hours
        )
