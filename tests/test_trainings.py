"""Distance, speed and calorie calculations for each training variant."""

from __future__ import annotations

import math
from datetime import timedelta

import pytest

from fitness_tracker.constants import LEN_STEP, SWIMMING_LEN_STEP
from fitness_tracker.models import InfoMessage
from fitness_tracker.trainings import Running, Swimming, Training, Walking

ZERO = timedelta(0)


def test_running_scenario(running):
    assert running.distance() == pytest.approx(3.25)
    assert running.mean_speed() == pytest.approx(6.5)
    expected = (18 * 6.5 + 1.79) * 85 / 1000 * 0.5 * 60
    assert running.calories() == pytest.approx(expected)
    assert running.calories() == pytest.approx(302.91, abs=0.01)


def test_walking_scenario(walking):
    assert walking.distance() == pytest.approx(13.0)
    speed = 13 / 3.75
    assert walking.mean_speed() == pytest.approx(speed)
    v = speed * 0.278
    expected = (0.035 * 85 + (v**2 / 185) * 0.029 * 85) * 3.75 * 60
    assert walking.calories() == pytest.approx(expected)


def test_swimming_speed_uses_pool_geometry(swimming):
    # Strokes still drive the distance; the pool drives the speed.
    assert swimming.distance() == pytest.approx(2000 * 1.38 / 1000)
    speed = 50 * 5 / 1000 / 1.5
    assert swimming.mean_speed() == pytest.approx(speed)
    expected = (speed + 1.1) * 2 * 85 * 1.5
    assert swimming.calories() == pytest.approx(expected)


def test_variant_defaults():
    run = Running(action=1, duration=ZERO, weight=1)
    walk = Walking(action=1, duration=ZERO, weight=1, height=1)
    swim = Swimming(action=1, duration=ZERO, weight=1, length_pool=1, count_pool=1)
    assert (run.training_type, run.len_step) == ("Бег", LEN_STEP)
    assert (walk.training_type, walk.len_step) == ("Ходьба", LEN_STEP)
    assert (swim.training_type, swim.len_step) == ("Плавание", SWIMMING_LEN_STEP)


@pytest.mark.parametrize(
    "training",
    [
        Running(action=0, duration=timedelta(hours=1), weight=70),
        Walking(action=0, duration=timedelta(hours=1), weight=70, height=175),
        Swimming(
            action=0,
            duration=timedelta(hours=1),
            weight=70,
            length_pool=25,
            count_pool=10,
        ),
    ],
)
def test_distance_is_zero_without_repetitions(training):
    assert training.distance() == 0


@pytest.mark.parametrize(
    "training",
    [
        Training(training_type="Тренировка", action=1000, duration=ZERO, weight=70),
        Running(action=1000, duration=ZERO, weight=70),
        Walking(action=1000, duration=ZERO, weight=70, height=175),
        Swimming(action=1000, duration=ZERO, weight=70, length_pool=25, count_pool=10),
    ],
)
def test_zero_duration_is_total(training):
    assert training.mean_speed() == 0.0
    calories = training.calories()
    assert math.isfinite(calories)
    assert calories == 0.0


def test_walking_zero_height_guard(caplog):
    walking = Walking(action=10000, duration=timedelta(hours=2), weight=70, height=0)
    with caplog.at_level("DEBUG", logger="fitness_tracker.trainings"):
        calories = walking.calories()
    assert calories == 0.0
    assert "Zero height" in caplog.text


def test_base_training_burns_nothing():
    training = Training(
        training_type="Тренировка", action=1000, duration=timedelta(hours=1), weight=70
    )
    assert training.calories() == 0.0
    assert training.mean_speed() == pytest.approx(0.65)


def test_training_info_composes_all_metrics(running):
    info = running.training_info()
    assert isinstance(info, InfoMessage)
    assert info.training_type == "Бег"
    assert info.duration == timedelta(minutes=30)
    assert info.distance == running.distance()
    assert info.speed == running.mean_speed()
    assert info.calories == running.calories()


def test_training_info_is_repeatable(walking, swimming):
    for training in (walking, swimming):
        assert training.training_info() == training.training_info()


def test_trainings_are_immutable(running):
    with pytest.raises(AttributeError):
        running.weight = 90  # type: ignore[misc]
