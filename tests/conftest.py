"""Global pytest fixtures & helpers.

Adds project root to path and provides the training sessions shared by the
model, formatting and entry point tests.
"""
from __future__ import annotations

import os
import sys
from datetime import timedelta
import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from fitness_tracker.models import InfoMessage
from fitness_tracker.trainings import Running, Swimming, Walking


# --- Fixtures --------------------------------------------------------
@pytest.fixture
def running():
    return Running(action=5000, duration=timedelta(minutes=30), weight=85)


@pytest.fixture
def walking():
    return Walking(
        action=20000,
        duration=timedelta(hours=3, minutes=45),
        weight=85,
        height=185,
    )


@pytest.fixture
def swimming():
    return Swimming(
        action=2000,
        duration=timedelta(minutes=90),
        weight=85,
        length_pool=50,
        count_pool=5,
    )


@pytest.fixture
def info_message():
    return InfoMessage(
        training_type="Бег",
        duration=timedelta(minutes=30),
        distance=3.25,
        speed=6.5,
        calories=302.914,
    )
