import logging
from datetime import timedelta
from typing import List

from .activity_types import build_training
from .config import LOG_FORMAT, LOG_LEVEL
from .formatting import read_data
from .trainings import Training


def _setup_logging() -> None:
    if not logging.getLogger().hasHandlers():
        logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)


def sample_trainings() -> List[Training]:
    """Return the demonstration sessions in display order."""

    return [
        build_training(
            "SWM",
            action=2000,
            duration=timedelta(minutes=90),
            weight=85,
            length_pool=50,
            count_pool=40,
        ),
        build_training(
            "WLK",
            action=10000,
            duration=timedelta(hours=2),
            weight=70,
            height=175,
        ),
        build_training(
            "RUN",
            action=3000,
            duration=timedelta(minutes=30),
            weight=70,
        ),
    ]


def main() -> None:
    _setup_logging()
    trainings = sample_trainings()
    logging.info("Reporting %d sample trainings", len(trainings))
    for training in trainings:
        print(read_data(training))
