"""Workout statistics for running, walking and swimming sessions."""

from .main import main
from .models import InfoMessage
from .trainings import Training, Running, Walking, Swimming
from .activity_types import build_training
from .formatting import format_message, read_data
from .errors import TrainingError, UnknownTrainingTypeError, TrainingParameterError

__all__ = [
    "main",
    "InfoMessage",
    "Training",
    "Running",
    "Walking",
    "Swimming",
    "build_training",
    "format_message",
    "read_data",
    "TrainingError",
    "UnknownTrainingTypeError",
    "TrainingParameterError",
]
