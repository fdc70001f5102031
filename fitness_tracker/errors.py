"""Central error types used across the application."""

from __future__ import annotations


class TrainingError(RuntimeError):
    """Base error for training construction failures."""


class UnknownTrainingTypeError(TrainingError):
    """Raised when a training code is not one of the registered variants."""


class TrainingParameterError(TrainingError):
    """Raised when a variant cannot be built from the supplied parameters."""


__all__ = [
    "TrainingError",
    "UnknownTrainingTypeError",
    "TrainingParameterError",
]
