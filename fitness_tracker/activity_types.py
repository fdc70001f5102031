"""Registry of training codes and construction of training variants."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Mapping

from .errors import TrainingParameterError, UnknownTrainingTypeError
from .trainings import Running, Swimming, Training, Walking

__all__ = ["TRAINING_TYPES", "normalize_training_code", "build_training"]

LOGGER = logging.getLogger(__name__)

TRAINING_TYPES: Mapping[str, type[Training]] = MappingProxyType(
    {
        "RUN": Running,
        "WLK": Walking,
        "SWM": Swimming,
    }
)


def normalize_training_code(value: Any) -> str | None:
    """Return an upper-case training code or ``None`` when missing.

    Codes may arrive with stray whitespace or inconsistent casing.
    Normalising once keeps the registry lookup exact.
    """

    if value is None:
        return None
    normalized = str(value).strip().upper()
    return normalized or None


def build_training(code: Any, **params: Any) -> Training:
    """Construct the training variant registered under ``code``.

    Args:
        code: Training code such as ``"RUN"``, ``"WLK"`` or ``"SWM"``.
        **params: Keyword fields for the variant. ``training_type`` and
            ``len_step`` fall back to the variant defaults when omitted.

    Returns:
        The constructed, immutable training record.

    Raises:
        UnknownTrainingTypeError: ``code`` is not a registered variant.
        TrainingParameterError: the variant rejects ``params``.
    """

    normalized = normalize_training_code(code)
    training_cls = TRAINING_TYPES.get(normalized) if normalized else None
    if training_cls is None:
        raise UnknownTrainingTypeError(
            f"Unknown training code {code!r}; expected one of "
            f"{', '.join(sorted(TRAINING_TYPES))}"
        )
    try:
        training = training_cls(**params)
    except TypeError as exc:
        raise TrainingParameterError(
            f"Cannot build {training_cls.__name__} from {sorted(params)}: {exc}"
        ) from exc
    LOGGER.debug("Built %s training from code %s", training_cls.__name__, normalized)
    return training
