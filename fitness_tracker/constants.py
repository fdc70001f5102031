"""Fixed constants used by the training calculations.

Kept in one place so every formula in :mod:`fitness_tracker.trainings`
can be audited against a single table. These values are not configurable.
"""

from __future__ import annotations

from typing import Final

# ---------------------------------------------------------------------------
# Unit conversion
# ---------------------------------------------------------------------------
# Metres in one kilometre.
M_IN_KM: Final = 1000
# Minutes in one hour.
MIN_IN_H: Final = 60
# Seconds in one hour.
SEC_IN_H: Final = 3600
# Seconds in one minute.
SEC_IN_MIN: Final = 60
# Centimetres in one metre.
CM_IN_M: Final = 100
# Factor converting km/h to m/s.
KMH_IN_MSEC: Final = 0.278

# ---------------------------------------------------------------------------
# Repetition lengths (metres)
# ---------------------------------------------------------------------------
# One walking or running step.
LEN_STEP: Final = 0.65
# One swimming stroke.
SWIMMING_LEN_STEP: Final = 1.38

# ---------------------------------------------------------------------------
# Running
# ---------------------------------------------------------------------------
CALORIES_MEAN_SPEED_MULTIPLIER: Final = 18
CALORIES_MEAN_SPEED_SHIFT: Final = 1.79

# ---------------------------------------------------------------------------
# Walking
# ---------------------------------------------------------------------------
CALORIES_WEIGHT_MULTIPLIER: Final = 0.035
CALORIES_SPEED_HEIGHT_MULTIPLIER: Final = 0.029

# ---------------------------------------------------------------------------
# Swimming
# ---------------------------------------------------------------------------
SWIMMING_CALORIES_MEAN_SPEED_SHIFT: Final = 1.1
SWIMMING_CALORIES_WEIGHT_MULTIPLIER: Final = 2
