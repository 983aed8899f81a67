"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
Money and Weight are fixed-point integers (cents and grams) bounded by
a 32-bit unsigned storage width.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from stockorder.domain.exceptions import ValidationError

STORAGE_MAX = 2**32 - 1

GRAMS_PER_OUNCE = 28.349523125
GRAMS_PER_POUND = 453.59237

# Display bands: pounds from 2 lb (rounded up to the gram) upward,
# ounces from 2 oz upward, grams below that.
POUND_BAND_GRAMS = 908
OUNCE_BAND_GRAMS = 57


def _check_units(value: int, kind: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(
            f"{kind} must be an integer, got {type(value).__name__}"
        )
    if value < 0:
        raise ValidationError(f"{kind} cannot be negative, got {value}")
    if value > STORAGE_MAX:
        raise ValidationError(f"{kind} {value} exceeds maximum {STORAGE_MAX}")


@dataclass(frozen=True, order=True)
class Money:
    """Monetary amount as a count of cents."""

    cents: int

    def __post_init__(self) -> None:
        _check_units(self.cents, "Money amount")

    # --- Arithmetic helpers ---------------------------------------------------

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.cents * factor)

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.cents // 100}.{self.cents % 100:02d}"


@dataclass(frozen=True, order=True)
class Weight:
    """Weight as a count of grams.

    The stored unit is always grams; ``str()`` is a lossy, human-facing
    rendering that picks pounds, ounces or grams by magnitude and always
    rounds up.
    """

    grams: int

    def __post_init__(self) -> None:
        _check_units(self.grams, "Weight")

    def __str__(self) -> str:
        if self.grams >= POUND_BAND_GRAMS:
            return f"{math.ceil(self.grams / GRAMS_PER_POUND)}lb"
        if self.grams >= OUNCE_BAND_GRAMS:
            return f"{math.ceil(self.grams / GRAMS_PER_OUNCE)}oz"
        return f"{self.grams}g"


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that you cannot order zero or negative items.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)
