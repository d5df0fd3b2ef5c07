"""Domain models for statistics."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AdherenceStats:
    """Diet adherence totals for one user."""

    total_meals: int
    total_on_diet: int
    total_off_diet: int
    best_on_diet_streak: int
