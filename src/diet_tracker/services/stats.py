"""Diet adherence statistics."""

from collections.abc import Iterable
from dataclasses import dataclass
from uuid import UUID

from diet_tracker.domain.meals import MealRecord
from diet_tracker.domain.stats import AdherenceStats
from diet_tracker.services.meals import MealRepository


@dataclass
class StatsService:
    """Service for computing a user's adherence stats."""

    repository: MealRepository

    def compute(self, owner_id: UUID) -> AdherenceStats:
        """Return totals and the best on-diet streak from one meal fetch."""
        return summarize(self.repository.list_meals(owner_id))


def summarize(meals: Iterable[MealRecord]) -> AdherenceStats:
    """Aggregate meals in the order given, counting and tracking streaks."""
    total = 0
    on_diet = 0
    current_streak = 0
    best_streak = 0
    for meal in meals:
        total += 1
        if meal.on_diet:
            on_diet += 1
            current_streak += 1
            best_streak = max(best_streak, current_streak)
        else:
            current_streak = 0
    return AdherenceStats(
        total_meals=total,
        total_on_diet=on_diet,
        total_off_diet=total - on_diet,
        best_on_diet_streak=best_streak,
    )
