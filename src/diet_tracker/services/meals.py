"""Meal ledger service scoped to a single owner."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from diet_tracker.domain.meals import MealDraft, MealRecord
from diet_tracker.errors import NotFoundError

logger = logging.getLogger(__name__)


class MealRepository(Protocol):
    """Persistence interface for meals.

    Every method that addresses a meal by id also filters on the owner, so a
    foreign meal behaves exactly like a missing one.
    """

    def create_meal(self, owner_id: UUID, draft: MealDraft) -> MealRecord:
        """Insert a meal for the owner and return it."""

    def list_meals(self, owner_id: UUID) -> list[MealRecord]:
        """Return the owner's meals, most recent first."""

    def get_meal(self, owner_id: UUID, meal_id: UUID) -> MealRecord | None:
        """Return one of the owner's meals by id."""

    def update_meal(
        self, owner_id: UUID, meal_id: UUID, draft: MealDraft, updated_at: datetime
    ) -> MealRecord | None:
        """Update the meal matching (id, owner) and return it, if any matched."""

    def delete_meal(self, owner_id: UUID, meal_id: UUID) -> bool:
        """Delete the meal matching (id, owner) and report whether one matched."""


@dataclass
class MealService:
    """Service for recording and editing a user's meals."""

    repository: MealRepository

    def create(self, owner_id: UUID, draft: MealDraft) -> MealRecord:
        """Record a meal for the owner."""
        meal = self.repository.create_meal(owner_id, draft)
        logger.info(
            "Meal created",
            extra={"user_id": str(owner_id), "meal_id": str(meal.id)},
        )
        return meal

    def list_meals(self, owner_id: UUID) -> list[MealRecord]:
        """Return the owner's meals, most recent first."""
        return self.repository.list_meals(owner_id)

    def get(self, owner_id: UUID, meal_id: UUID) -> MealRecord:
        """Return one of the owner's meals or raise NotFoundError."""
        meal = self.repository.get_meal(owner_id, meal_id)
        if meal is None:
            raise NotFoundError()
        return meal

    def update(self, owner_id: UUID, meal_id: UUID, draft: MealDraft) -> MealRecord:
        """Replace the editable fields of one of the owner's meals."""
        meal = self.repository.update_meal(
            owner_id, meal_id, draft, updated_at=datetime.now(tz=UTC)
        )
        if meal is None:
            raise NotFoundError()
        logger.info(
            "Meal updated",
            extra={"user_id": str(owner_id), "meal_id": str(meal_id)},
        )
        return meal

    def delete(self, owner_id: UUID, meal_id: UUID) -> None:
        """Remove one of the owner's meals."""
        if not self.repository.delete_meal(owner_id, meal_id):
            raise NotFoundError()
        logger.info(
            "Meal deleted",
            extra={"user_id": str(owner_id), "meal_id": str(meal_id)},
        )
