"""Supabase repository for meals."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from diet_tracker.adapters.supabase_query import execute, parse_timestamp
from diet_tracker.domain.meals import (
    MealDraft,
    MealRecord,
    from_epoch_millis,
    to_epoch_millis,
)
from diet_tracker.errors import StoreUnavailableError
from diet_tracker.services.meals import MealRepository

_MEAL_COLUMNS = (
    "id, owner_id, name, description, occurred_at, on_diet, created_at, updated_at"
)


@dataclass
class SupabaseMealRepository(MealRepository):
    """Supabase implementation for meals.

    Lookups, updates and deletes by id always carry an ``owner_id`` filter in
    the same request, so ownership is enforced by the store in one statement.
    """

    client: Client

    def create_meal(self, owner_id: UUID, draft: MealDraft) -> MealRecord:
        """Insert a meal row stamped with the owner."""
        payload = _draft_payload(draft)
        payload["owner_id"] = str(owner_id)
        response = execute(
            self.client.table("meals").insert(payload), "meals.create_meal"
        )
        if not response.data:
            raise StoreUnavailableError("Failed to create meal")
        return _parse_meal(response.data[0])

    def list_meals(self, owner_id: UUID) -> list[MealRecord]:
        """Return the owner's meals, most recent first."""
        response = execute(
            self.client.table("meals")
            .select(_MEAL_COLUMNS)
            .eq("owner_id", str(owner_id))
            .order("occurred_at", desc=True)
            .order("created_at", desc=True),
            "meals.list_meals",
        )
        return [_parse_meal(row) for row in response.data or []]

    def get_meal(self, owner_id: UUID, meal_id: UUID) -> MealRecord | None:
        """Return one of the owner's meals by id."""
        response = execute(
            self.client.table("meals")
            .select(_MEAL_COLUMNS)
            .eq("id", str(meal_id))
            .eq("owner_id", str(owner_id))
            .limit(1),
            "meals.get_meal",
        )
        if not response.data:
            return None
        return _parse_meal(response.data[0])

    def update_meal(
        self, owner_id: UUID, meal_id: UUID, draft: MealDraft, updated_at: datetime
    ) -> MealRecord | None:
        """Update the row matching (id, owner) and return it, if any matched."""
        payload = _draft_payload(draft)
        payload["updated_at"] = updated_at.isoformat()
        response = execute(
            self.client.table("meals")
            .update(payload)
            .eq("id", str(meal_id))
            .eq("owner_id", str(owner_id)),
            "meals.update_meal",
        )
        if not response.data:
            return None
        return _parse_meal(response.data[0])

    def delete_meal(self, owner_id: UUID, meal_id: UUID) -> bool:
        """Delete the row matching (id, owner) and report whether one matched."""
        response = execute(
            self.client.table("meals")
            .delete()
            .eq("id", str(meal_id))
            .eq("owner_id", str(owner_id)),
            "meals.delete_meal",
        )
        return bool(response.data)


def _draft_payload(draft: MealDraft) -> dict[str, object]:
    return {
        "name": draft.name,
        "description": draft.description,
        "occurred_at": to_epoch_millis(draft.occurred_at),
        "on_diet": draft.on_diet,
    }


def _parse_meal(row: dict[str, object]) -> MealRecord:
    return MealRecord(
        id=UUID(str(row["id"])),
        owner_id=UUID(str(row["owner_id"])),
        name=str(row.get("name", "")),
        description=str(row.get("description", "")),
        occurred_at=from_epoch_millis(int(row.get("occurred_at", 0))),
        on_diet=bool(row.get("on_diet")),
        created_at=parse_timestamp(row.get("created_at")),
        updated_at=parse_timestamp(row.get("updated_at")),
    )
