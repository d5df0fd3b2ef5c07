"""Domain models for meal records."""

from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta
from uuid import UUID

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_MILLISECOND = timedelta(milliseconds=1)


@dataclass(frozen=True)
class MealDraft:
    """Client-editable fields of a meal."""

    name: str
    description: str
    occurred_at: datetime
    on_diet: bool


@dataclass(frozen=True)
class MealRecord:
    """Meal row owned by a single user."""

    id: UUID
    owner_id: UUID
    name: str
    description: str
    occurred_at: datetime
    on_diet: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None


def to_epoch_millis(value: datetime) -> int:
    """Convert a datetime to epoch milliseconds, treating naive values as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return (value - _EPOCH) // _MILLISECOND


def from_epoch_millis(value: int) -> datetime:
    """Convert epoch milliseconds to an aware UTC datetime."""
    return _EPOCH + timedelta(milliseconds=value)


def meal_day(occurred_at: datetime) -> date:
    """Return the UTC calendar day a meal occurred on."""
    if occurred_at.tzinfo is None:
        return occurred_at.date()
    return occurred_at.astimezone(UTC).date()
