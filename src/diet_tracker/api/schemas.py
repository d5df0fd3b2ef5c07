"""Pydantic models for request bodies."""

from datetime import UTC, datetime

from pydantic import (
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    StrictBool,
    field_validator,
)

from diet_tracker.domain.meals import MealDraft


class CreateUserBody(BaseModel):
    """Registration payload."""

    name: str = Field(min_length=1)
    email: EmailStr


class MealBody(BaseModel):
    """Payload for creating or replacing a meal.

    Any ownership field sent by the client is ignored; the owner always comes
    from the session.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str
    description: str
    occurred_at: datetime = Field(alias="date")
    on_diet: StrictBool = Field(alias="isOnDiet")

    @field_validator("occurred_at")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value

    def to_draft(self) -> MealDraft:
        return MealDraft(
            name=self.name,
            description=self.description,
            occurred_at=self.occurred_at,
            on_diet=self.on_diet,
        )
