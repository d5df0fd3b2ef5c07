"""Meal ledger and metrics endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, Response, status

from diet_tracker.api.auth import require_user
from diet_tracker.api.schemas import MealBody
from diet_tracker.containers import AppContainer
from diet_tracker.domain.meals import MealRecord, meal_day
from diet_tracker.domain.models import UserRecord
from diet_tracker.domain.stats import AdherenceStats

router = APIRouter(prefix="/meals", tags=["meals"])


def _container(request: Request) -> AppContainer:
    return request.app.state.container


@router.post("", status_code=status.HTTP_201_CREATED)
def create_meal(
    body: MealBody, request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, str]:
    """Record a meal for the caller."""
    meal = _container(request).meal_service.create(user.id, body.to_draft())
    return {"id": str(meal.id)}


@router.get("")
def list_meals(
    request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, object]:
    """Return the caller's meals, most recent first."""
    meals = _container(request).meal_service.list_meals(user.id)
    return {"meals": [_serialize_meal(meal) for meal in meals]}


# Declared before /{meal_id} so "metrics" is not parsed as a meal id.
@router.get("/metrics")
def meal_metrics(
    request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, int]:
    """Return the caller's diet adherence totals."""
    stats = _container(request).stats_service.compute(user.id)
    return _serialize_stats(stats)


@router.get("/{meal_id}")
def get_meal(
    meal_id: UUID, request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, object]:
    """Return one of the caller's meals."""
    meal = _container(request).meal_service.get(user.id, meal_id)
    return _serialize_meal(meal)


@router.put("/{meal_id}")
def update_meal(
    meal_id: UUID,
    body: MealBody,
    request: Request,
    user: UserRecord = Depends(require_user),
) -> dict[str, object]:
    """Replace one of the caller's meals."""
    meal = _container(request).meal_service.update(user.id, meal_id, body.to_draft())
    return _serialize_meal(meal)


@router.delete("/{meal_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_meal(
    meal_id: UUID, request: Request, user: UserRecord = Depends(require_user)
) -> Response:
    """Delete one of the caller's meals."""
    _container(request).meal_service.delete(user.id, meal_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


def _serialize_meal(meal: MealRecord) -> dict[str, object]:
    return {
        "id": str(meal.id),
        "name": meal.name,
        "description": meal.description,
        "isOnDiet": meal.on_diet,
        "date": meal_day(meal.occurred_at).isoformat(),
        "createdAt": meal.created_at.isoformat() if meal.created_at else None,
        "updatedAt": meal.updated_at.isoformat() if meal.updated_at else None,
    }


def _serialize_stats(stats: AdherenceStats) -> dict[str, int]:
    return {
        "totalMeals": stats.total_meals,
        "totalMealsOnDiet": stats.total_on_diet,
        "totalMealsOffDiet": stats.total_off_diet,
        "bestOnDietSequence": stats.best_on_diet_streak,
    }
