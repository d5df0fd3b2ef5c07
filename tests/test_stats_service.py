"""Tests for stats service."""

from datetime import UTC, datetime, timedelta
from uuid import uuid4

from diet_tracker.services.meals import MealService
from diet_tracker.services.stats import StatsService, summarize
from tests.conftest import InMemoryMealRepository, make_draft


def _record_chronologically(flags: list[bool]):
    repository = InMemoryMealRepository()
    meals = MealService(repository)
    owner_id = uuid4()
    start = datetime(2024, 3, 1, 8, 0, tzinfo=UTC)
    for offset, flag in enumerate(flags):
        occurred_at = start + timedelta(hours=offset)
        meals.create(owner_id, make_draft(on_diet=flag, occurred_at=occurred_at))
    return repository, owner_id


def test_compute_counts_and_best_streak() -> None:
    repository, owner_id = _record_chronologically(
        [True, True, False, True, True, True]
    )

    stats = StatsService(repository).compute(owner_id)

    assert stats.total_meals == 6
    assert stats.total_on_diet == 5
    assert stats.total_off_diet == 1
    assert stats.best_on_diet_streak == 3


def test_compute_uses_single_fetch() -> None:
    repository, owner_id = _record_chronologically([True, False])

    StatsService(repository).compute(owner_id)

    assert repository.list_calls == 1


def test_compute_without_meals_is_zero() -> None:
    stats = StatsService(InMemoryMealRepository()).compute(uuid4())

    assert stats.total_meals == 0
    assert stats.total_on_diet == 0
    assert stats.total_off_diet == 0
    assert stats.best_on_diet_streak == 0


def test_compute_ignores_other_users_meals() -> None:
    repository, owner_id = _record_chronologically([False])
    MealService(repository).create(uuid4(), make_draft(on_diet=True))

    stats = StatsService(repository).compute(owner_id)

    assert stats.total_meals == 1
    assert stats.best_on_diet_streak == 0


def test_summarize_all_off_diet() -> None:
    repository, owner_id = _record_chronologically([False, False, False])

    stats = summarize(repository.list_meals(owner_id))

    assert stats.total_off_diet == 3
    assert stats.best_on_diet_streak == 0


def test_summarize_totals_always_partition() -> None:
    patterns = [
        [True],
        [False, True, True, False, True],
        [True, True, True, True],
        [False, True, False, True, False],
    ]
    for flags in patterns:
        repository, owner_id = _record_chronologically(flags)
        stats = summarize(repository.list_meals(owner_id))
        assert stats.total_meals == stats.total_on_diet + stats.total_off_diet
        assert stats.total_meals == len(flags)
