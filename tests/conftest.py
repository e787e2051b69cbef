"""Shared test fixtures."""

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

import pytest

from latchfit.adapters.memory_session_repository import InMemoryMilkSessionRepository
from latchfit.adapters.recipe_client import RecipeSearchClient
from latchfit.config import Settings
from latchfit.domain.profile import (
    ActivityLevel,
    BreastfeedingStatus,
    DietaryPreference,
    GoalPace,
    Profile,
)


@dataclass
class FakeClock:
    """Manually advanced clock for timer tests."""

    now: datetime = field(
        default_factory=lambda: datetime(2024, 5, 1, 9, 0, tzinfo=UTC)
    )

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now = self.now + timedelta(seconds=seconds)


@dataclass
class FakeRecipeClient(RecipeSearchClient):
    """Recipe client that records calls and returns a fixed payload."""

    results: list[dict[str, object]] = field(
        default_factory=lambda: [
            {
                "id": 7,
                "title": "Salmon Rice Bowl",
                "lines": ["Salmon", "Rice"],
                "calories": 540,
                "proteinG": 38,
            }
        ]
    )
    calls: list[dict[str, object]] = field(default_factory=list)

    async def search_recipes(
        self,
        ingredients: list[str],
        max_calories: int,
        min_protein: int,
        count: int,
    ) -> list[dict[str, object]]:
        self.calls.append(
            {
                "ingredients": ingredients,
                "max_calories": max_calories,
                "min_protein": min_protein,
                "count": count,
            }
        )
        return self.results


@dataclass
class FailingRecipeClient(RecipeSearchClient):
    """Recipe client that always raises."""

    calls: int = 0

    async def search_recipes(
        self,
        ingredients: list[str],
        max_calories: int,
        min_protein: int,
        count: int,
    ) -> list[dict[str, object]]:
        self.calls += 1
        raise RuntimeError("timeout")


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Leave the package logger propagating so caplog sees its records."""
    yield
    logger = logging.getLogger("latchfit")
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        environment="test",
        recipe_backend_base_url="https://recipes.test",
    )


@pytest.fixture
def profile() -> Profile:
    return Profile(
        age=30,
        height_cm=165,
        current_weight_lb=150,
        start_weight_lb=160,
        activity_level=ActivityLevel.LIGHT,
        breastfeeding_status=BreastfeedingStatus.EXCLUSIVE,
        goal_pace=GoalPace.MAINTAIN,
        calorie_floor=1800,
        meals_per_day=3,
        dietary_preference=DietaryPreference.OMNIVORE,
        allergies="",
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def session_repository() -> InMemoryMilkSessionRepository:
    return InMemoryMilkSessionRepository()
