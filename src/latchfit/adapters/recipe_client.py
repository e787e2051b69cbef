"""Recipe search backend clients."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class RecipeSearchClient(Protocol):
    """Interface for recipe search backends."""

    async def search_recipes(
        self,
        ingredients: list[str],
        max_calories: int,
        min_protein: int,
        count: int,
    ) -> list[dict[str, object]]:
        """Search recipes and return raw recipe payloads."""


@dataclass
class HttpxRecipeClient(RecipeSearchClient):
    """HTTPX-backed client for the recipe proxy."""

    base_url: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 15

    @classmethod
    def create(cls, base_url: str, timeout_seconds: float = 15) -> "HttpxRecipeClient":
        """Create a recipe client with a managed httpx session."""
        return cls(
            base_url=base_url.rstrip("/"),
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
        )

    async def search_recipes(
        self,
        ingredients: list[str],
        max_calories: int,
        min_protein: int,
        count: int,
    ) -> list[dict[str, object]]:
        """Search recipes by pantry ingredients and macro limits."""
        url = f"{self.base_url}/recipes"
        response = await self.http_client.get(
            url,
            params={
                "ingredients": ",".join(ingredients),
                "addRecipeNutrition": "true",
                "maxCalories": max_calories,
                "minProtein": min_protein,
                "number": count,
            },
            timeout=self.timeout_seconds,
        )
        response.raise_for_status()
        payload = response.json()
        return payload.get("results", [])

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


_MOCK_RECIPES: list[dict[str, object]] = [
    {
        "id": 1,
        "title": "Chicken & Rice Bowl",
        "servings": 2,
        "readyInMinutes": 20,
        "nutrition": {
            "nutrients": [
                {"name": "Calories", "amount": 520, "unit": "kcal"},
                {"name": "Protein", "amount": 36, "unit": "g"},
            ]
        },
        "calories": 520,
        "proteinG": 36,
    },
    {
        "id": 2,
        "title": "Tofu Veggie Stir-fry",
        "servings": 2,
        "readyInMinutes": 18,
        "nutrition": {
            "nutrients": [
                {"name": "Calories", "amount": 460, "unit": "kcal"},
                {"name": "Protein", "amount": 28, "unit": "g"},
            ]
        },
        "calories": 460,
        "proteinG": 28,
    },
    {
        "id": 3,
        "title": "Tuna Wraps",
        "servings": 1,
        "readyInMinutes": 12,
        "nutrition": {
            "nutrients": [
                {"name": "Calories", "amount": 430, "unit": "kcal"},
                {"name": "Protein", "amount": 32, "unit": "g"},
            ]
        },
        "calories": 430,
        "proteinG": 32,
    },
]


@dataclass
class MockRecipeClient(RecipeSearchClient):
    """Deterministic recipes for offline demos."""

    async def search_recipes(
        self,
        ingredients: list[str],
        max_calories: int,
        min_protein: int,
        count: int,
    ) -> list[dict[str, object]]:
        """Return up to ``count`` canned recipes, at least one."""
        limit = max(1, min(count, len(_MOCK_RECIPES)))
        return [dict(recipe) for recipe in _MOCK_RECIPES[:limit]]

    async def close(self) -> None:
        """Nothing to release."""


@dataclass
class OfflineRecipeClient(RecipeSearchClient):
    """Client used when no recipe backend is configured."""

    async def search_recipes(
        self,
        ingredients: list[str],
        max_calories: int,
        min_protein: int,
        count: int,
    ) -> list[dict[str, object]]:
        """Always return no results so callers fall back locally."""
        return []

    async def close(self) -> None:
        """Nothing to release."""
