"""Tests for recipe backend adapters."""

import asyncio

import httpx
import pytest

from latchfit.adapters.recipe_client import (
    HttpxRecipeClient,
    MockRecipeClient,
    OfflineRecipeClient,
)
from latchfit.domain.recipes import RecipeCandidate


def test_recipe_client_sends_query_and_returns_results() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200, json={"results": [{"id": 1, "title": "Bowl", "calories": 500}]}
        )

    transport = httpx.MockTransport(handler)
    client = HttpxRecipeClient(
        base_url="https://recipes.test",
        http_client=httpx.AsyncClient(transport=transport),
    )

    results = asyncio.run(
        client.search_recipes(
            ingredients=["chicken", "rice"], max_calories=900, min_protein=30, count=6
        )
    )

    assert results == [{"id": 1, "title": "Bowl", "calories": 500}]
    request = seen[0]
    assert request.url.path == "/recipes"
    assert request.url.params["ingredients"] == "chicken,rice"
    assert request.url.params["addRecipeNutrition"] == "true"
    assert request.url.params["maxCalories"] == "900"
    assert request.url.params["minProtein"] == "30"
    assert request.url.params["number"] == "6"


def test_recipe_client_raises_on_server_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, json={"error": "down"})

    transport = httpx.MockTransport(handler)
    client = HttpxRecipeClient(
        base_url="https://recipes.test",
        http_client=httpx.AsyncClient(transport=transport),
    )

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(client.search_recipes(["tofu"], 800, 20, 6))


def test_recipe_client_missing_results_key() -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json={}))
    client = HttpxRecipeClient(
        base_url="https://recipes.test",
        http_client=httpx.AsyncClient(transport=transport),
    )

    assert asyncio.run(client.search_recipes(["oats"], 600, 18, 3)) == []


def test_create_strips_trailing_slash() -> None:
    client = HttpxRecipeClient.create("https://recipes.test/", timeout_seconds=5)

    assert client.base_url == "https://recipes.test"
    assert client.timeout_seconds == 5
    asyncio.run(client.close())


def test_mock_client_respects_count() -> None:
    client = MockRecipeClient()

    one = asyncio.run(client.search_recipes([], 0, 0, 0))
    two = asyncio.run(client.search_recipes([], 0, 0, 2))
    many = asyncio.run(client.search_recipes([], 0, 0, 10))

    assert [recipe["title"] for recipe in one] == ["Chicken & Rice Bowl"]
    assert len(two) == 2
    assert len(many) == 3


def test_mock_payload_validates_as_candidates() -> None:
    payload = asyncio.run(MockRecipeClient().search_recipes(["tuna"], 700, 25, 3))

    candidates = [RecipeCandidate.model_validate(item) for item in payload]

    assert candidates[2].title == "Tuna Wraps"
    assert candidates[2].calories_per_serving == 430
    assert candidates[2].protein_per_serving_g == 32
    assert candidates[0].ready_in_minutes == 20


def test_candidate_reads_macros_from_nutrients() -> None:
    candidate = RecipeCandidate.model_validate(
        {
            "title": "Lentil Soup",
            "nutrition": {
                "nutrients": [
                    {"name": "Calories", "amount": 389.6, "unit": "kcal"},
                    {"name": "Protein", "amount": 21.2, "unit": "g"},
                ]
            },
        }
    )

    assert candidate.calories_per_serving == 390
    assert candidate.protein_per_serving_g == 21
    assert RecipeCandidate(title="Plain").calories_per_serving is None


def test_offline_client_returns_nothing() -> None:
    assert asyncio.run(OfflineRecipeClient().search_recipes(["rice"], 500, 20, 6)) == []
