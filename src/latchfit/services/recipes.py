"""Recipe suggestions with an on-device fallback."""

import logging
import math
import re
from dataclasses import dataclass, replace

from pydantic import ValidationError

from latchfit.adapters.recipe_client import RecipeSearchClient
from latchfit.config import FeatureFlags
from latchfit.domain.plans import CaloriePlan
from latchfit.domain.profile import Profile
from latchfit.domain.recipes import RecipeCandidate, RecipeIdea, RecipeSuggestions
from latchfit.errors import UpstreamUnavailable
from latchfit.services.coach import per_meal_targets, plan_for_profile

_logger = logging.getLogger(__name__)

SEARCH_COUNT = 6
MAX_CALORIE_HEADROOM = 200

NO_INGREDIENTS_MESSAGE = "Add at least one ingredient (e.g., “chicken, rice”)."
FALLBACK_MESSAGE = "Couldn’t fetch recipes right now. Showing on-device ideas instead."

_PROTEINS = [
    "chicken",
    "turkey",
    "tuna",
    "salmon",
    "eggs",
    "tofu",
    "yogurt",
    "cottage",
    "beans",
]
_CARBS = ["rice", "quinoa", "tortilla", "pasta", "oats", "bread", "potato"]
_VEGETABLES = [
    "spinach",
    "broccoli",
    "pepper",
    "onion",
    "tomato",
    "avocado",
    "cucumber",
]
_FLAVORS = ["salsa", "soy sauce", "pesto", "lemon", "garlic"]

_SEPARATORS = re.compile(r"[,;\s]+")


@dataclass
class RecipeSuggestionService:
    """Suggests recipes for pantry items, scaled to per-meal targets."""

    client: RecipeSearchClient
    flags: FeatureFlags

    async def suggest(self, profile: Profile, pantry: str) -> RecipeSuggestions:
        """Return recipe ideas for a free-text pantry list."""
        ingredients = parse_ingredients(pantry)
        if not ingredients:
            return RecipeSuggestions(
                ideas=[], source="local", message=NO_INGREDIENTS_MESSAGE
            )

        plan = plan_for_profile(profile)
        per_meal_cal, per_meal_protein = per_meal_targets(plan, profile.meals_per_day)
        local_ideas = [
            replace(
                idea,
                calories_per_serving=per_meal_cal,
                protein_per_serving_g=per_meal_protein,
            )
            for idea in local_recipe_ideas(ingredients, plan, profile.meals_per_day)
        ]

        if not self.flags.live_search_enabled:
            return RecipeSuggestions(ideas=local_ideas, source="local")

        try:
            candidates = await self._search(ingredients, per_meal_cal, per_meal_protein)
        except UpstreamUnavailable as exc:
            _logger.warning("Recipe search unavailable, using local ideas: %s", exc)
            return RecipeSuggestions(
                ideas=local_ideas, source="local", message=FALLBACK_MESSAGE
            )

        if not candidates:
            return RecipeSuggestions(ideas=local_ideas, source="local")

        ideas = [
            RecipeIdea(
                title=candidate.title,
                lines=[
                    *candidate.lines,
                    *_listed_macros(candidate),
                    f"Scaled to ~{per_meal_cal} kcal target",
                ],
                calories_per_serving=per_meal_cal,
                protein_per_serving_g=per_meal_protein,
            )
            for candidate in candidates
        ]
        return RecipeSuggestions(ideas=ideas, source="remote")

    async def _search(
        self, ingredients: list[str], per_meal_cal: int, per_meal_protein: int
    ) -> list[RecipeCandidate]:
        """Call the backend once and validate its payload."""
        try:
            payload = await self.client.search_recipes(
                ingredients=ingredients,
                max_calories=per_meal_cal + MAX_CALORIE_HEADROOM,
                min_protein=per_meal_protein,
                count=SEARCH_COUNT,
            )
        except Exception as exc:
            raise UpstreamUnavailable(str(exc) or type(exc).__name__) from exc
        if not isinstance(payload, list):
            raise UpstreamUnavailable("Invalid recipe payload")
        try:
            return [RecipeCandidate.model_validate(item) for item in payload]
        except ValidationError as exc:
            raise UpstreamUnavailable("Invalid recipe payload") from exc


def parse_ingredients(pantry: str) -> list[str]:
    """Split pantry text into lower-cased ingredient tokens."""
    return [token for token in _SEPARATORS.split(pantry.lower()) if token]


def local_recipe_ideas(
    ingredients: list[str], plan: CaloriePlan, meals_per_day: int
) -> list[RecipeIdea]:
    """Generate three template recipes from pantry ingredients.

    The first known protein, carb, vegetable and flavor found in the pantry
    fill the templates; anything missing uses a sensible default.
    """
    target_cal, target_protein = per_meal_targets(
        plan, meals_per_day, min_calories=350, min_protein_g=18
    )
    lowered = [item.lower() for item in ingredients]
    protein = _first_present(_PROTEINS, lowered, "chicken")
    carb = _first_present(_CARBS, lowered, "rice")
    veg = _first_present(_VEGETABLES, lowered, "spinach")
    flavor = _first_present(_FLAVORS, lowered, "garlic")
    oz_protein = max(3, math.ceil(target_protein / 7.0))

    return [
        RecipeIdea(
            title=f"Protein bowl — {protein} + {carb}",
            lines=[
                f"{oz_protein} oz {protein}, cooked",
                f"3/4–1 cup {carb}",
                f"1–2 cups {veg}",
                f"1 tsp olive oil, {flavor}",
            ],
            calories_per_serving=target_cal,
            protein_per_serving_g=target_protein,
        ),
        RecipeIdea(
            title="Wraps/tacos — quick handheld",
            lines=[
                f"1–2 {carb} (wraps)",
                f"{oz_protein} oz {protein}",
                f"Veg: {veg}, lettuce, tomato",
                "Sauce: hummus or salsa",
            ],
            calories_per_serving=target_cal,
            protein_per_serving_g=target_protein,
        ),
        RecipeIdea(
            title="Egg/tofu scramble",
            lines=[
                "2–3 eggs (or tofu)",
                f"1 cup {veg}",
                f"1 slice whole-grain toast or 1/2 cup {carb}",
                "Fruit on the side",
            ],
            calories_per_serving=target_cal,
            protein_per_serving_g=target_protein,
        ),
    ]


def _first_present(keys: list[str], ingredients: list[str], default: str) -> str:
    for key in keys:
        if any(key in item for item in ingredients):
            return key
    return default


def _listed_macros(candidate: RecipeCandidate) -> list[str]:
    calories = candidate.calories_per_serving
    protein = candidate.protein_per_serving_g
    if calories is None or protein is None:
        return []
    return [f"As listed: {calories} kcal, {protein}g protein per serving"]
