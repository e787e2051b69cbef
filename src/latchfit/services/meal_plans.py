"""Meal idea generator that expands daily targets into meal slots."""

from dataclasses import dataclass

from latchfit.domain.plans import CaloriePlan, DailyDietPlan, MealBlock
from latchfit.domain.profile import (
    DietaryPreference,
    Profile,
    parse_allergies,
    parse_dietary_preference,
)

FIVE_MEALS = 5

_THREE_SLOTS = ["Breakfast", "Lunch", "Dinner"]
_FIVE_SLOTS = ["Breakfast", "Snack 1", "Lunch", "Snack 2", "Dinner"]

_OMNIVORE: dict[str, list[str]] = {
    "Breakfast": [
        "Greek yogurt + berries + oats",
        "Egg scramble + spinach + toast",
        "Overnight oats + chia + milk",
    ],
    "Snack": ["Apple + peanut butter", "Cottage cheese + pineapple", "Trail mix"],
    "Lunch": [
        "Chicken wrap + hummus + salad",
        "Turkey sandwich + avocado + carrots",
        "Tuna bowl + rice + cucumber",
    ],
    "Dinner": [
        "Salmon + quinoa + roasted veg",
        "Chicken stir-fry + rice",
        "Beef chili + beans + corn",
    ],
}

_OVERRIDES: dict[DietaryPreference, dict[str, list[str]]] = {
    DietaryPreference.VEGETARIAN: {
        "Breakfast": [
            "Overnight oats + soy milk + berries",
            "Tofu scramble + spinach + toast",
        ],
        "Snack": ["Banana + almond butter", "Roasted chickpeas"],
        "Lunch": ["Lentil salad + feta (omit if dairy-free)", "Veggie wrap + hummus"],
        "Dinner": ["Tofu stir-fry + rice", "Bean chili + avocado"],
    },
    DietaryPreference.VEGAN: {
        "Breakfast": [
            "Overnight oats + plant milk + berries",
            "Tofu scramble + veggies",
        ],
        "Snack": ["Banana + peanut butter", "Energy bites"],
        "Lunch": ["Quinoa bowl + beans + salsa", "Hummus wrap + veg"],
        "Dinner": ["Lentil curry + rice", "Tofu stir-fry + noodles"],
    },
    DietaryPreference.PESCATARIAN: {
        "Lunch": ["Tuna bowl + rice + cucumber", "Shrimp tacos + slaw"],
        "Dinner": ["Salmon + quinoa + veg", "Shrimp stir-fry + rice"],
    },
}

_FALLBACKS = {
    "Breakfast": "Oats",
    "Snack": "Fruit + nuts",
    "Lunch": "Wrap",
    "Dinner": "Stir-fry",
}

BREAKFAST_NOTE = "Add a protein (eggs, yogurt, tofu) to hit your target."


@dataclass
class MealIdeaGenerator:
    """Builds a deterministic day of meal ideas from calorie targets."""

    def make_plan(  # noqa: PLR0913
        self,
        calories: int,
        protein_g: int,
        fat_g: int,
        carbs_g: int,
        meals_per_day: int,
        dietary_preference: DietaryPreference | str,
        allergies: str,
        meal_style: str,
        cuisine: str,
        breastfeeding: bool = True,
    ) -> DailyDietPlan:
        """Return meal blocks and tips for the given targets."""
        excludes = parse_allergies(allergies)
        bank = idea_bank(parse_dietary_preference(dietary_preference))
        slots = _FIVE_SLOTS if meals_per_day == FIVE_MEALS else _THREE_SLOTS

        meals = []
        for slot in slots:
            category = _category(slot)
            ideas = filter_ideas(bank[category], excludes)
            idea = ideas[0] if ideas else _FALLBACKS[category]
            meals.append(
                MealBlock(
                    title=slot,
                    items=[idea],
                    note=_note(category, meal_style, cuisine),
                )
            )

        return DailyDietPlan(
            calories=calories,
            protein_g=protein_g,
            fat_g=fat_g,
            carbs_g=carbs_g,
            meals=meals,
            tips=_tips(breastfeeding, meals_per_day),
        )

    def plan_for_profile(
        self,
        profile: Profile,
        targets: CaloriePlan,
        meal_style: str = "family",
        cuisine: str = "any",
    ) -> DailyDietPlan:
        """Build the day's plan for a profile, using its real feeding status."""
        return self.make_plan(
            calories=targets.calories,
            protein_g=targets.protein_g,
            fat_g=targets.fat_g,
            carbs_g=targets.carbs_g,
            meals_per_day=profile.meals_per_day,
            dietary_preference=profile.dietary_preference,
            allergies=profile.allergies,
            meal_style=meal_style,
            cuisine=cuisine,
            breastfeeding=profile.is_breastfeeding,
        )


def idea_bank(preference: DietaryPreference) -> dict[str, list[str]]:
    """Return the idea bank for a preference, filled in from omnivore."""
    bank = dict(_OMNIVORE)
    bank.update(_OVERRIDES.get(preference, {}))
    return bank


def filter_ideas(ideas: list[str], excludes: list[str]) -> list[str]:
    """Drop ideas that mention any excluded token."""
    if not excludes:
        return list(ideas)
    return [
        idea
        for idea in ideas
        if not any(token in idea.lower() for token in excludes)
    ]


def _category(slot: str) -> str:
    if slot.startswith("Snack"):
        return "Snack"
    return slot


def _note(category: str, meal_style: str, cuisine: str) -> str:
    if category == "Breakfast":
        return BREAKFAST_NOTE
    if category == "Snack":
        return _snack_note(meal_style)
    if category == "Lunch":
        return f"Add 25–35g protein; choose carbs you enjoy ({cuisine})."
    if meal_style == "batch":
        return "Cook once, eat twice: roast extra protein for tomorrow."
    return "Aim for a palm of protein + 2 cups veg."


def _snack_note(meal_style: str) -> str:
    notes = {
        "batch": "Batch-prep snack boxes so protein is easy to grab.",
        "family": "Make snacks that older kids like too.",
        "fresh": "Pair fruit with a protein for balance.",
    }
    return notes.get(meal_style, "Keep 15–20g protein snacks handy.")


def _tips(breastfeeding: bool, meals_per_day: int) -> list[str]:
    tips = [
        "Hydrate through the day.",
        "Small, steady deficit protects supply.",
        "Prioritize protein at each meal.",
    ]
    if meals_per_day == FIVE_MEALS:
        tips.append("Use snacks to fill protein gaps.")
    if breastfeeding:
        tips.append("If supply dips, increase calories/fluids for a few days.")
    return tips
