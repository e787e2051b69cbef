"""Models for recipe suggestions."""

from dataclasses import dataclass, field
from typing import Literal
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class RecipeNutrient(BaseModel):
    """Single nutrient row from the recipe backend."""

    name: str
    amount: float = Field(ge=0.0)
    unit: str


class RecipeNutrition(BaseModel):
    """Nutrition block attached to a recipe."""

    nutrients: list[RecipeNutrient] = Field(default_factory=list)


class RecipeCandidate(BaseModel):
    """Recipe returned by the remote search."""

    model_config = ConfigDict(populate_by_name=True)

    id: int | None = None
    title: str
    lines: list[str] = Field(default_factory=list)
    servings: int | None = Field(default=None, ge=0)
    ready_in_minutes: int | None = Field(default=None, alias="readyInMinutes", ge=0)
    nutrition: RecipeNutrition | None = None
    calories: float | None = Field(default=None, ge=0.0)
    protein_g: float | None = Field(default=None, alias="proteinG", ge=0.0)

    @property
    def calories_per_serving(self) -> int | None:
        """Calories per serving, from the flattened field or nutrients."""
        value = self.calories
        if value is None:
            value = self._nutrient_amount("calories")
        return round(value) if value is not None else None

    @property
    def protein_per_serving_g(self) -> int | None:
        """Protein grams per serving, from the flattened field or nutrients."""
        value = self.protein_g
        if value is None:
            value = self._nutrient_amount("protein")
        return round(value) if value is not None else None

    def _nutrient_amount(self, name: str) -> float | None:
        if self.nutrition is None:
            return None
        for nutrient in self.nutrition.nutrients:
            if nutrient.name.lower() == name:
                return nutrient.amount
        return None


@dataclass(frozen=True)
class RecipeIdea:
    """A recipe idea shown to the user, scaled to a per-meal target."""

    title: str
    lines: list[str]
    calories_per_serving: int
    protein_per_serving_g: int
    id: UUID = field(default_factory=uuid4)


@dataclass(frozen=True)
class RecipeSuggestions:
    """Result of a suggestion request."""

    ideas: list[RecipeIdea]
    source: Literal["remote", "local"]
    message: str | None = None
