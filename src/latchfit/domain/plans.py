"""Domain models for calorie targets and diet plans."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CaloriePlan:
    """Daily calorie and macro targets."""

    calories: int
    protein_g: int
    fat_g: int
    carbs_g: int

    @property
    def macro_calories(self) -> int:
        """Calories implied by the macro targets."""
        return self.protein_g * 4 + self.fat_g * 9 + self.carbs_g * 4


@dataclass(frozen=True)
class MealBlock:
    """A single meal slot with its suggested items."""

    title: str
    items: list[str]
    note: str | None = None


@dataclass(frozen=True)
class DailyDietPlan:
    """Targets expanded into meal slots and coaching tips."""

    calories: int
    protein_g: int
    fat_g: int
    carbs_g: int
    meals: list[MealBlock]
    tips: list[str]


@dataclass(frozen=True)
class MacroTotals:
    """Consumed or remaining macro amounts."""

    calories: float
    protein_g: float
    fat_g: float
    carbs_g: float


def remaining_targets(plan: CaloriePlan, consumed: MacroTotals) -> MacroTotals:
    """Return what is left of the plan after the consumed totals."""
    return MacroTotals(
        calories=max(0.0, plan.calories - consumed.calories),
        protein_g=max(0.0, plan.protein_g - consumed.protein_g),
        fat_g=max(0.0, plan.fat_g - consumed.fat_g),
        carbs_g=max(0.0, plan.carbs_g - consumed.carbs_g),
    )
