"""Domain models for the parent profile."""

from dataclasses import dataclass, field, replace
from enum import StrEnum
from typing import TypeVar
from uuid import UUID, uuid4


class ActivityLevel(StrEnum):
    """Self-reported daily activity."""

    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"


class BreastfeedingStatus(StrEnum):
    """How much of the baby's intake comes from breastfeeding."""

    EXCLUSIVE = "exclusive"
    PARTIAL = "partial"
    WEANING = "weaning"


class GoalPace(StrEnum):
    """Weight goal pace."""

    MAINTAIN = "maintain"
    LOSE_QUARTER_LB = "lose025"
    LOSE_HALF_LB = "lose05"


class DietaryPreference(StrEnum):
    """Dietary pattern used to pick meal ideas."""

    OMNIVORE = "omnivore"
    VEGETARIAN = "vegetarian"
    VEGAN = "vegan"
    PESCATARIAN = "pescatarian"


_E = TypeVar("_E", bound=StrEnum)


def parse_activity(raw: str | None) -> ActivityLevel:
    """Parse an activity level, defaulting to sedentary."""
    return _parse(ActivityLevel, raw, ActivityLevel.SEDENTARY)


def parse_breastfeeding_status(raw: str | None) -> BreastfeedingStatus:
    """Parse a breastfeeding status, defaulting to weaning."""
    return _parse(BreastfeedingStatus, raw, BreastfeedingStatus.WEANING)


def parse_goal_pace(raw: str | None) -> GoalPace:
    """Parse a goal pace, defaulting to maintain."""
    return _parse(GoalPace, raw, GoalPace.MAINTAIN)


def parse_dietary_preference(raw: str | None) -> DietaryPreference:
    """Parse a dietary preference, defaulting to omnivore."""
    return _parse(DietaryPreference, raw, DietaryPreference.OMNIVORE)


def parse_allergies(raw: str | None) -> list[str]:
    """Split a comma separated allergy list into lower-cased tokens."""
    if not raw:
        return []
    tokens = []
    for chunk in raw.lower().split(","):
        token = chunk.strip()
        if token:
            tokens.append(token)
    return tokens


def _parse(enum_type: type[_E], raw: str | None, default: _E) -> _E:
    if raw is None:
        return default
    try:
        return enum_type(raw.strip().lower())
    except ValueError:
        return default


@dataclass(frozen=True)
class Profile:
    """Snapshot of a parent's profile as read from storage."""

    id: UUID = field(default_factory=uuid4)
    age: int = 30
    height_cm: float = 165.0
    current_weight_lb: float = 150.0
    start_weight_lb: float = 150.0
    activity_level: ActivityLevel = ActivityLevel.LIGHT
    breastfeeding_status: BreastfeedingStatus = BreastfeedingStatus.EXCLUSIVE
    goal_pace: GoalPace = GoalPace.MAINTAIN
    calorie_floor: int = 1800
    meals_per_day: int = 3
    dietary_preference: DietaryPreference = DietaryPreference.OMNIVORE
    allergies: str = ""

    @property
    def weight_lb(self) -> float:
        """Current weight, falling back to the starting weight when unset."""
        if self.current_weight_lb > 0:
            return self.current_weight_lb
        return self.start_weight_lb

    @property
    def allergy_tokens(self) -> list[str]:
        """Allergy tokens used as exclusion filters."""
        return parse_allergies(self.allergies)

    @property
    def is_breastfeeding(self) -> bool:
        """Return True unless the parent is weaning."""
        return self.breastfeeding_status != BreastfeedingStatus.WEANING

    def replace(self, **changes: object) -> "Profile":
        """Return a copy of the profile with the given fields changed."""
        return replace(self, **changes)
