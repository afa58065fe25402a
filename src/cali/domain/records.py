"""Daily nutrition record models."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class CategoryInfo:
    """Display metadata for a nutrition category."""

    label: str
    unit: str
    color: str


class NutritionCategory(Enum):
    """Enum of loggable nutrition categories."""

    CALORIES = CategoryInfo("Calories", "calories", "green")
    WATER = CategoryInfo("Water", "fl oz of water", "blue")
    PROTEIN = CategoryInfo("Protein", "grams of protein", "yellow")
    CARBS = CategoryInfo("Carbs", "grams of carbs", "magenta")
    FAT = CategoryInfo("Fat", "grams of fat", "red")

    @property
    def key(self) -> str:
        """Return the command-line name of the category."""
        return self.name.lower()

    @classmethod
    def from_key(cls, key: str) -> "NutritionCategory":
        """Return the category for a command-line name."""
        return cls[key.upper()]


@dataclass
class DailyRecord:
    """Accumulated nutrition totals for one calendar date."""

    date: str
    calories: float = 0.0
    water: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0

    @classmethod
    def empty(cls, date: str) -> "DailyRecord":
        """Return a zeroed record for a date."""
        return cls(date=date)

    def total(self, category: NutritionCategory) -> float:
        """Return the accumulator for a category."""
        if category is NutritionCategory.CALORIES:
            return self.calories
        if category is NutritionCategory.WATER:
            return self.water
        if category is NutritionCategory.PROTEIN:
            return self.protein
        if category is NutritionCategory.CARBS:
            return self.carbs
        return self.fat


@dataclass(frozen=True)
class LogEntry:
    """Result of logging an amount against today's record."""

    date: str
    category: NutritionCategory
    amount: float
    total: float
