from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple, Union

from spendpace.config import DEFAULT_LANGUAGE, TIMEZONE


class Category(str, Enum):
    FOOD = "FOOD"
    HOUSEHOLD = "HOUSEHOLD"
    ENTERTAINMENT = "ENTERTAINMENT"


# query-time filter meaning "no category restriction", never stored on an entry
ALL = "ALL"

CategoryFilter = Union[Category, str]


def matches_filter(category: Category, category_filter: CategoryFilter) -> bool:
    return category_filter == ALL or category == category_filter


@dataclass(frozen=True)
class ExpenseEntry:
    id: str
    amount: float      # always > 0
    category: Category
    date: str          # YYYY-MM-DD in the fixed time zone
    created_at: str    # ISO timestamp, not used by aggregation
    note: Optional[str] = None


@dataclass(frozen=True)
class MonthlyGoal:
    month_key: str
    food_goal: Optional[float] = None
    household_goal: Optional[float] = None
    entertainment_goal: Optional[float] = None
    combined_goal: Optional[float] = None

    def goal_for(self, category: CategoryFilter) -> Optional[float]:
        if category == ALL:
            return self.combined_goal
        if category == Category.FOOD:
            return self.food_goal
        if category == Category.HOUSEHOLD:
            return self.household_goal
        if category == Category.ENTERTAINMENT:
            return self.entertainment_goal
        raise ValueError(f"Unknown category {category!r}")


@dataclass(frozen=True)
class CategoryTotals:
    per_category: Dict[Category, float]
    total: float

    def __getitem__(self, category: Category) -> float:
        return self.per_category.get(category, 0.0)


@dataclass(frozen=True)
class MonthlyHistoryPoint:
    month_key: str
    totals: CategoryTotals


@dataclass(frozen=True)
class PaceSnapshot:
    """Current partial-month spend against the prior-month average.

    ``average``, ``delta`` and ``ratio`` are None when there is no prior
    month to compare with. ``ratio`` is also None when the average is zero.
    """
    current: float
    average: Optional[float]
    delta: Optional[float]
    ratio: Optional[float]
    has_history: bool


@dataclass(frozen=True)
class DailySeries:
    days: Tuple[int, ...]
    current_daily: Tuple[float, ...]
    average_daily: Tuple[float, ...]
    current_cumulative: Tuple[float, ...]
    average_cumulative: Tuple[float, ...]
    has_history: bool


@dataclass(frozen=True)
class BudgetStatus:
    category: CategoryFilter   # ALL for the combined row
    spent: float
    goal: Optional[float]
    remaining: Optional[float]


class Motivation(str, Enum):
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    CAUTION = "caution"


@dataclass(frozen=True)
class AppSettings:
    language: str = DEFAULT_LANGUAGE
    timezone: str = TIMEZONE


@dataclass(frozen=True)
class AppState:
    base_amount: float = 0.0
    expenses: Tuple[ExpenseEntry, ...] = ()
    goals: Tuple[MonthlyGoal, ...] = ()
    settings: AppSettings = field(default_factory=AppSettings)
