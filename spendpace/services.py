import logging
from typing import Any, Callable, Dict, Optional

from spendpace import dates
from spendpace.aggregation import budget_status, history_points, month_goals, month_totals
from spendpace.domain import ALL, AppState, CategoryFilter, DailySeries
from spendpace.pace import daily_series, motivation, pace_comparisons

logger = logging.getLogger(__name__)


class DashboardService:
    """Facade that computes everything a dashboard needs for the current month.

    clock: zero-argument callable returning the fixed-zone date as YYYY-MM-DD.
    It is called once per report so every figure in it shares the same "today".
    """

    def __init__(self, clock: Optional[Callable[[], str]] = None):
        self.clock = clock or dates.today

    def month_overview(self, state: AppState, category_filter: CategoryFilter = ALL) -> Dict[str, Any]:
        today = self.clock()
        month = dates.month_key_of(today)
        logger.debug("month overview for %s (today=%s)", month, today)

        expenses = state.expenses
        comparisons = pace_comparisons(expenses, month, today)
        combined = next(snapshot for f, snapshot in comparisons if f == ALL)

        return {
            "month": month,
            "today": today,
            "base_amount": state.base_amount,
            "totals": month_totals(expenses, month),
            "goals": month_goals(state.goals, month),
            "budget": budget_status(expenses, state.goals, month),
            "comparisons": comparisons,
            "motivation": motivation(combined),
            "history": history_points(expenses),
            "daily": daily_series(expenses, month, category_filter, today),
        }

    def daily(self, state: AppState, category_filter: CategoryFilter = ALL) -> DailySeries:
        today = self.clock()
        return daily_series(state.expenses, dates.month_key_of(today), category_filter, today)
