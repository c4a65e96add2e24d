"""Month-grain aggregation of expense entries.

All functions here are pure: they only read their arguments and return
fresh values. Month keys (``YYYY-MM``) are the aggregation grain.
"""

from typing import Iterable, Optional, Sequence, Tuple

from spendpace.domain import (
    ALL,
    BudgetStatus,
    Category,
    CategoryTotals,
    ExpenseEntry,
    MonthlyGoal,
    MonthlyHistoryPoint,
)
from spendpace.filters import (
    all_of,
    by_category,
    in_month,
    iter_expenses,
    month_keys,
    sum_amounts,
)
from spendpace.functional import Either, Left, Right, safe_goal


def month_totals(expenses: Iterable[ExpenseEntry], month_key: str) -> CategoryTotals:
    """Sum amounts per category for one month. No rounding is applied."""
    month = tuple(iter_expenses(expenses, in_month(month_key)))
    per_category = {c: sum_amounts(month, by_category(c)) for c in Category}
    return CategoryTotals(per_category=per_category, total=sum(per_category.values()))


def month_goals(goals: Iterable[MonthlyGoal], month_key: str) -> MonthlyGoal:
    """Stored goals for ``month_key``, or a record with every goal unset."""
    return safe_goal(goals, month_key).get_or_else(MonthlyGoal(month_key=month_key))


def history_points(expenses: Sequence[ExpenseEntry]) -> Tuple[MonthlyHistoryPoint, ...]:
    """One totals record per month with activity, oldest first."""
    return tuple(
        MonthlyHistoryPoint(month_key=key, totals=month_totals(expenses, key))
        for key in month_keys(expenses)
    )


def budget_status(
    expenses: Sequence[ExpenseEntry],
    goals: Iterable[MonthlyGoal],
    month_key: str,
) -> Tuple[BudgetStatus, ...]:
    """Spent / goal / remaining per category, then the combined row."""
    totals = month_totals(expenses, month_key)
    goal = month_goals(goals, month_key)

    def _row(category, spent: float) -> BudgetStatus:
        target = goal.goal_for(category)
        remaining = None if target is None else target - spent
        return BudgetStatus(category=category, spent=spent, goal=target, remaining=remaining)

    rows = [_row(c, totals[c]) for c in Category]
    rows.append(_row(ALL, totals.total))
    return tuple(rows)


def check_goal(
    goal: MonthlyGoal,
    expenses: Sequence[ExpenseEntry],
    category: Optional[Category] = None,
) -> Either[dict, MonthlyGoal]:
    """``Left`` when spending in ``goal.month_key`` is over the goal.

    ``category=None`` checks the combined goal. An unset goal never fails.
    """
    if category is None:
        limit = goal.combined_goal
        spent = month_totals(expenses, goal.month_key).total
    else:
        limit = goal.goal_for(category)
        spent = sum_amounts(expenses, all_of(in_month(goal.month_key), by_category(category)))

    if limit is not None and spent > limit:
        return Left({
            "error": "goal_exceeded",
            "message": f"Goal exceeded for {goal.month_key}",
            "month_key": goal.month_key,
            "category": category,
            "limit": limit,
            "spent": spent,
            "over_goal": spent - limit,
        })

    return Right(goal)
