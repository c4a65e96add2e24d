"""Pace of the current month against prior months.

Prior months are compared over the same number of elapsed days as the
current month. A prior month shorter than that count contributes its full
length and is never extrapolated. Every prior month carries equal weight in
the average regardless of how many entries it has.

Each public function samples "today" once (or takes it as ``today``) so the
current-month cut-off and the prior-month caps always agree.
"""

import logging
from itertools import accumulate
from typing import List, Optional, Sequence, Tuple

from spendpace import dates
from spendpace.config import MOTIVATION_NEUTRAL_MAX, MOTIVATION_POSITIVE_MAX
from spendpace.dates import current_day_number, day_of_month, last_day_of_month
from spendpace.domain import (
    ALL,
    Category,
    CategoryFilter,
    DailySeries,
    ExpenseEntry,
    Motivation,
    PaceSnapshot,
)
from spendpace.filters import (
    Predicate,
    all_of,
    by_category,
    in_month,
    iter_expenses,
    month_keys,
    sum_amounts,
    up_to_day,
)

logger = logging.getLogger(__name__)


def _prior_months(
    expenses: Sequence[ExpenseEntry], current_month_key: str, matching: Predicate
) -> Tuple[str, ...]:
    return tuple(m for m in month_keys(expenses, matching) if m != current_month_key)


def pace_snapshot(
    expenses: Sequence[ExpenseEntry],
    current_month_key: str,
    category_filter: CategoryFilter = ALL,
    today: Optional[str] = None,
) -> PaceSnapshot:
    day = current_day_number(today or dates.today())
    matching = by_category(category_filter)

    current = sum_amounts(
        expenses, all_of(in_month(current_month_key), matching, up_to_day(day))
    )

    prior = _prior_months(expenses, current_month_key, matching)
    if not prior:
        return PaceSnapshot(
            current=current, average=None, delta=None, ratio=None, has_history=False
        )

    partials = [
        sum_amounts(
            expenses,
            all_of(in_month(m), matching, up_to_day(min(day, last_day_of_month(m)))),
        )
        for m in prior
    ]
    average = sum(partials) / len(partials)
    logger.debug(
        "pace %s/%s day=%d months=%d current=%s average=%s",
        current_month_key, category_filter, day, len(prior), current, average,
    )
    return PaceSnapshot(
        current=current,
        average=average,
        delta=current - average,
        ratio=None if average == 0 else current / average,
        has_history=True,
    )


def pace_comparisons(
    expenses: Sequence[ExpenseEntry],
    current_month_key: str,
    today: Optional[str] = None,
) -> Tuple[Tuple[CategoryFilter, PaceSnapshot], ...]:
    """Snapshots for all categories combined, then each category."""
    today = today or dates.today()
    return tuple(
        (f, pace_snapshot(expenses, current_month_key, f, today))
        for f in (ALL, *Category)
    )


def motivation(snapshot: Optional[PaceSnapshot]) -> Optional[Motivation]:
    if snapshot is None or not snapshot.has_history or snapshot.ratio is None:
        return None
    if snapshot.ratio <= MOTIVATION_POSITIVE_MAX:
        return Motivation.POSITIVE
    if snapshot.ratio <= MOTIVATION_NEUTRAL_MAX:
        return Motivation.NEUTRAL
    return Motivation.CAUTION


def _daily_sums(
    expenses: Sequence[ExpenseEntry], month_key: str, matching: Predicate, days: int
) -> List[float]:
    sums = [0.0] * days
    for e in iter_expenses(expenses, all_of(in_month(month_key), matching)):
        day = day_of_month(e.date)
        if 1 <= day <= days:
            sums[day - 1] += e.amount
    return sums


def daily_series(
    expenses: Sequence[ExpenseEntry],
    current_month_key: str,
    category_filter: CategoryFilter = ALL,
    today: Optional[str] = None,
) -> DailySeries:
    """Per-day and cumulative spend for the current month and the prior average.

    A day index is averaged only over the prior months that have that day,
    so a short month never adds zeros past its last day.
    """
    day_limit = min(
        current_day_number(today or dates.today()), last_day_of_month(current_month_key)
    )
    matching = by_category(category_filter)

    current_daily = _daily_sums(expenses, current_month_key, matching, day_limit)

    prior = _prior_months(expenses, current_month_key, matching)
    totals = [0.0] * day_limit
    counts = [0] * day_limit
    for m in prior:
        month_days = min(day_limit, last_day_of_month(m))
        for i, amount in enumerate(_daily_sums(expenses, m, matching, month_days)):
            totals[i] += amount
            counts[i] += 1

    average_daily = [t / c if c else 0.0 for t, c in zip(totals, counts)]

    return DailySeries(
        days=tuple(range(1, day_limit + 1)),
        current_daily=tuple(current_daily),
        average_daily=tuple(average_daily),
        current_cumulative=tuple(accumulate(current_daily)),
        average_cumulative=tuple(accumulate(average_daily)),
        has_history=bool(prior),
    )
