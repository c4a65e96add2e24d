from typing import Callable, Iterable, Iterator, Tuple

from spendpace.dates import day_of_month, month_key_of
from spendpace.domain import ALL, CategoryFilter, ExpenseEntry, matches_filter

Predicate = Callable[[ExpenseEntry], bool]


def iter_expenses(
    expenses: Iterable[ExpenseEntry], pred: Predicate
) -> Iterator[ExpenseEntry]:
    for e in expenses:
        if pred(e):
            yield e


def in_month(month_key: str) -> Predicate:
    def _filter(e: ExpenseEntry) -> bool:
        return month_key_of(e.date) == month_key

    return _filter


def by_category(category_filter: CategoryFilter = ALL) -> Predicate:
    def _filter(e: ExpenseEntry) -> bool:
        return matches_filter(e.category, category_filter)

    return _filter


def up_to_day(day: int) -> Predicate:
    def _filter(e: ExpenseEntry) -> bool:
        return day_of_month(e.date) <= day

    return _filter


def all_of(*preds: Predicate) -> Predicate:
    def _filter(e: ExpenseEntry) -> bool:
        return all(p(e) for p in preds)

    return _filter


def sum_amounts(expenses: Iterable[ExpenseEntry], pred: Predicate) -> float:
    return sum((e.amount for e in iter_expenses(expenses, pred)), 0.0)


def month_keys(
    expenses: Iterable[ExpenseEntry], pred: Predicate = lambda e: True
) -> Tuple[str, ...]:
    """Distinct month keys of the matching entries, ascending."""
    return tuple(sorted({month_key_of(e.date) for e in iter_expenses(expenses, pred)}))
