from itertools import islice

from spendpace.domain import ALL, Category, ExpenseEntry
from spendpace.filters import (
    all_of,
    by_category,
    in_month,
    iter_expenses,
    month_keys,
    sum_amounts,
    up_to_day,
)


def make_sample():
    return (
        ExpenseEntry("e1", 10.0, Category.FOOD, "2024-05-01", ""),
        ExpenseEntry("e2", 5.0, Category.HOUSEHOLD, "2024-05-12", ""),
        ExpenseEntry("e3", 2.5, Category.FOOD, "2024-04-30", ""),
        ExpenseEntry("e4", 1.0, Category.ENTERTAINMENT, "2023-11-02", ""),
    )


def test_in_month():
    result = list(filter(in_month("2024-05"), make_sample()))
    assert [e.id for e in result] == ["e1", "e2"]


def test_by_category_and_all():
    assert [e.id for e in filter(by_category(Category.FOOD), make_sample())] == ["e1", "e3"]
    assert len(list(filter(by_category(ALL), make_sample()))) == 4


def test_up_to_day():
    assert [e.id for e in filter(up_to_day(2), make_sample())] == ["e1", "e4"]


def test_all_of_and_sum():
    pred = all_of(in_month("2024-05"), by_category(Category.FOOD), up_to_day(10))
    assert sum_amounts(make_sample(), pred) == 10.0
    assert sum_amounts((), pred) == 0.0


def test_iter_expenses_is_lazy():
    calls = {"n": 0}

    def pred(e):
        calls["n"] += 1
        return True

    first = list(islice(iter_expenses(make_sample(), pred), 1))
    assert len(first) == 1
    assert calls["n"] == 1


def test_month_keys_sorted_distinct():
    assert month_keys(make_sample()) == ("2023-11", "2024-04", "2024-05")
    assert month_keys(make_sample(), by_category(Category.HOUSEHOLD)) == ("2024-05",)
    assert month_keys(()) == ()
