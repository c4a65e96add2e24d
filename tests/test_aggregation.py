import pytest

from spendpace.aggregation import (
    budget_status,
    check_goal,
    history_points,
    month_goals,
    month_totals,
)
from spendpace.domain import ALL, Category, ExpenseEntry, MonthlyGoal

FOOD = Category.FOOD
HOUSEHOLD = Category.HOUSEHOLD
FUN = Category.ENTERTAINMENT


def make_exp(id, amount, category, date):
    return ExpenseEntry(id=id, amount=amount, category=category, date=date, created_at="2024-01-01T00:00:00+00:00")


def make_sample():
    return (
        make_exp("e1", 10.5, FOOD, "2024-01-03"),
        make_exp("e2", 20.0, FOOD, "2024-01-20"),
        make_exp("e3", 7.25, HOUSEHOLD, "2024-01-31"),
        make_exp("e4", 100.0, FUN, "2024-02-01"),
        make_exp("e5", 3.0, HOUSEHOLD, "2023-12-24"),
    )


def test_month_totals_per_category():
    totals = month_totals(make_sample(), "2024-01")
    assert totals[FOOD] == pytest.approx(30.5)
    assert totals[HOUSEHOLD] == pytest.approx(7.25)
    assert totals[FUN] == 0.0
    assert totals.total == pytest.approx(37.75)


def test_month_totals_sum_matches_total():
    expenses = make_sample()
    for key in ("2023-12", "2024-01", "2024-02", "2024-03"):
        totals = month_totals(expenses, key)
        assert sum(totals.per_category.values()) == pytest.approx(totals.total)


def test_month_totals_every_category_present():
    totals = month_totals((), "2024-01")
    assert set(totals.per_category) == set(Category)
    assert totals.total == 0


def test_month_totals_order_independent():
    expenses = make_sample()
    a = month_totals(expenses, "2024-01")
    b = month_totals(tuple(reversed(expenses)), "2024-01")
    assert a.total == pytest.approx(b.total)
    for c in Category:
        assert a[c] == pytest.approx(b[c])


def test_month_totals_does_not_mutate_input():
    expenses = list(make_sample())
    before = list(expenses)
    month_totals(expenses, "2024-01")
    assert expenses == before


def test_month_goals_found():
    goals = (
        MonthlyGoal("2024-01", food_goal=200.0, combined_goal=500.0),
        MonthlyGoal("2024-02", household_goal=50.0),
    )
    g = month_goals(goals, "2024-01")
    assert g.food_goal == 200.0
    assert g.household_goal is None
    assert g.combined_goal == 500.0


def test_month_goals_default_is_all_none():
    g = month_goals((), "2024-05")
    assert g == MonthlyGoal(month_key="2024-05")
    assert g.food_goal is None
    assert g.household_goal is None
    assert g.entertainment_goal is None
    assert g.combined_goal is None


def test_month_goals_first_match_wins():
    goals = (MonthlyGoal("2024-01", food_goal=1.0), MonthlyGoal("2024-01", food_goal=2.0))
    assert month_goals(goals, "2024-01").food_goal == 1.0


def test_history_points_sorted_and_distinct():
    points = history_points(make_sample())
    assert [p.month_key for p in points] == ["2023-12", "2024-01", "2024-02"]
    assert points[1].totals.total == pytest.approx(37.75)
    assert points[2].totals[FUN] == 100.0


def test_history_points_empty():
    assert history_points(()) == ()


def test_history_points_idempotent():
    expenses = make_sample()
    assert history_points(expenses) == history_points(expenses)


def test_budget_status_rows():
    goals = (MonthlyGoal("2024-01", food_goal=25.0, combined_goal=100.0),)
    rows = budget_status(make_sample(), goals, "2024-01")
    assert [r.category for r in rows] == [FOOD, HOUSEHOLD, FUN, ALL]

    food, household, fun, combined = rows
    assert food.spent == pytest.approx(30.5)
    assert food.remaining == pytest.approx(-5.5)
    assert household.goal is None
    assert household.remaining is None
    assert fun.spent == 0.0
    assert combined.remaining == pytest.approx(62.25)


def test_check_goal_exceeded():
    goal = MonthlyGoal("2024-01", food_goal=25.0)
    result = check_goal(goal, make_sample(), FOOD)
    assert result.is_left()
    err = result.get_error()
    assert err["error"] == "goal_exceeded"
    assert err["over_goal"] == pytest.approx(5.5)


def test_check_goal_within_or_unset():
    goal = MonthlyGoal("2024-01", food_goal=50.0, combined_goal=40.0)
    assert check_goal(goal, make_sample(), FOOD).is_right()
    assert check_goal(goal, make_sample(), HOUSEHOLD).is_right()
    assert check_goal(goal, make_sample()).is_right()
    assert check_goal(MonthlyGoal("2024-01", combined_goal=30.0), make_sample()).is_left()
