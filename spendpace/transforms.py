from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from uuid import uuid4

from spendpace.config import LANGUAGES, TIMEZONE
from spendpace.domain import (
    AppSettings,
    AppState,
    Category,
    ExpenseEntry,
    MonthlyGoal,
)
from spendpace.functional import Either, Right, validate_amount, validate_expense_input


def default_state() -> AppState:
    return AppState()


def new_expense(
    amount: float,
    category: Category,
    date: str,
    note: Optional[str] = None,
    now: Optional[datetime] = None,
) -> ExpenseEntry:
    created = now or datetime.now(timezone.utc)
    return ExpenseEntry(
        id=uuid4().hex[:8],
        amount=amount,
        category=category,
        date=date,
        created_at=created.isoformat(),
        note=note or None,
    )


def add_expense(
    state: AppState,
    amount: float,
    category,
    date: str,
    note: Optional[str] = None,
) -> Either[dict, AppState]:
    """Validate and append a new expense; the amount comes off the base amount."""

    def _append(values) -> Either[dict, AppState]:
        value, cat, day = values
        entry = new_expense(value, cat, day, note)
        return Right(replace(
            state,
            base_amount=state.base_amount - value,
            expenses=state.expenses + (entry,),
        ))

    return validate_expense_input(amount, category, date).bind(_append)


def add_funds(state: AppState, amount: float) -> Either[dict, AppState]:
    return validate_amount(amount).bind(
        lambda value: Right(replace(state, base_amount=state.base_amount + value))
    )


def update_goals_for_month(state: AppState, goal: MonthlyGoal) -> AppState:
    others = tuple(g for g in state.goals if g.month_key != goal.month_key)
    return replace(state, goals=others + (goal,))


def change_language(state: AppState, language: str) -> AppState:
    if language not in LANGUAGES:
        return state
    return replace(state, settings=replace(state.settings, language=language))


def reset_state(state: AppState) -> AppState:
    return AppState(settings=AppSettings(language=state.settings.language))


# --- JSON blob <-> AppState


def _goal_to_dict(g: MonthlyGoal) -> Dict[str, Any]:
    return {
        "monthKey": g.month_key,
        "foodGoal": g.food_goal,
        "householdGoal": g.household_goal,
        "entertainmentGoal": g.entertainment_goal,
        "combinedGoal": g.combined_goal,
    }


def _expense_to_dict(e: ExpenseEntry) -> Dict[str, Any]:
    data = {
        "id": e.id,
        "amount": e.amount,
        "category": e.category.value,
        "date": e.date,
        "createdAt": e.created_at,
    }
    if e.note is not None:
        data["note"] = e.note
    return data


def state_to_dict(state: AppState) -> Dict[str, Any]:
    return {
        "baseAmount": state.base_amount,
        "expenses": [_expense_to_dict(e) for e in state.expenses],
        "goals": [_goal_to_dict(g) for g in state.goals],
        "settings": {
            "language": state.settings.language,
            "timezone": state.settings.timezone,
        },
    }


def state_from_dict(data: Dict[str, Any]) -> AppState:
    """Build an :class:`AppState` from a stored blob.

    Missing goal fields become None; missing settings fall back to defaults.
    Raises ``KeyError``/``ValueError`` on entries that lack required fields.
    """
    expenses = tuple(
        ExpenseEntry(
            id=str(e["id"]),
            amount=float(e["amount"]),
            category=Category(e["category"]),
            date=e["date"],
            created_at=e.get("createdAt", ""),
            note=e.get("note"),
        )
        for e in data.get("expenses") or []
    )
    goals = tuple(
        MonthlyGoal(
            month_key=g["monthKey"],
            food_goal=g.get("foodGoal"),
            household_goal=g.get("householdGoal"),
            entertainment_goal=g.get("entertainmentGoal"),
            combined_goal=g.get("combinedGoal"),
        )
        for g in data.get("goals") or []
    )
    settings = data.get("settings") or {}
    language = settings.get("language")
    return AppState(
        base_amount=float(data.get("baseAmount", 0.0)),
        expenses=expenses,
        goals=goals,
        settings=AppSettings(
            language=language if language in LANGUAGES else AppSettings().language,
            timezone=settings.get("timezone", TIMEZONE),
        ),
    )
