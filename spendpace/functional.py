from abc import ABC, abstractmethod
from datetime import date
from typing import Callable, Generic, Iterable, Optional, TypeVar

from spendpace.domain import Category, MonthlyGoal

T = TypeVar('T')
U = TypeVar('U')
E = TypeVar('E')


class Maybe(Generic[T], ABC):

    @abstractmethod
    def get_or_else(self, default: T) -> T:
        pass

    @abstractmethod
    def is_some(self) -> bool:
        pass

    def is_none(self) -> bool:
        return not self.is_some()


class Some(Maybe[T]):

    def __init__(self, value: T):
        self._value = value

    def get_or_else(self, default: T) -> T:
        return self._value

    def is_some(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"Some({self._value!r})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Some) and self._value == other._value


class Nothing(Maybe[T]):

    def get_or_else(self, default: T) -> T:
        return default

    def is_some(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "Nothing()"

    def __eq__(self, other) -> bool:
        return isinstance(other, Nothing)


class Either(Generic[E, T], ABC):

    @abstractmethod
    def bind(self, f: Callable[[T], 'Either[E, U]']) -> 'Either[E, U]':
        pass

    @abstractmethod
    def get_or_else(self, default: T) -> T:
        pass

    @abstractmethod
    def is_right(self) -> bool:
        pass

    def is_left(self) -> bool:
        return not self.is_right()

    @abstractmethod
    def get_error(self) -> E:
        pass


class Right(Either[E, T]):

    def __init__(self, value: T):
        self._value = value

    def bind(self, f: Callable[[T], 'Either[E, U]']) -> 'Either[E, U]':
        return f(self._value)

    def get_or_else(self, default: T) -> T:
        return self._value

    def is_right(self) -> bool:
        return True

    def get_error(self) -> E:
        raise ValueError("Cannot get error from Right")

    def __repr__(self) -> str:
        return f"Right({self._value!r})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Right) and self._value == other._value


class Left(Either[E, T]):

    def __init__(self, error: E):
        self._error = error

    def bind(self, f: Callable[[T], 'Either[E, U]']) -> 'Either[E, U]':
        return Left(self._error)

    def get_or_else(self, default: T) -> T:
        return default

    def is_right(self) -> bool:
        return False

    def get_error(self) -> E:
        return self._error

    def __repr__(self) -> str:
        return f"Left({self._error!r})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Left) and self._error == other._error


def safe_goal(goals: Iterable[MonthlyGoal], month_key: str) -> Maybe[MonthlyGoal]:
    for g in goals:
        if g.month_key == month_key:
            return Some(g)
    return Nothing()


def validate_amount(amount) -> Either[dict, float]:
    if not isinstance(amount, (int, float)) or isinstance(amount, bool) or not amount > 0:
        return Left({
            "error": "invalid_amount",
            "message": f"Amount must be a positive number, got {amount!r}",
            "amount": amount,
        })
    return Right(float(amount))


def _parse_category(value) -> Optional[Category]:
    try:
        return Category(value)
    except ValueError:
        return None


def validate_expense_input(
    amount: float, category, date_str: str
) -> Either[dict, tuple]:
    """Check raw form values for a new expense.

    Returns ``Right((amount, category, date_str))`` with the category coerced
    to :class:`Category`, or ``Left`` with an error dict.
    """
    checked = validate_amount(amount)
    if checked.is_left():
        return checked

    parsed = _parse_category(category)
    if parsed is None:
        return Left({
            "error": "unknown_category",
            "message": f"Category {category!r} is not one of {[c.value for c in Category]}",
            "category": category,
        })

    try:
        valid = len(date_str) == 10 and date.fromisoformat(date_str).isoformat() == date_str
    except (TypeError, ValueError):
        valid = False
    if not valid:
        return Left({
            "error": "invalid_date",
            "message": f"Date must be YYYY-MM-DD, got {date_str!r}",
            "date": date_str,
        })

    return Right((float(amount), parsed, date_str))
