"""Expense service: the in-memory store of recorded expenses."""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Iterable, Tuple

from exceptions import ValidationError
from logger import get_logger
from models.category import Category
from models.expense import Expense

logger = get_logger()

DATE_FORMAT = "%Y-%m-%d"


def parse_date(value) -> date:
    """Parse a calendar date in YYYY-MM-DD form.

    Args:
        value: A date, or a string such as "2024-01-05".

    Returns:
        The parsed date (datetimes are truncated to their day).

    Raises:
        ValidationError: If the value is not a valid YYYY-MM-DD date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValidationError(f"Invalid date: {value!r}")
    try:
        return datetime.strptime(value.strip(), DATE_FORMAT).date()
    except ValueError:
        raise ValidationError(
            f"Invalid date {value!r}, expected YYYY-MM-DD"
        ) from None


def parse_amount(value) -> Decimal:
    """Parse a non-negative monetary amount as an exact Decimal.

    Floats are rejected; pass a string or Decimal so no binary rounding
    enters the ledger.

    Raises:
        ValidationError: If the amount is not a finite, non-negative number.
    """
    if isinstance(value, (bool, float)):
        raise ValidationError(f"Invalid amount: {value!r}")
    if isinstance(value, str):
        value = value.strip().replace(" ", "")
    try:
        amount = Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        raise ValidationError(f"Invalid amount: {value!r}") from None

    if not amount.is_finite():
        raise ValidationError(f"Invalid amount: {value!r}")
    if amount < 0:
        raise ValidationError(f"Amount cannot be negative: {value}")
    return amount


def parse_category(value) -> Category:
    """Resolve a 1-based category menu index (or a Category) to a Category."""
    if isinstance(value, Category):
        return value
    return Category.from_index(value)


class ExpenseService:
    """Ordered, in-memory collection of expenses for one session."""

    def __init__(self, expenses: Iterable[Expense] = ()):
        """Initialize the expense service.

        Args:
            expenses: Optional initial expenses, kept in the given order.
        """
        self._expenses = list(expenses)

    def add(self, expense: Expense) -> Expense:
        """Append an already validated expense."""
        self._expenses.append(expense)
        return expense

    def add_expense(self, expense_date, amount, category_index, description="") -> Expense:
        """Validate raw input and record a new expense.

        Args:
            expense_date: Date or "YYYY-MM-DD" string.
            amount: Decimal, int or numeric string; must not be negative.
            category_index: 1-based position in the category menu.
            description: Free text, may be empty.

        Returns:
            The created Expense.

        Raises:
            ValidationError: If any field is invalid. Nothing is recorded.
        """
        expense = Expense(
            date=parse_date(expense_date),
            amount=parse_amount(amount),
            category=parse_category(category_index),
            description=description or "",
        )
        self.add(expense)
        logger.debug(
            f"Added expense {expense.date.isoformat()} {expense.amount} {expense.category}"
        )
        return expense

    def all(self) -> Tuple[Expense, ...]:
        """Get all expenses in insertion order.

        Returns:
            A snapshot; expenses added later do not appear in it.
        """
        return tuple(self._expenses)

    def replace(self, expenses: Iterable[Expense]) -> None:
        """Replace the whole collection, e.g. after loading from disk."""
        self._expenses = list(expenses)

    def count(self) -> int:
        return len(self._expenses)

    def is_empty(self) -> bool:
        return not self._expenses
