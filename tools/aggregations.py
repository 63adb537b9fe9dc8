"""Expense aggregation tools.

Every function here is a pure function of the expenses passed in. Amounts
are summed and compared as exact Decimals and are never rounded; rounding
for display happens in the CLI.

Grouping functions build a key -> accumulator dict in one pass and then
sort explicitly. Tie-breaks:
    - total_by_category: equal totals keep first-appearance order of the category.
    - max_by_category: categories in first-appearance order.
    - most_expensive_day: equal day totals resolve to the earliest date.
    - top_n: equal amounts keep their original order.
"""

from datetime import date
from decimal import MAX_EMAX, MAX_PREC, MIN_EMIN, Context, Decimal, localcontext
from typing import Dict, List, NamedTuple, Optional, Sequence

from exceptions import PreconditionError
from models.category import Category
from models.expense import Expense


# Additions under this context never round, however many digits an amount has.
_EXACT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN)


class MonthTotal(NamedTuple):
    year: int
    month: int
    total: Decimal


class DayTotal(NamedTuple):
    date: date
    total: Decimal


def _require_expenses(expenses: Sequence[Expense], statistic: str) -> None:
    if not expenses:
        raise PreconditionError(f"Cannot compute {statistic} of no expenses")


def total(expenses: Sequence[Expense]) -> Decimal:
    """Sum of all amounts; Decimal("0") for no expenses."""
    with localcontext(_EXACT):
        return sum((expense.amount for expense in expenses), Decimal("0"))


def average(expenses: Sequence[Expense]) -> Decimal:
    """Mean amount, unrounded.

    Raises:
        PreconditionError: If there are no expenses.
    """
    _require_expenses(expenses, "average")
    amount = total(expenses)
    # Division can be inexact, so it needs a finite precision: keep every
    # digit of the total plus 28 more.
    with localcontext(prec=len(amount.as_tuple().digits) + 28):
        return amount / len(expenses)


def maximum(expenses: Sequence[Expense]) -> Decimal:
    """Largest single amount.

    Raises:
        PreconditionError: If there are no expenses.
    """
    _require_expenses(expenses, "maximum")
    return max(expense.amount for expense in expenses)


def minimum(expenses: Sequence[Expense]) -> Decimal:
    """Smallest single amount.

    Raises:
        PreconditionError: If there are no expenses.
    """
    _require_expenses(expenses, "minimum")
    return min(expense.amount for expense in expenses)


def total_by_category(expenses: Sequence[Expense]) -> Dict[Category, Decimal]:
    """Total spent per category, largest total first.

    Returns:
        Dict mapping each category present to its total. Iteration order is
        descending by total.

    Example:
        {Category.FUEL: Decimal("2000"), Category.GROCERIES: Decimal("1500")}
    """
    totals: Dict[Category, Decimal] = {}
    with localcontext(_EXACT):
        for expense in expenses:
            category = expense.category
            totals[category] = totals.get(category, Decimal("0")) + expense.amount

    # sorted() is stable, so ties keep first-appearance order
    ordered = sorted(totals.items(), key=lambda item: item[1], reverse=True)
    return dict(ordered)


def max_by_category(expenses: Sequence[Expense]) -> Dict[Category, Decimal]:
    """Largest single amount per category that has at least one expense."""
    highest: Dict[Category, Decimal] = {}
    for expense in expenses:
        current = highest.get(expense.category)
        if current is None or expense.amount > current:
            highest[expense.category] = expense.amount
    return highest


def total_by_month(expenses: Sequence[Expense]) -> List[MonthTotal]:
    """Total spent per calendar month, most recent month first."""
    totals: Dict[tuple, Decimal] = {}
    with localcontext(_EXACT):
        for expense in expenses:
            key = (expense.date.year, expense.date.month)
            totals[key] = totals.get(key, Decimal("0")) + expense.amount

    return [
        MonthTotal(year, month, amount)
        for (year, month), amount in sorted(totals.items(), reverse=True)
    ]


def most_expensive_day(expenses: Sequence[Expense]) -> Optional[DayTotal]:
    """The calendar day with the largest total spend.

    Returns:
        DayTotal for that day (earliest date on ties), or None if there are
        no expenses.
    """
    totals: Dict[date, Decimal] = {}
    with localcontext(_EXACT):
        for expense in expenses:
            totals[expense.date] = totals.get(expense.date, Decimal("0")) + expense.amount

    if not totals:
        return None

    # max() keeps the first of equal totals, and the days are in date order
    day, amount = max(sorted(totals.items()), key=lambda item: item[1])
    return DayTotal(day, amount)


def top_n(expenses: Sequence[Expense], n: int) -> List[Expense]:
    """The n largest expenses by amount, largest first.

    Equal amounts keep their original order. Fewer than n expenses are all
    returned.

    Raises:
        ValueError: If n is negative.
    """
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    ranked = sorted(expenses, key=lambda expense: expense.amount, reverse=True)
    return ranked[:n]
