"""Expense filtering tools."""

from datetime import date
from typing import Iterable, List, Tuple

from dateutil.relativedelta import relativedelta

from models.category import Category
from models.expense import Expense


def filter_by_category(expenses: Iterable[Expense], category: Category) -> List[Expense]:
    """Get expenses in one category, in their original order.

    Matching is exact; an empty list simply means nothing was recorded there.
    """
    return [expense for expense in expenses if expense.category == category]


def filter_by_date_range(
    expenses: Iterable[Expense], start: date, end: date
) -> List[Expense]:
    """Get expenses dated between start and end, both inclusive.

    If start is after end the result is empty.
    """
    return [expense for expense in expenses if start <= expense.date <= end]


def month_range(year: int, month: int) -> Tuple[date, date]:
    """Get the first and last day of a calendar month.

    Example:
        month_range(2024, 2) == (date(2024, 2, 1), date(2024, 2, 29))
    """
    first = date(year, month, 1)
    last = first + relativedelta(day=31)
    return first, last
