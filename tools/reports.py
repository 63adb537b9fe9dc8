"""Statistics report assembled from the aggregation tools."""

from typing import Any, Dict, Sequence

from models.expense import Expense
from tools import aggregations


def get_statistics(expenses: Sequence[Expense], top: int = 3) -> Dict[str, Any]:
    """Get the full statistics report for a set of expenses.

    Args:
        expenses: Expenses to summarize. Must not be empty.
        top: How many of the largest expenses to include.

    Returns:
        Dictionary with:
        - "count": Number of expenses (int)
        - "total", "average", "highest", "lowest": Decimal amounts
        - "by_category": Dict of Category to total, largest first
        - "max_by_category": Dict of Category to largest single amount
        - "by_month": List of MonthTotal, most recent first
        - "most_expensive_day": DayTotal
        - "top_expenses": List of the `top` largest Expense objects

    Raises:
        PreconditionError: If expenses is empty.
    """
    return {
        "count": len(expenses),
        "total": aggregations.total(expenses),
        "average": aggregations.average(expenses),
        "highest": aggregations.maximum(expenses),
        "lowest": aggregations.minimum(expenses),
        "by_category": aggregations.total_by_category(expenses),
        "max_by_category": aggregations.max_by_category(expenses),
        "by_month": aggregations.total_by_month(expenses),
        "most_expensive_day": aggregations.most_expensive_day(expenses),
        "top_expenses": aggregations.top_n(expenses, top),
    }
