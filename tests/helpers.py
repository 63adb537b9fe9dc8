"""Helper utilities for tests."""

from datetime import date
from decimal import Decimal

from models.category import Category
from models.expense import Expense


def make_expense(
    day: str, amount: str, category: Category = Category.OTHERS, description: str = ""
) -> Expense:
    """Build an Expense from compact string arguments.

    Args:
        day: Date in YYYY-MM-DD form.
        amount: Amount as a decimal string.
        category: Expense category.
        description: Optional description.
    """
    return Expense(
        date=date.fromisoformat(day),
        amount=Decimal(amount),
        category=category,
        description=description,
    )


def scenario_expenses():
    """The three-expense ledger used across report tests."""
    return [
        make_expense("2024-01-05", "1000", Category.GROCERIES, "milk"),
        make_expense("2024-01-05", "2000", Category.FUEL, "gas"),
        make_expense("2024-02-01", "500", Category.GROCERIES, "bread"),
    ]
