from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from models.category import Category


@dataclass(frozen=True)
class Expense:
    date: date
    amount: Decimal  # never negative
    category: Category
    description: str = ""

    def to_dict(self) -> dict:
        """Convert expense to its persisted representation."""
        return {
            "date": self.date.isoformat(),
            "amount": str(self.amount),
            "category": self.category.value,
            "description": self.description,
        }
