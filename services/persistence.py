"""Persistence service: saves and restores expenses as a JSON document."""

import json
from datetime import date
from decimal import Decimal
from typing import Annotated, List

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    StrictInt,
    StrictStr,
    ValidationError as SchemaError,
    field_validator,
)

from exceptions import LoadError, PersistError
from logger import get_logger
from models.category import Category
from models.expense import Expense
from services.expenses import parse_amount, parse_date

logger = get_logger()

DOCUMENT_VERSION = 1


def _require_text(parse):
    """Wrap a parser so it only accepts JSON strings, never numbers."""

    def validate(value):
        if not isinstance(value, str):
            raise ValueError(f"expected a string, got {type(value).__name__}")
        return parse(value)

    return validate


# Dates and amounts are always written as strings; anything else is corrupt.
IsoDate = Annotated[date, BeforeValidator(_require_text(parse_date))]
AmountText = Annotated[Decimal, BeforeValidator(_require_text(parse_amount))]


class ExpenseEntry(BaseModel):
    """One expense as stored in the document."""

    model_config = ConfigDict(extra="forbid")

    date: IsoDate
    amount: AmountText
    category: Category
    description: StrictStr

    def to_expense(self) -> Expense:
        return Expense(
            date=self.date,
            amount=self.amount,
            category=self.category,
            description=self.description,
        )


class ExpenseDocument(BaseModel):
    """The whole persisted document."""

    model_config = ConfigDict(extra="forbid")

    version: StrictInt
    expenses: List[ExpenseEntry]

    @field_validator("version")
    @classmethod
    def check_version(cls, value: int) -> int:
        if value != DOCUMENT_VERSION:
            raise ValueError(f"unsupported document version {value}")
        return value


class PersistenceService:
    """Service for saving and loading the expenses document."""

    def __init__(self, storage_manager):
        """Initialize the persistence service.

        Args:
            storage_manager: Storage manager that owns the document path.
        """
        self.storage_manager = storage_manager

    def save(self, expenses: List[Expense]) -> None:
        """Write all expenses, in order, to the document.

        Args:
            expenses: Expenses to persist.

        Raises:
            PersistError: If the document cannot be written. The OSError is
                chained as the cause.
        """
        document = {
            "version": DOCUMENT_VERSION,
            "expenses": [expense.to_dict() for expense in expenses],
        }
        text = json.dumps(document, indent=2, ensure_ascii=False)

        path = self.storage_manager.get_data_path()
        try:
            self.storage_manager.write_text(text)
        except OSError as e:
            raise PersistError(f"Could not save expenses to {path}: {e}", path) from e

        logger.debug(f"Saved {len(expenses)} expenses to {path}")

    def load(self) -> List[Expense]:
        """Read expenses back from the document.

        Returns:
            Expenses in saved order. Empty if no document exists yet.

        Raises:
            LoadError: If the document exists but cannot be read or parsed.
                Nothing from it is kept.
        """
        path = self.storage_manager.get_data_path()
        if not self.storage_manager.exists():
            logger.debug(f"No expenses document at {path}")
            return []

        try:
            text = self.storage_manager.read_text()
            document = ExpenseDocument.model_validate_json(text)
        except (OSError, UnicodeDecodeError, SchemaError) as e:
            raise LoadError(f"Could not load expenses from {path}: {e}", path) from e

        expenses = [entry.to_expense() for entry in document.expenses]
        logger.debug(f"Loaded {len(expenses)} expenses from {path}")
        return expenses
