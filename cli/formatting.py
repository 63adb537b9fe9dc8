"""Display formatting for amounts and expenses."""

from decimal import MAX_PREC, ROUND_HALF_EVEN, Decimal, localcontext

from config import Config
from models.expense import Expense


def round_for_display(amount: Decimal, places: int) -> Decimal:
    """Round an amount to `places` decimals using banker's rounding."""
    with localcontext(prec=MAX_PREC):
        return amount.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_EVEN)


def format_amount(amount: Decimal, config: Config) -> str:
    """Format an amount for display, e.g. "12 500 Ft".

    Thousands are grouped with spaces and decimals use a comma.
    """
    places = config.decimal_places
    rounded = round_for_display(amount, places)
    text = f"{rounded:,.{places}f}".replace(",", " ").replace(".", ",")
    if config.currency_suffix:
        return f"{text} {config.currency_suffix}"
    return text


def format_expense(expense: Expense, config: Config) -> str:
    """Format one expense as a single listing line."""
    return (
        f"{expense.date.isoformat()} | {format_amount(expense.amount, config)} | "
        f"{expense.category} | {expense.description}"
    )
