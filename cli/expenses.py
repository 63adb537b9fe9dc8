#!/usr/bin/env python3

import sys
import argparse
from datetime import date, datetime

from cli.formatting import format_amount, format_expense
from exceptions import PersistError, ValidationError
from logger import get_logger
from models.category import Category
from services.expenses import parse_amount, parse_category, parse_date
from tools.queries import filter_by_category, filter_by_date_range, month_range
from tools.reports import get_statistics

logger = get_logger()


def _prompt(label, parse, error_message):
    """Ask for a value until `parse` accepts it."""
    value = input(label)
    while True:
        try:
            return parse(value)
        except ValidationError:
            value = input(error_message)


def _print_categories():
    print("Categories:")
    for index, category in enumerate(Category, start=1):
        print(f"{index}. {category}")


def cmd_add(args, services):
    """Add a new expense, prompting for any field not given as an option.

    Args:
        args: Parsed command-line arguments with optional date, amount,
              category and description
        services: Services container with the expense store
    """
    try:
        expense_date = parse_date(args.date) if args.date else None
        amount = parse_amount(args.amount) if args.amount is not None else None
        category = (
            parse_category(args.category) if args.category is not None else None
        )
    except ValidationError as e:
        logger.error(str(e))
        sys.exit(1)

    if expense_date is None:
        expense_date = _prompt(
            "Date (yyyy-MM-dd): ",
            parse_date,
            "Invalid date! Please use yyyy-MM-dd: ",
        )
    if amount is None:
        amount = _prompt(
            "Amount: ",
            parse_amount,
            "Invalid amount! Please enter a positive number: ",
        )
    if category is None:
        _print_categories()
        category = _prompt(
            "Choose a category (number): ",
            parse_category,
            "Invalid choice! Enter a number from the list: ",
        )

    description = args.description
    if description is None:
        description = input("Description: ").strip()

    expense = services.expenses.add_expense(expense_date, amount, category, description)
    logger.info(f"✓ Expense added: {format_expense(expense, services.config)}")

    try:
        services.save_on_exit()
    except PersistError as e:
        logger.error(str(e))
        sys.exit(1)


def cmd_list(args, services):
    """List expenses, optionally filtered by category and date range."""
    if args.month is not None and (args.start is not None or args.end is not None):
        logger.error("--month cannot be combined with --from or --to.")
        sys.exit(1)

    expenses = services.expenses.all()

    if args.category is not None:
        try:
            category = Category.from_index(args.category)
        except ValidationError as e:
            logger.error(str(e))
            sys.exit(1)
        expenses = filter_by_category(expenses, category)
        logger.info(f"Expenses in category: {category}")

    if args.month is not None:
        start, end = month_range(args.month.year, args.month.month)
        expenses = filter_by_date_range(expenses, start, end)
        logger.info(f"Expenses from {start.isoformat()} to {end.isoformat()}:")
    elif args.start is not None or args.end is not None:
        start = args.start or date.min
        end = args.end or date.max
        expenses = filter_by_date_range(expenses, start, end)
        logger.info(f"Expenses from {start.isoformat()} to {end.isoformat()}:")

    if not expenses:
        logger.info("No expenses to show.")
        return

    for expense in expenses:
        logger.info(format_expense(expense, services.config))

    logger.info(f"\nTotal expenses: {len(expenses)}")


def cmd_stats(args, services):
    """Show spending statistics for all recorded expenses."""
    if services.expenses.is_empty():
        logger.info("No expenses available to show statistics.")
        return

    expenses = services.expenses.all()

    config = services.config
    stats = get_statistics(expenses, top=args.top)

    logger.info("\n=== Expense Statistics ===")
    logger.info(f"Total spent: {format_amount(stats['total'], config)}")
    logger.info(f"Average expense: {format_amount(stats['average'], config)}")
    logger.info(f"Highest single expense: {format_amount(stats['highest'], config)}")
    logger.info(f"Lowest single expense: {format_amount(stats['lowest'], config)}")

    logger.info("\nTotal spent by category:")
    for category, amount in stats["by_category"].items():
        logger.info(f"  {category}: {format_amount(amount, config)}")

    logger.info("\nHighest single expense per category:")
    for category, amount in stats["max_by_category"].items():
        logger.info(f"  {category}: {format_amount(amount, config)}")

    logger.info("\nTotal spent by month:")
    for month in stats["by_month"]:
        logger.info(
            f"  {month.year}-{month.month:02d}: {format_amount(month.total, config)}"
        )

    day = stats["most_expensive_day"]
    logger.info(
        f"\nMost expensive day: {day.date.isoformat()} "
        f"(Total spent: {format_amount(day.total, config)})"
    )

    logger.info(f"\nTop {args.top} biggest expenses:")
    for rank, expense in enumerate(stats["top_expenses"], start=1):
        logger.info(f"  {rank}. {format_expense(expense, config)}")


def _date_arg(value):
    try:
        return parse_date(value)
    except ValidationError as e:
        raise argparse.ArgumentTypeError(str(e))


def _month_arg(value):
    try:
        return datetime.strptime(value, "%Y-%m").date()
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid month {value!r}, expected YYYY-MM")


def setup_parser(subparsers):
    """Setup expenses subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "expenses",
        help="Record and report expenses",
        description="Add, list and summarize expenses",
    )

    expenses_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available expense commands",
        dest="subcommand",
        required=True,
    )

    # expenses add
    add_parser = expenses_subparsers.add_parser(
        "add", help="Add a new expense (prompts for missing fields)"
    )
    add_parser.add_argument("--date", help="Expense date (YYYY-MM-DD)")
    add_parser.add_argument("--amount", help="Amount spent")
    add_parser.add_argument(
        "--category", help="Category number (see 'categories list')"
    )
    add_parser.add_argument("--description", help="Free-text description")
    add_parser.set_defaults(func=cmd_add)

    # expenses list
    list_parser = expenses_subparsers.add_parser("list", help="List expenses")
    list_parser.add_argument(
        "--category", type=int, help="Only show this category number"
    )
    list_parser.add_argument(
        "--from", dest="start", type=_date_arg, help="Start date, inclusive"
    )
    list_parser.add_argument(
        "--to", dest="end", type=_date_arg, help="End date, inclusive"
    )
    list_parser.add_argument(
        "--month", type=_month_arg, help="Only show one month (YYYY-MM)"
    )
    list_parser.set_defaults(func=cmd_list)

    # expenses stats
    stats_parser = expenses_subparsers.add_parser(
        "stats", help="Show spending statistics"
    )
    stats_parser.add_argument(
        "--top", type=int, default=3, help="Number of biggest expenses to show"
    )
    stats_parser.set_defaults(func=cmd_stats)
