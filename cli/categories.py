#!/usr/bin/env python3

from logger import get_logger
from models.category import Category
from tools.aggregations import total_by_category

logger = get_logger()


def cmd_list(args, services):
    """List the expense categories with their menu numbers and totals."""
    totals = total_by_category(services.expenses.all())

    logger.info("\nCategories:")
    logger.info("=" * 80)
    for index, category in enumerate(Category, start=1):
        spent = totals.get(category)
        if spent is None:
            logger.info(f"{index}. {category}")
        else:
            logger.info(f"{index}. {category} (spent: {spent})")


def setup_parser(subparsers):
    """Setup categories subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "categories",
        help="Show categories",
        description="List the fixed expense categories",
    )

    categories_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available category commands",
        dest="subcommand",
        required=True,
    )

    # categories list
    list_parser = categories_subparsers.add_parser("list", help="List all categories")
    list_parser.set_defaults(func=cmd_list)
