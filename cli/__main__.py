#!/usr/bin/env python3
"""
Spendbook CLI - Record personal expenses and report on them.

Usage:
    python -m cli <command> <subcommand> [options]

Commands:
    expenses     Add, list and summarize expenses
    categories   Show the expense categories

Examples:
    python -m cli expenses add
    python -m cli expenses add --date 2024-01-05 --amount 1000 --category 1 --description milk
    python -m cli expenses list --category 1
    python -m cli expenses list --month 2024-01
    python -m cli expenses stats
    python -m cli categories list
"""

import sys
import argparse
from cli import expenses, categories
from config import load_config
from services.base import Services
from logger import setup_logging, get_logger


def main():
    """Main CLI entry point with subcommands."""
    parser = argparse.ArgumentParser(
        prog="cli",
        description="Spendbook - Personal expense tracking",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
        required=True,
    )

    # Register each command's subparser
    expenses.setup_parser(subparsers)
    categories.setup_parser(subparsers)

    args = parser.parse_args()

    if hasattr(args, "func"):
        try:
            config = load_config()
            setup_logging(config)

            # Create services container and load the saved ledger
            services = Services(config)
            load_error = services.load_on_start()
            if load_error is not None:
                get_logger().warning(
                    f"Saved expenses could not be read and were discarded: {load_error}"
                )

            args.func(args, services)
        except Exception as e:
            print(f"Error: {e}")
            sys.exit(1)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
