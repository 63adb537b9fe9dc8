"""Tests for expense aggregation tools."""

from datetime import date
from decimal import Decimal, ROUND_HALF_EVEN

import pytest

from exceptions import PreconditionError
from models.category import Category
from tools.aggregations import (
    DayTotal,
    MonthTotal,
    average,
    max_by_category,
    maximum,
    minimum,
    most_expensive_day,
    top_n,
    total,
    total_by_category,
    total_by_month,
)
from tests.helpers import make_expense, scenario_expenses


class TestScenario:
    """Tests against the three-expense reference ledger."""

    def test_total(self):
        assert total(scenario_expenses()) == Decimal("3500")

    def test_total_by_category(self):
        result = total_by_category(scenario_expenses())

        assert list(result.items()) == [
            (Category.FUEL, Decimal("2000")),
            (Category.GROCERIES, Decimal("1500")),
        ]

    def test_total_by_month(self):
        assert total_by_month(scenario_expenses()) == [
            MonthTotal(2024, 2, Decimal("500")),
            MonthTotal(2024, 1, Decimal("3000")),
        ]

    def test_most_expensive_day(self):
        assert most_expensive_day(scenario_expenses()) == DayTotal(
            date(2024, 1, 5), Decimal("3000")
        )

    def test_top_two(self):
        result = top_n(scenario_expenses(), 2)

        assert [(e.amount, e.category) for e in result] == [
            (Decimal("2000"), Category.FUEL),
            (Decimal("1000"), Category.GROCERIES),
        ]

    def test_average_min_max(self):
        expenses = scenario_expenses()

        assert maximum(expenses) == Decimal("2000")
        assert minimum(expenses) == Decimal("500")
        assert average(expenses).quantize(Decimal("0.01")) == Decimal("1166.67")


class TestEmpty:
    """Tests for behavior on no expenses."""

    def test_total_is_zero(self):
        assert total([]) == Decimal("0")

    @pytest.mark.parametrize("statistic", [average, maximum, minimum])
    def test_undefined_statistics_raise(self, statistic):
        with pytest.raises(PreconditionError):
            statistic([])

    def test_groupings_are_empty(self):
        assert total_by_category([]) == {}
        assert max_by_category([]) == {}
        assert total_by_month([]) == []
        assert top_n([], 3) == []

    def test_most_expensive_day_is_none(self):
        assert most_expensive_day([]) is None


class TestExactArithmetic:
    """Tests that amounts are summed as exact decimals."""

    def test_no_float_drift(self):
        expenses = [make_expense("2024-01-01", "0.1") for _ in range(10)]

        assert total(expenses) == Decimal("1.0")

    def test_average_not_rounded(self):
        expenses = [
            make_expense("2024-01-01", "1"),
            make_expense("2024-01-02", "1"),
            make_expense("2024-01-03", "2"),
        ]

        result = average(expenses)

        assert result.quantize(Decimal("0.0001")) == Decimal("1.3333")
        assert result != result.quantize(Decimal("0.01"))

    @pytest.mark.parametrize(
        "amounts",
        [
            ["1"],
            ["10", "20", "30"],
            ["0.01", "999999.99", "3.33"],
            ["1", "1", "2"],
            ["0", "0"],
        ],
    )
    def test_total_equals_average_times_count(self, amounts):
        expenses = [make_expense("2024-01-01", a) for a in amounts]

        avg = average(expenses)
        places = Decimal("0.01")
        assert (avg * len(expenses)).quantize(places, ROUND_HALF_EVEN) == total(
            expenses
        ).quantize(places, ROUND_HALF_EVEN)
        assert minimum(expenses) <= avg <= maximum(expenses)


class TestTotalByCategory:
    """Tests for total_by_category."""

    def test_sorted_descending(self):
        expenses = [
            make_expense("2024-01-01", "5", Category.HOBBIES),
            make_expense("2024-01-01", "50", Category.HOUSING),
            make_expense("2024-01-01", "20", Category.FUEL),
            make_expense("2024-01-02", "40", Category.HOBBIES),
        ]

        result = total_by_category(expenses)

        assert list(result) == [Category.HOUSING, Category.HOBBIES, Category.FUEL]
        assert result[Category.HOBBIES] == Decimal("45")

    def test_ties_keep_first_appearance(self):
        expenses = [
            make_expense("2024-01-01", "10", Category.OTHERS),
            make_expense("2024-01-01", "10", Category.GROCERIES),
            make_expense("2024-01-01", "10", Category.FUEL),
        ]

        first = list(total_by_category(expenses))
        second = list(total_by_category(expenses))

        assert first == [Category.OTHERS, Category.GROCERIES, Category.FUEL]
        assert first == second

    def test_only_present_categories(self):
        result = total_by_category([make_expense("2024-01-01", "1", Category.FUEL)])

        assert result == {Category.FUEL: Decimal("1")}


class TestMaxByCategory:
    """Tests for max_by_category."""

    def test_largest_per_category(self):
        expenses = [
            make_expense("2024-01-01", "5", Category.GROCERIES),
            make_expense("2024-01-02", "15", Category.GROCERIES),
            make_expense("2024-01-03", "7", Category.GROCERIES),
            make_expense("2024-01-03", "3", Category.FUEL),
        ]

        assert max_by_category(expenses) == {
            Category.GROCERIES: Decimal("15"),
            Category.FUEL: Decimal("3"),
        }

    def test_no_zero_fill(self):
        result = max_by_category(scenario_expenses())

        assert set(result) == {Category.GROCERIES, Category.FUEL}

    def test_first_appearance_order(self):
        expenses = [
            make_expense("2024-01-01", "1", Category.OTHERS),
            make_expense("2024-01-01", "100", Category.HOUSING),
        ]

        assert list(max_by_category(expenses)) == [Category.OTHERS, Category.HOUSING]


class TestTotalByMonth:
    """Tests for total_by_month."""

    def test_most_recent_first_across_years(self):
        expenses = [
            make_expense("2023-12-31", "1"),
            make_expense("2024-01-01", "2"),
            make_expense("2023-02-10", "4"),
            make_expense("2024-01-20", "8"),
            make_expense("2022-12-01", "16"),
        ]

        assert total_by_month(expenses) == [
            MonthTotal(2024, 1, Decimal("10")),
            MonthTotal(2023, 12, Decimal("1")),
            MonthTotal(2023, 2, Decimal("4")),
            MonthTotal(2022, 12, Decimal("16")),
        ]

    def test_independent_of_input_order(self):
        expenses = scenario_expenses()

        assert total_by_month(expenses) == total_by_month(list(reversed(expenses)))


class TestMostExpensiveDay:
    """Tests for most_expensive_day."""

    def test_sums_per_day(self):
        expenses = [
            make_expense("2024-01-01", "100"),
            make_expense("2024-01-02", "60"),
            make_expense("2024-01-02", "60"),
        ]

        assert most_expensive_day(expenses) == DayTotal(date(2024, 1, 2), Decimal("120"))

    def test_tie_resolves_to_earliest_date(self):
        expenses = [
            make_expense("2024-03-01", "50"),
            make_expense("2024-01-01", "50"),
            make_expense("2024-02-01", "20"),
        ]

        result = most_expensive_day(expenses)

        assert result == DayTotal(date(2024, 1, 1), Decimal("50"))
        assert most_expensive_day(list(reversed(expenses))) == result


class TestTopN:
    """Tests for top_n."""

    def test_n_larger_than_input_returns_all_descending(self):
        expenses = scenario_expenses()

        result = top_n(expenses, 10)

        assert [e.amount for e in result] == [
            Decimal("2000"),
            Decimal("1000"),
            Decimal("500"),
        ]

    def test_ties_keep_store_order(self):
        expenses = [
            make_expense("2024-01-01", "10", description="first"),
            make_expense("2024-01-02", "30", description="big"),
            make_expense("2024-01-03", "10", description="second"),
            make_expense("2024-01-04", "10", description="third"),
        ]

        result = top_n(expenses, 3)

        assert [e.description for e in result] == ["big", "first", "second"]

    def test_zero(self):
        assert top_n(scenario_expenses(), 0) == []

    def test_negative_n(self):
        with pytest.raises(ValueError):
            top_n(scenario_expenses(), -1)

    def test_does_not_modify_input(self):
        expenses = scenario_expenses()

        top_n(expenses, 2)

        assert expenses == scenario_expenses()


class TestLongAmounts:
    """Tests that amounts with more than 28 significant digits stay exact."""

    LONG = "12345678901234567890.123456789"

    def test_total_single(self):
        assert total([make_expense("2024-01-01", self.LONG)]) == Decimal(self.LONG)

    def test_total_sum(self):
        expenses = [
            make_expense("2024-01-01", self.LONG),
            make_expense("2024-01-02", "0.000000000000000000001"),
        ]

        assert total(expenses) == Decimal("12345678901234567890.123456789000000000001")

    def test_groupings(self):
        expenses = [
            make_expense("2024-01-01", self.LONG, Category.HOUSING),
            make_expense("2024-01-01", "1", Category.HOUSING),
        ]
        expected = Decimal("12345678901234567891.123456789")

        assert total_by_category(expenses) == {Category.HOUSING: expected}
        assert total_by_month(expenses) == [MonthTotal(2024, 1, expected)]
        assert most_expensive_day(expenses) == DayTotal(date(2024, 1, 1), expected)

    def test_average_keeps_total_digits(self):
        expenses = [
            make_expense("2024-01-01", self.LONG),
            make_expense("2024-01-02", self.LONG),
        ]

        assert average(expenses) == Decimal(self.LONG)

    def test_most_expensive_day_compares_long_totals(self):
        """Test days differing only past the 28th digit are told apart."""
        expenses = [
            make_expense("2024-01-01", "12345678901234567890.1234567891"),
            make_expense("2024-01-02", "12345678901234567890.1234567892"),
        ]

        assert most_expensive_day(expenses).date == date(2024, 1, 2)
