"""Expense categories."""

from enum import Enum

from exceptions import ValidationError


class Category(str, Enum):
    """The fixed set of expense categories, in menu order."""

    GROCERIES = "Groceries"
    HOUSING = "Housing"
    RESTAURANTS = "Restaurants"
    HOBBIES = "Hobbies"
    CAR_SERVICES = "Car Services"
    COMMUNICATION = "Communication"
    INSURANCES = "Insurances"
    FUEL = "Fuel"
    OTHERS = "Others"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_index(cls, index) -> "Category":
        """Resolve a 1-based menu index to a category.

        Args:
            index: Menu number as an int or a numeric string.

        Returns:
            The Category at that position.

        Raises:
            ValidationError: If the index is not a number or is out of range.
        """
        if isinstance(index, bool):
            raise ValidationError(f"Invalid category index: {index!r}")
        try:
            position = int(str(index).strip())
        except ValueError:
            raise ValidationError(f"Invalid category index: {index!r}") from None

        members = list(cls)
        if position < 1 or position > len(members):
            raise ValidationError(
                f"Category index must be between 1 and {len(members)}, got {position}"
            )
        return members[position - 1]
