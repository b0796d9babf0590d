"""Unit tests for raw workout input validation."""

from __future__ import annotations

import pytest

from ledger.validation import INVALID_WORKOUT_MESSAGE, WorkoutValidationError, validate_workout_input

pytestmark = pytest.mark.unit


def test_valid_input_is_trimmed_and_parsed() -> None:
    """Names are trimmed and calories parsed into an int."""

    cleaned = validate_workout_input("  Running  ", " 300 ")
    assert cleaned.name == "Running"
    assert cleaned.calories == 300


@pytest.mark.parametrize("name", ["", "   ", "\t\n", None])
def test_blank_names_are_rejected(name: str | None) -> None:
    """Empty or whitespace-only names fail on the name field."""

    with pytest.raises(WorkoutValidationError) as excinfo:
        validate_workout_input(name, "300")
    assert excinfo.value.field == "name"
    assert str(excinfo.value) == INVALID_WORKOUT_MESSAGE


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("12abc", 12), ("3.5", 3), ("300 kcal", 300), ("+45", 45), ("1e3", 1), ("007", 7), ("1000000000000", 1000000000000)],
)
def test_calories_use_the_leading_integer_prefix(raw: str, expected: int) -> None:
    """Trailing non-digit text after the integer prefix is ignored."""

    assert validate_workout_input("Running", raw).calories == expected


@pytest.mark.parametrize("calories", ["0", "-5", "abc", "", "   ", "0.5", "-0", "kcal 300", "\uff13\uff10\uff10", None])
def test_calories_without_a_positive_integer_prefix_are_rejected(calories: str | None) -> None:
    """Calories need a leading ASCII integer greater than zero."""

    with pytest.raises(WorkoutValidationError) as excinfo:
        validate_workout_input("Swimming", calories)
    assert excinfo.value.field == "calories"


def test_validation_error_is_a_value_error() -> None:
    """Callers that catch ValueError also catch validation failures."""

    with pytest.raises(ValueError):
        validate_workout_input("Swimming", "-5")
