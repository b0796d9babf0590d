"""Validation for raw workout form inputs."""

from __future__ import annotations

import re
from dataclasses import dataclass

INVALID_WORKOUT_MESSAGE = "Please enter valid workout details."

# Leading integer prefix, ASCII digits only ("12abc" -> 12, "3.5" -> 3).
_INTEGER_PREFIX_RE = re.compile(r"^[+-]?[0-9]+")


class WorkoutValidationError(ValueError):
    """Raised when raw workout inputs do not describe a valid record."""

    def __init__(self, *, field: str, raw_value: str) -> None:
        """Initialize the error.

        Args:
            field: Name of the offending input ("name" or "calories").
            raw_value: Raw text submitted for that input.
        """

        super().__init__(INVALID_WORKOUT_MESSAGE)
        self.field = field
        self.raw_value = raw_value


@dataclass(frozen=True, slots=True)
class WorkoutInput:
    """Validated workout inputs ready to become a record."""

    name: str
    calories: int


def validate_workout_input(name: str | None, calories: str | None) -> WorkoutInput:
    """Validate raw name/calories text.

    Args:
        name: Raw workout name; trimmed before checking.
        calories: Raw calories text; its leading integer prefix is
            used and must be greater than zero.

    Returns:
        WorkoutInput with the trimmed name and parsed calories.

    Raises:
        WorkoutValidationError: When the name is blank or calories are not a
            positive integer.
    """

    cleaned_name = (name or "").strip()
    if not cleaned_name:
        raise WorkoutValidationError(field="name", raw_value=name or "")

    raw_calories = (calories or "").strip()
    match = _INTEGER_PREFIX_RE.match(raw_calories)
    if match is None:
        raise WorkoutValidationError(field="calories", raw_value=calories or "")
    parsed = int(match.group(0))
    if parsed <= 0:
        raise WorkoutValidationError(field="calories", raw_value=calories or "")
    return WorkoutInput(name=cleaned_name, calories=parsed)
