"""
Input validation utilities for interactive prompts
"""

import re
from typing import Tuple

from tablegen.models.schemas import (
    MAX_VALUE,
    MIN_VALUE,
    TableFormat,
    TableOrder,
    TableScope,
)


_DIGITS = re.compile(r"^[0-9]+$")

_SCOPE_ANSWERS = {
    "f": TableScope.FULL,
    "full": TableScope.FULL,
    "p": TableScope.PARTIAL,
    "partial": TableScope.PARTIAL,
}

_ORDER_ANSWERS = {
    "asc": TableOrder.ASCENDING,
    "ascending": TableOrder.ASCENDING,
    "desc": TableOrder.DESCENDING,
    "descending": TableOrder.DESCENDING,
}


class InvalidInputError(ValueError):
    """Raised when a raw answer cannot be accepted"""


def parse_number(raw: str, low: int = MIN_VALUE, high: int = MAX_VALUE) -> int:
    """
    Parse a whole number typed at a prompt

    Args:
        raw: Text entered by the user
        low: Smallest accepted value
        high: Largest accepted value

    Returns:
        The parsed integer

    Raises:
        InvalidInputError: If the text is not an unsigned integer in [low, high]
    """
    text = (raw or "").strip()
    if not _DIGITS.match(text):
        raise InvalidInputError(f"Please enter a whole number between {low} and {high}.")

    try:
        value = int(text)
    except ValueError:
        # Longer than the interpreter allows for int conversion
        raise InvalidInputError(f"Please enter a number between {low} and {high}.") from None

    if value < low or value > high:
        raise InvalidInputError(f"Please enter a number between {low} and {high}.")
    return value


def parse_range_end(raw: str, start: int) -> int:
    """Parse the end of a partial range, which may not fall below its start"""
    return parse_number(raw, low=start, high=MAX_VALUE)


def validate_range(start: int, end: int) -> Tuple[int, int]:
    """
    Check an already parsed multiplier range

    Returns:
        The (start, end) pair unchanged
    """
    for value in (start, end):
        if value < MIN_VALUE or value > MAX_VALUE:
            raise InvalidInputError(
                f"Range bounds must be between {MIN_VALUE} and {MAX_VALUE}."
            )
    if start > end:
        raise InvalidInputError(f"Start ({start}) must not be greater than end ({end}).")
    return start, end


def parse_scope(raw: str) -> TableScope:
    """Parse the full/partial answer"""
    answer = (raw or "").strip().lower()
    try:
        return _SCOPE_ANSWERS[answer]
    except KeyError:
        raise InvalidInputError("Please answer 'f' for full or 'p' for partial.") from None


def parse_format(raw: str, default: TableFormat = TableFormat.SIMPLE) -> TableFormat:
    """
    Parse a display format choice

    Empty input selects the default. The menu number or the format name is
    accepted otherwise.
    """
    answer = (raw or "").strip().lower()
    if not answer:
        return default

    try:
        return TableFormat.from_choice(answer)
    except ValueError:
        pass

    try:
        return TableFormat(answer)
    except ValueError:
        raise InvalidInputError("Please choose 1, 2 or 3.") from None


def parse_order(raw: str) -> TableOrder:
    """Parse the ascending/descending choice"""
    answer = (raw or "").strip().lower()
    if answer in _ORDER_ANSWERS:
        return _ORDER_ANSWERS[answer]

    try:
        return TableOrder.from_choice(answer)
    except ValueError:
        raise InvalidInputError("Please choose 1 for ascending or 2 for descending.") from None


def wants_another(raw: str) -> bool:
    """Only an explicit yes continues the session"""
    return (raw or "").strip().lower() in ("y", "yes")
