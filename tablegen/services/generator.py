"""
Multiplication table generation
"""

from typing import Iterator, Tuple

from tablegen.models.schemas import TableOrder, TableRequest


def multiply(a: int, b: int) -> int:
    """
    Multiply two numbers.

    Args:
        a: First number
        b: Second number

    Returns:
        Product of a and b
    """
    return a * b


def generate_table(
    base: int,
    start: int,
    end: int,
    order: TableOrder = TableOrder.ASCENDING,
) -> Iterator[Tuple[int, int]]:
    """
    Lazily generate (multiplier, product) pairs for a base number.

    Args:
        base: Number the table is built for
        start: First multiplier of the range (inclusive)
        end: Last multiplier of the range (inclusive)
        order: Ascending walks start to end, descending walks end to start

    Yields:
        (multiplier, product) tuples
    """
    if order == TableOrder.DESCENDING:
        multipliers = range(end, start - 1, -1)
    else:
        multipliers = range(start, end + 1)

    for multiplier in multipliers:
        yield multiplier, multiply(base, multiplier)


def generate_for_request(request: TableRequest) -> Iterator[Tuple[int, int]]:
    """Generate the rows described by a table request"""
    return generate_table(
        request.base,
        request.range_start,
        request.range_end,
        request.order,
    )
