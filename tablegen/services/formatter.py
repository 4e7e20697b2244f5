"""
Text rendering for generated multiplication tables
"""

from typing import Iterable, List, Tuple

from tablegen.models.schemas import TableFormat, TableRequest
from tablegen.services.generator import generate_for_request


class TableFormatter:
    """Renders (multiplier, product) rows in one of the display formats"""

    def __init__(self):
        self.row_templates = {
            TableFormat.SIMPLE: "{base} x {multiplier} = {product}",
            TableFormat.BOXED: "| {base} x {multiplier} = {product:>3} |",
            TableFormat.FANCY: "{base} x {multiplier} = {product}",
        }
        self.fancy_header = "*** MULTIPLICATION TABLE FOR {base} ***"

    def format_row(self, base: int, multiplier: int, product: int, fmt: TableFormat) -> str:
        """
        Render a single table row

        Args:
            base: Number the table is built for
            multiplier: Multiplier of this row
            product: Precomputed product of base and multiplier
            fmt: Display format

        Returns:
            The row as one line of text
        """
        return self.row_templates[fmt].format(
            base=base, multiplier=multiplier, product=product
        )

    def render_table(
        self,
        base: int,
        rows: Iterable[Tuple[int, int]],
        fmt: TableFormat,
    ) -> List[str]:
        """
        Render every row plus the borders or header the format calls for

        Args:
            base: Number the table is built for
            rows: (multiplier, product) pairs in display order
            fmt: Display format

        Returns:
            Lines of text ready to print
        """
        lines = [
            self.format_row(base, multiplier, product, fmt)
            for multiplier, product in rows
        ]

        if fmt == TableFormat.BOXED:
            return self._frame(lines)
        if fmt == TableFormat.FANCY:
            return self._header(base) + lines
        return lines

    def render_request(self, request: TableRequest) -> List[str]:
        """Generate and render the table described by a request"""
        return self.render_table(request.base, generate_for_request(request), request.format)

    def _frame(self, lines: List[str]) -> List[str]:
        if not lines:
            return lines
        width = max(len(line) for line in lines)
        rule = "+" + "-" * (width - 2) + "+"
        return [rule] + lines + [rule]

    def _header(self, base: int) -> List[str]:
        title = self.fancy_header.format(base=base)
        stars = "*" * len(title)
        return [stars, title, stars]
