"""
Interactive session loop: ask, validate, generate, print, repeat
"""

from enum import Enum
from typing import Callable, Optional, TypeVar

from tablegen.config import Settings, get_settings
from tablegen.logging import get_logger
from tablegen.models.schemas import MAX_VALUE, MIN_VALUE, TableRequest, TableScope
from tablegen.services.formatter import TableFormatter
from tablegen.validators import (
    InvalidInputError,
    parse_format,
    parse_number,
    parse_order,
    parse_range_end,
    parse_scope,
    validate_range,
    wants_another,
)

logger = get_logger(__name__)

T = TypeVar("T")

NUMBER_PROMPT = f"Enter number ({MIN_VALUE}-{MAX_VALUE}): "
SCOPE_PROMPT = "Full or partial table? (f/p): "
START_PROMPT = f"Start ({MIN_VALUE}-{MAX_VALUE}): "
END_PROMPT = "End ({start}-" + str(MAX_VALUE) + "): "
FORMAT_PROMPT = "Choose a display format: 1-Simple 2-Boxed 3-Fancy [default {default}]: "
ORDER_PROMPT = "Choose order [1-Ascending, 2-Descending]: "
CONTINUE_PROMPT = "Generate another? (y/n): "
FAREWELL = "Goodbye!"


class SessionState(str, Enum):
    """States of the interactive loop"""
    PROMPTING = "PROMPTING"
    VALIDATING = "VALIDATING"
    GENERATING = "GENERATING"
    PRINTING = "PRINTING"
    ASK_CONTINUE = "ASK_CONTINUE"
    TERMINATED = "TERMINATED"


class TableSession:
    """
    Drives one interactive run of the table generator

    Every iteration builds a fresh TableRequest from the answers and hands it
    to the formatter; nothing carries over between tables.
    """

    def __init__(
        self,
        input_func: Optional[Callable[[str], str]] = None,
        output_func: Optional[Callable[[str], None]] = None,
        settings: Optional[Settings] = None,
        formatter: Optional[TableFormatter] = None,
    ):
        self.input_func = input_func or input
        self.output_func = output_func or print
        self.settings = settings or get_settings()
        self.formatter = formatter or TableFormatter()
        self.state = SessionState.PROMPTING
        self.tables_printed = 0

    def run(self) -> int:
        """
        Run the loop until the user declines to continue

        Returns:
            Process exit code
        """
        logger.info("Session started")
        try:
            while True:
                self.state = SessionState.PROMPTING
                request = self.read_request()

                self.state = SessionState.GENERATING
                lines = self.formatter.render_request(request)

                self.state = SessionState.PRINTING
                for line in lines:
                    self.output_func(line)
                self.tables_printed += 1
                logger.debug(
                    "Table printed",
                    base=request.base,
                    range_start=request.range_start,
                    range_end=request.range_end,
                    format=request.format.value,
                    order=request.order.value,
                )

                self.state = SessionState.ASK_CONTINUE
                if not wants_another(self.input_func(CONTINUE_PROMPT)):
                    break
        except (EOFError, KeyboardInterrupt) as exc:
            # Closed input or Ctrl-C counts as answering "n"
            logger.info("Input interrupted", reason=type(exc).__name__, state=self.state.value)
            self.output_func("")

        self.state = SessionState.TERMINATED
        self.output_func(FAREWELL)
        logger.info("Session finished", tables_printed=self.tables_printed)
        return 0

    def read_request(self) -> TableRequest:
        """Prompt for every answer needed to build one table request"""
        base = self._ask(NUMBER_PROMPT, parse_number)

        scope = self._ask(SCOPE_PROMPT, parse_scope)
        if scope == TableScope.PARTIAL:
            start = self._ask(START_PROMPT, parse_number)
            end = self._ask(
                END_PROMPT.format(start=start),
                lambda raw: parse_range_end(raw, start),
            )
            start, end = validate_range(start, end)
        else:
            start, end = MIN_VALUE, MAX_VALUE

        default_format = self.settings.default_format
        fmt = self._ask(
            FORMAT_PROMPT.format(default=default_format.menu_key),
            lambda raw: parse_format(raw, default_format),
        )
        order = self._ask(ORDER_PROMPT, parse_order)

        return TableRequest(
            base=base,
            range_start=start,
            range_end=end,
            format=fmt,
            order=order,
        )

    def _ask(self, prompt: str, parser: Callable[[str], T]) -> T:
        """Re-prompt until the parser accepts the answer"""
        while True:
            self.state = SessionState.PROMPTING
            raw = self.input_func(prompt)

            self.state = SessionState.VALIDATING
            try:
                return parser(raw)
            except InvalidInputError as exc:
                logger.debug("Rejected input", prompt=prompt.strip(), raw=raw)
                self.output_func(f"Invalid input. {exc}")
