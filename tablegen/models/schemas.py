"""
Pydantic schemas for table requests and menu choices
"""

from enum import Enum
from typing import Dict

from pydantic import BaseModel, Field, model_validator


MIN_VALUE = 1
MAX_VALUE = 10


class TableFormat(str, Enum):
    """Display format for a generated table"""
    SIMPLE = "simple"
    BOXED = "boxed"
    FANCY = "fancy"

    @property
    def menu_key(self) -> str:
        """Number shown for this format in the format menu"""
        return _FORMAT_KEYS[self]

    @classmethod
    def from_choice(cls, choice: str) -> "TableFormat":
        """Look up a format by its menu number"""
        for fmt, key in _FORMAT_KEYS.items():
            if key == choice:
                return fmt
        raise ValueError(f"Unknown format choice: {choice!r}")


_FORMAT_KEYS: Dict[TableFormat, str] = {
    TableFormat.SIMPLE: "1",
    TableFormat.BOXED: "2",
    TableFormat.FANCY: "3",
}


class TableOrder(str, Enum):
    """Traversal order of the multiplier range"""
    ASCENDING = "ascending"
    DESCENDING = "descending"

    @classmethod
    def from_choice(cls, choice: str) -> "TableOrder":
        """Look up an order by its menu number"""
        if choice == "1":
            return cls.ASCENDING
        if choice == "2":
            return cls.DESCENDING
        raise ValueError(f"Unknown order choice: {choice!r}")


class TableScope(str, Enum):
    """Whether the whole multiplier range or a subrange is printed"""
    FULL = "full"
    PARTIAL = "partial"


class TableRequest(BaseModel):
    """One table to generate, built fresh for every loop iteration"""
    base: int = Field(ge=MIN_VALUE, le=MAX_VALUE)
    range_start: int = Field(default=MIN_VALUE, ge=MIN_VALUE, le=MAX_VALUE)
    range_end: int = Field(default=MAX_VALUE, ge=MIN_VALUE, le=MAX_VALUE)
    format: TableFormat = TableFormat.SIMPLE
    order: TableOrder = TableOrder.ASCENDING

    class Config:
        frozen = True

    @model_validator(mode="after")
    def check_range(self) -> "TableRequest":
        if self.range_start > self.range_end:
            raise ValueError(
                f"range_start ({self.range_start}) must not exceed range_end ({self.range_end})"
            )
        return self

    @classmethod
    def full(
        cls,
        base: int,
        format: TableFormat = TableFormat.SIMPLE,
        order: TableOrder = TableOrder.ASCENDING,
    ) -> "TableRequest":
        """Build a request covering every multiplier from 1 to 10"""
        return cls(
            base=base,
            range_start=MIN_VALUE,
            range_end=MAX_VALUE,
            format=format,
            order=order,
        )

    @property
    def multipliers(self) -> int:
        """Number of rows the table will contain"""
        return self.range_end - self.range_start + 1
