from __future__ import annotations

from dataclasses import dataclass

from .commons import DEFAULT_MAX_COLUMNS, MAX_COLUMN_COUNT


@dataclass(frozen=True)
class PrinterModel:
    """Limits of one printer of the family.

    Every model speaks the same protocol, only the head width and the cutter
    differ.
    """

    name: str
    max_columns: int = DEFAULT_MAX_COLUMNS
    supports_partial_cut: bool = True

    def validate(self) -> None:
        if self.max_columns <= 0:
            raise ValueError("max_columns must be greater than zero")
        if self.max_columns > MAX_COLUMN_COUNT:
            raise ValueError(f"max_columns can't exceed {MAX_COLUMN_COUNT}")


DEFAULT_MODEL = PrinterModel("generic")
