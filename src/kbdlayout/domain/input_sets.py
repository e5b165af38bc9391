"""Input sets — the locale-specific base characters for each keyboard mode.

Locale data is supplied from outside (config files); the only built-in
set is English, used as the default and as the fallback locale.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

InputRow = tuple[str, ...]


class InputSet(BaseModel):
    """Rows of characters for one keyboard mode.

    Rows may be given as strings (one character per key) or as
    sequences of key strings, and the whole set may be given as a bare
    list of rows (the form used in config files).
    """

    model_config = {"frozen": True}

    rows: tuple[InputRow, ...] = ()

    @model_validator(mode="before")
    @classmethod
    def _bare_rows(cls, data: Any) -> Any:
        if isinstance(data, (list, tuple)):
            return {"rows": data}
        return data

    @field_validator("rows", mode="before")
    @classmethod
    def _split_string_rows(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return tuple(tuple(row) if isinstance(row, str) else row for row in value)
        return value

    @field_validator("rows")
    @classmethod
    def _non_empty_keys(cls, rows: tuple[InputRow, ...]) -> tuple[InputRow, ...]:
        for index, row in enumerate(rows):
            if any(not key for key in row):
                raise ValueError(f"Row {index} has an empty key: {list(row)!r}")
        return rows

    def uppercased(self) -> InputSet:
        return InputSet(rows=tuple(tuple(c.upper() for c in row) for row in self.rows))


class InputSetProvider(BaseModel):
    """Static provider of the alphabetic, numeric and symbolic input sets."""

    model_config = {"frozen": True}

    alphabetic: InputSet = Field(default_factory=InputSet)
    numeric: InputSet = Field(default_factory=InputSet)
    symbolic: InputSet = Field(default_factory=InputSet)

    @classmethod
    def empty(cls) -> InputSetProvider:
        return cls()


DEFAULT_LOCALE = "en"

ENGLISH = InputSetProvider(
    alphabetic=InputSet(rows=["qwertyuiop", "asdfghjkl", "zxcvbnm"]),
    numeric=InputSet(rows=["1234567890", '-/:;()$&@"', ".,?!'"]),
    symbolic=InputSet(rows=["[]{}#%^*+=", "_\\|~<>€£¥•", ".,?!'"]),
)

BUILTIN_INPUT_SETS: dict[str, InputSetProvider] = {DEFAULT_LOCALE: ENGLISH}
