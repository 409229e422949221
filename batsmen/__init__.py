"""Core module for batsmen-report."""

from dataclasses import dataclass
from typing import Optional

from batsmen.comparison import records_equal

# Surname initial kept by the report filter
SURNAME_INITIAL = 'C'

# Upper bound of the runs counter (unsigned 32 bit)
RUNS_MAX = 2**32 - 1


@dataclass(frozen=True, eq=False)
class Batsman:
    """Represents one player's statistic line."""

    initials: str
    surname: str
    runs: int
    average: float    # Rounded to an integral value at parse time

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Batsman):
            return NotImplemented
        return records_equal(self, other)

    def __hash__(self) -> int:
        # average is compared with a tolerance and stays out of the hash
        return hash((self.initials, self.surname, self.runs))


class RecordParseError(ValueError):
    """A line could not be parsed into a Batsman."""

    def __init__(self, message: str, line: str, line_number: Optional[int] = None):
        self.line = line
        self.line_number = line_number
        if line_number is not None:
            message = f"Zeile {line_number}: {message}"
        super().__init__(message)


class StructuralParseError(RecordParseError):
    """Wrong number of comma fields or name tokens."""


class NumericParseError(RecordParseError):
    """The runs or average field is not a valid number."""

    def __init__(
        self,
        message: str,
        line: str,
        field: str,
        line_number: Optional[int] = None,
    ):
        self.field = field
        super().__init__(message, line, line_number)
