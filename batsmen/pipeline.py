"""Parse, filter and sort stages of the batsmen report."""

import logging
from functools import cmp_to_key
from typing import Callable, Iterable, TypeVar

from batsmen import SURNAME_INITIAL, Batsman
from batsmen.comparison import compare_by_runs
from batsmen.reader import parse_lines

log = logging.getLogger(__name__)

T = TypeVar('T')


def filter_by_surname_initial(
    batsmen: Iterable[Batsman],
    initial: str = SURNAME_INITIAL,
) -> list[Batsman]:
    """Keep batsmen whose surname starts with ``initial``.

    The comparison is case-sensitive with no Unicode normalization. An
    empty surname never matches. Relative order is preserved.

    Args:
        batsmen: Parsed records.
        initial: Single character the surname must start with.

    Returns:
        New list with the matching records.
    """
    return [b for b in batsmen if b.surname[:1] == initial]


def sorted_by(items: Iterable[T], cmp: Callable[[T, T], int]) -> list[T]:
    """Return a new list of ``items`` ordered by a three-way comparison.

    The sort is stable and the input is left untouched.
    """
    return sorted(items, key=cmp_to_key(cmp))


def sort_by_runs_desc(batsmen: Iterable[Batsman]) -> list[Batsman]:
    """Order batsmen by runs, highest first; ties keep input order."""
    return sorted_by(batsmen, lambda lhs, rhs: compare_by_runs(rhs, lhs))


def run_pipeline(
    lines: list[str],
    initial: str = SURNAME_INITIAL,
) -> list[Batsman]:
    """Run parse, filter and sort over the lines of an input file.

    Args:
        lines: Raw text lines, one record per line.
        initial: Surname initial kept by the filter.

    Returns:
        Filtered records sorted by descending runs.

    Raises:
        RecordParseError: On the first malformed line.
    """
    parsed = parse_lines(lines)
    kept = filter_by_surname_initial(parsed, initial)
    log.info(
        "%d von %d Spielern mit Nachname '%s...' behalten",
        len(kept), len(parsed), initial,
    )
    return sort_by_runs_desc(kept)
