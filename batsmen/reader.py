"""Line parser and file reader for batsman statistic files."""

import logging
import math
import re
from pathlib import Path

from batsmen import (
    RUNS_MAX,
    Batsman,
    NumericParseError,
    StructuralParseError,
)

log = logging.getLogger(__name__)

_RUNS_RE = re.compile(r'\+?[0-9]+')

_AVERAGE_RE = re.compile(
    r'[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?'
    r'|[+-]?(?:inf|infinity|nan)',
    re.IGNORECASE,
)


def detect_encoding(path: Path) -> str:
    """Detect file encoding by checking for BOM bytes.

    Args:
        path: Path to the input file.

    Returns:
        Encoding string suitable for open().
    """
    with open(path, 'rb') as f:
        bom = f.read(2)
    if bom == b'\xff\xfe':
        return 'utf-16-le'
    return 'utf-8-sig'


def round_half_away_from_zero(value: float) -> float:
    """Round to the nearest integral value, ties away from zero.

    Python's round() rounds ties to even, so 2.5 would become 2.0.
    Here 2.5 becomes 3.0 and -2.5 becomes -3.0. Non-finite values are
    returned unchanged.

    Args:
        value: Value to round.

    Returns:
        Rounded value, still a float.
    """
    if not math.isfinite(value):
        return value
    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return math.copysign(float(whole), value)


def parse_runs(text: str, line: str, line_number: int | None = None) -> int:
    """Parse the runs field as an unsigned 32-bit integer."""
    if not _RUNS_RE.fullmatch(text):
        raise NumericParseError(
            f"Feld 'runs' ist keine vorzeichenlose Ganzzahl: {text!r}",
            line, 'runs', line_number,
        )
    # Cap the digit count before int(), which rejects very long strings
    digits = text.lstrip('+').lstrip('0')
    runs = int(digits or '0') if len(digits) <= len(str(RUNS_MAX)) else None
    if runs is None or runs > RUNS_MAX:
        raise NumericParseError(
            f"Feld 'runs' ausserhalb des Wertebereichs: {text!r}",
            line, 'runs', line_number,
        )
    return runs


def parse_average(text: str, line: str, line_number: int | None = None) -> float:
    """Parse the average field as a float and round it."""
    if not _AVERAGE_RE.fullmatch(text):
        raise NumericParseError(
            f"Feld 'average' ist keine Gleitkommazahl: {text!r}",
            line, 'average', line_number,
        )
    return round_half_away_from_zero(float(text))


def parse_line(line: str, line_number: int | None = None) -> Batsman:
    """Parse one ``"<initials> <surname>,<runs>,<average>"`` line.

    Every comma-separated field is stripped. Fields after the third and
    name tokens after the surname are ignored. The name field is split on
    whitespace.

    Args:
        line: Raw text line.
        line_number: 1-based position in the file, used in error messages.

    Returns:
        The parsed Batsman.

    Raises:
        StructuralParseError: If the line has fewer than three fields
            or the name has fewer than two tokens.
        NumericParseError: If runs or average is not a valid number.
    """
    fields = [f.strip() for f in line.split(',')]
    if len(fields) < 3:
        raise StructuralParseError(
            f"Erwartet mindestens 3 Felder, gefunden {len(fields)}: {line!r}",
            line, line_number,
        )
    name, runs_text, average_text = fields[:3]

    tokens = name.split()
    if len(tokens) < 2:
        raise StructuralParseError(
            f"Name braucht Initialen und Nachname: {name!r}",
            line, line_number,
        )

    return Batsman(
        initials=tokens[0],
        surname=tokens[1],
        runs=parse_runs(runs_text, line, line_number),
        average=parse_average(average_text, line, line_number),
    )


def parse_lines(lines: list[str]) -> list[Batsman]:
    """Parse every line, stopping at the first failure.

    There is no skip policy: a bad line aborts the whole batch.
    """
    return [parse_line(line, n) for n, line in enumerate(lines, start=1)]


def read_lines(path: str | Path) -> list[str]:
    """Read a whole file into memory and split it into lines.

    Handles UTF-16LE (with BOM) and UTF-8 files. A trailing newline does
    not produce an extra empty line; LF and CRLF are both accepted.

    Raises:
        FileNotFoundError: If the file does not exist.
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the content does not match the encoding.
    """
    path = Path(path)
    encoding = detect_encoding(path)

    with open(path, 'r', encoding=encoding) as f:
        content = f.read()

    # Strip BOM if present
    content = content.lstrip('\ufeff')

    lines = content.splitlines()
    log.info("%d Zeilen gelesen aus %s", len(lines), path)
    return lines


def read_batsmen(path: str | Path) -> list[Batsman]:
    """Read and parse all batsman records from a file.

    Args:
        path: Path to the input file.

    Returns:
        List of Batsman objects in file order.

    Raises:
        FileNotFoundError: If the file does not exist.
        RecordParseError: If any line is malformed.
    """
    return parse_lines(read_lines(path))
