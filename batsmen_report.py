"""batsmen-report – CLI-Tool fuer gefilterte und sortierte Batsmen-Statistiken."""

import argparse
import logging
import sys
from pathlib import Path

from batsmen import RecordParseError
from batsmen.pipeline import run_pipeline
from batsmen.reader import read_lines
from batsmen.reporter import (
    print_summary,
    render_dump,
    write_csv_report,
    write_html_report,
)

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        description='Batsmen mit Nachname "C..." nach Runs absteigend sortieren.',
        prog='batsmen_report.py',
    )
    parser.add_argument(
        'path', type=Path,
        help='Pfad zur Eingabedatei ("<Initialen> <Nachname>,<Runs>,<Average>")',
    )
    parser.add_argument(
        '--output', type=Path,
        help='Ergebnis zusaetzlich als CSV-Report schreiben',
    )
    parser.add_argument(
        '--html', action='store_true',
        help='Zusaetzlich einen HTML-Report erzeugen (benoetigt --output)',
    )
    parser.add_argument(
        '--summary', action='store_true',
        help='Zusammenfassung auf stdout ausgeben',
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    logging.basicConfig(
        level=logging.INFO,
        format='%(levelname)s: %(message)s',
    )

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.html and not args.output:
        parser.error('--output ist erforderlich bei Verwendung von --html.')

    try:
        lines = read_lines(args.path)
    except (OSError, UnicodeDecodeError) as exc:
        log.error("Datei konnte nicht gelesen werden: %s", exc)
        sys.exit(1)

    try:
        batsmen = run_pipeline(lines)
    except RecordParseError as exc:
        log.error("Ungueltige Eingabe in %s: %s", args.path, exc)
        sys.exit(1)

    print(render_dump(batsmen))

    if args.output:
        write_csv_report(batsmen, args.output)
        if args.html:
            write_html_report(batsmen, args.output.with_suffix('.html'), args.path.name)

    if args.summary:
        print_summary(batsmen, args.path.name)


if __name__ == '__main__':
    main()
