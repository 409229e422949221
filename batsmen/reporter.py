"""Report generation for sorted batsmen (dump, CSV, HTML, summary)."""

import csv
import logging
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from batsmen import Batsman

log = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).resolve().parent / 'templates'

CSV_COLUMNS = [
    'Rank',
    'Initials',
    'Surname',
    'Runs',
    'Average',
]


def render_dump(batsmen: list[Batsman]) -> str:
    """Render the debug representation of all fields of all records."""
    return repr(batsmen)


def _batsman_to_row(rank: int, batsman: Batsman) -> dict:
    """Convert a Batsman to a flat dict for CSV/HTML output."""
    return {
        'Rank': str(rank),
        'Initials': batsman.initials,
        'Surname': batsman.surname,
        'Runs': str(batsman.runs),
        'Average': f'{batsman.average:.0f}',
    }


def write_csv_report(batsmen: list[Batsman], output_path: Path) -> None:
    """Write the sorted batsmen as a CSV report.

    Uses UTF-8 with BOM (utf-8-sig) and semicolon delimiter for
    compatibility with German Excel.

    Args:
        batsmen: Filtered and sorted records.
        output_path: Path for the output CSV file.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, 'w', newline='', encoding='utf-8-sig') as f:
        writer = csv.DictWriter(f, fieldnames=CSV_COLUMNS, delimiter=';')
        writer.writeheader()
        for rank, batsman in enumerate(batsmen, start=1):
            writer.writerow(_batsman_to_row(rank, batsman))

    log.info("CSV-Report geschrieben: %s (%d Zeilen)", output_path, len(batsmen))


def write_html_report(
    batsmen: list[Batsman],
    output_path: Path,
    source_name: str = '',
) -> None:
    """Write the sorted batsmen as an HTML report using Jinja2.

    Args:
        batsmen: Filtered and sorted records.
        output_path: Path for the output HTML file.
        source_name: Name of the input file (for the report title).
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    env = Environment(
        loader=FileSystemLoader(str(TEMPLATE_DIR)),
        autoescape=True,
    )
    template = env.get_template('report.html')

    rows = [_batsman_to_row(rank, b) for rank, b in enumerate(batsmen, start=1)]
    stats = compute_stats(batsmen)

    html = template.render(
        source_name=source_name,
        rows=rows,
        stats=stats,
        columns=CSV_COLUMNS,
    )

    output_path.write_text(html, encoding='utf-8')
    log.info("HTML-Report geschrieben: %s", output_path)


def compute_stats(batsmen: list[Batsman]) -> dict:
    """Compute summary statistics for the sorted batsmen."""
    total_runs = sum(b.runs for b in batsmen)
    return {
        'total': len(batsmen),
        'total_runs': total_runs,
        'top_runs': batsmen[0].runs if batsmen else 0,
        'top_name': f'{batsmen[0].initials} {batsmen[0].surname}' if batsmen else '',
    }


def print_summary(batsmen: list[Batsman], source_name: str = '') -> None:
    """Print a summary of the report to stdout.

    Args:
        batsmen: Filtered and sorted records.
        source_name: Name of the input file.
    """
    stats = compute_stats(batsmen)

    print(f"\n=== Batsmen-Report: {source_name} ===")
    print(f"Spieler im Report:         {stats['total']:>5}")
    print(f"Runs gesamt:               {stats['total_runs']:>5}")
    print(f"Meiste Runs:               {stats['top_runs']:>5}")
    if stats['top_name']:
        print(f"  - {stats['top_name']}")
    print()
