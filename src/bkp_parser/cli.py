#!/usr/bin/env python3
"""
BKP Quote Parser CLI
Parses construction quotes into BKP sections and prints JSON or a section summary.
"""

import json
import logging
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from .bkp_codes import get_bkp_sheet_name, get_canonical_label
from .errors import ExtractionError
from .parser import BKPQuoteParser

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def _parse_or_abort(path: str, encoding: str):
    try:
        return BKPQuoteParser().parse_file(path, encoding=encoding)
    except ExtractionError as e:
        logger.error(f"❌ Extraction failed: {e}")
        click.echo(f"Error parsing quote: {e}", err=True)
        raise click.Abort()


@click.group(epilog="""
Examples:
  bkp-parser parse offerte.pdf                  # Print JSON to the console
  bkp-parser parse offerte.pdf -o result.json   # Save JSON to a file
  bkp-parser inspect offerte.txt                # Show a section summary
""")
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
def main(verbose: bool):
    """Extract BKP cost positions from construction quotes."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


@main.command()
@click.argument('path', type=click.Path(exists=True, dir_okay=False))
@click.option('--output', '-o', type=click.Path(dir_okay=False), help='Output JSON file path')
@click.option('--encoding', default='utf-8-sig', show_default=True, help='Encoding of plain-text input')
def parse(path: str, output: Optional[str], encoding: str):
    """Parse a quote (PDF or text) and output the sections as JSON."""
    result = _parse_or_abort(path, encoding)
    data = result.to_dict()

    if output:
        with open(output, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        logger.info(f"✅ Results saved to: {output}")
    else:
        click.echo(json.dumps(data, indent=2, ensure_ascii=False))


@main.command(name='inspect')
@click.argument('path', type=click.Path(exists=True, dir_okay=False))
@click.option('--encoding', default='utf-8-sig', show_default=True, help='Encoding of plain-text input')
def inspect_quote(path: str, encoding: str):
    """Show a summary table of the sections found in a quote."""
    result = _parse_or_abort(path, encoding)
    console = Console()

    table = Table(title=f"BKP sections in {result.metadata.file_name}")
    table.add_column("Code", style="cyan", no_wrap=True)
    table.add_column("Label")
    table.add_column("Items", justify="right")
    table.add_column("Articles", justify="right")
    table.add_column("Canonical label", style="dim")
    table.add_column("Sheet", style="dim")

    for section in result.sections:
        table.add_row(
            section.code,
            section.label,
            str(len(section.items)),
            str(section.article_count),
            get_canonical_label(section.code) or "-",
            get_bkp_sheet_name(section.code) or "-",
        )

    console.print(table)
    console.print(
        f"{result.metadata.section_count} sections, "
        f"{result.metadata.total_items} items, "
        f"{result.metadata.canonical_codes} canonical codes"
    )


if __name__ == '__main__':
    main()
