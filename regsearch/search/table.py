"""Text table output for search results."""

from __future__ import annotations

from typing import Iterable

from rich.console import Console
from rich.table import Table
from rich.text import Text

from regsearch.search.models import SearchResult

# Column layout: every column is at least MIN_CELL_WIDTH wide including
# the CELL_PADDING spaces that separate it from the next one.
MIN_CELL_WIDTH = 10
CELL_PADDING = 3

# Wide enough that rich never shrinks or wraps a row
RENDER_WIDTH = 4096

# Description truncation
TRUNCATE_THRESHOLD = 45
TRUNCATE_LENGTH = 42
ELLIPSIS = "..."

HEADERS = ("NAME", "DESCRIPTION", "STARS", "OFFICIAL", "AUTOMATED")
OK_MARK = "[OK]"


def clean_description(description: str, truncate: bool = True) -> str:
    """Flatten a description onto one line and shorten it if requested."""
    desc = description.replace("\n", " ").replace("\r", " ")
    if truncate and len(desc) > TRUNCATE_THRESHOLD:
        desc = desc[:TRUNCATE_LENGTH] + ELLIPSIS
    return desc


def build_table(results: Iterable[SearchResult], truncate_descriptions: bool = True) -> Table:
    """Build the results table, header first, rows in the given order."""
    table = Table(
        box=None,
        show_edge=False,
        pad_edge=False,
        padding=(0, CELL_PADDING, 0, 0),
        header_style="",
    )
    for header in HEADERS:
        table.add_column(header, min_width=MIN_CELL_WIDTH - CELL_PADDING, no_wrap=True)

    for res in results:
        # Text cells, so registry descriptions are never parsed as markup
        table.add_row(
            Text(res.name),
            Text(clean_description(res.description, truncate_descriptions)),
            Text(str(res.star_count)),
            Text(OK_MARK if res.is_official else ""),
            Text(OK_MARK if res.is_automated or res.is_trusted else ""),
        )
    return table


def render_table(results: Iterable[SearchResult], truncate_descriptions: bool = True) -> str:
    """Render the results table as plain text, one line per row."""
    console = Console(width=RENDER_WIDTH, color_system=None, highlight=False)
    with console.capture() as capture:
        console.print(build_table(results, truncate_descriptions))
    return "".join(line.rstrip() + "\n" for line in capture.get().splitlines())
