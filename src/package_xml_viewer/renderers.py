"""
Output renderers: bordered table, CSV and TSV.

Every format ends each line, including the last one, with a single ``\\n``.
"""

import csv
import io
from typing import Callable, Dict, List

from rich import box
from rich.cells import cell_len
from rich.console import Console
from rich.table import Table
from rich.text import Text

from package_xml_viewer.models import Component, OutputFormat

TYPE_HEADER = "Type"
PARENT_HEADER = "Parent"
MEMBER_HEADER = "Member"

# Horizontal padding on each side of a table cell
CELL_PADDING = 1

# C0 control characters are shown escaped in table cells so each cell stays on one line
CELL_ESCAPES: Dict[int, str] = {code: f"\\x{code:02x}" for code in [*range(0x20), 0x7f]}
CELL_ESCAPES.update({ord("\t"): "\\t", ord("\n"): "\\n", ord("\r"): "\\r"})


def escape_cell(value: str) -> str:
    """Replace control characters with their backslash escapes."""
    return value.translate(CELL_ESCAPES)


def get_headers(show_parent: bool = False) -> List[str]:
    """Column headers for the selected layout."""
    if show_parent:
        return [TYPE_HEADER, PARENT_HEADER, MEMBER_HEADER]
    return [TYPE_HEADER, MEMBER_HEADER]


def to_rows(components: List[Component], show_parent: bool = False) -> List[List[str]]:
    """Project components onto output columns, keeping their order."""
    if show_parent:
        return [[c.type_name, c.parent_name, c.member_name] for c in components]
    return [[c.type_name, c.member_name] for c in components]


def render_table(components: List[Component], show_parent: bool = False) -> str:
    """Render components as a box-drawn grid.

    Column widths follow the widest header or cell. An empty list still
    produces a bordered header row. Tabs, newlines and other control
    characters are shown as backslash escapes (``a\\tb``), so every component
    occupies exactly one table line; use CSV for the raw values.
    """
    headers = get_headers(show_parent)
    rows = [[escape_cell(value) for value in row] for row in to_rows(components, show_parent)]

    table = Table(box=box.SQUARE, show_header=True, show_edge=True, padding=(0, CELL_PADDING))
    for header in headers:
        table.add_column(header, no_wrap=True, overflow="ignore")
    for row in rows:
        # Text cells are never interpreted as console markup or emoji codes
        table.add_row(*(Text(value) for value in row))

    col_widths = [cell_len(h) for h in headers]
    for row in rows:
        for i, value in enumerate(row):
            col_widths[i] = max(col_widths[i], cell_len(value))
    width = sum(w + 2 * CELL_PADDING for w in col_widths) + len(headers) + 1

    buffer = io.StringIO()
    console = Console(
        file=buffer,
        width=width,
        color_system=None,
        force_terminal=False,
        no_color=True,
        highlight=False,
        markup=False,
        emoji=False,
        legacy_windows=False,
    )
    console.print(table, crop=False)
    return buffer.getvalue()


def render_csv(components: List[Component], show_parent: bool = False) -> str:
    """Render components as CSV with standard minimal quoting."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n", quoting=csv.QUOTE_MINIMAL)
    writer.writerow(get_headers(show_parent))
    writer.writerows(to_rows(components, show_parent))
    return buffer.getvalue()


def render_tsv(components: List[Component], show_parent: bool = False) -> str:
    """Render components as tab-separated values.

    Fields are written verbatim without quoting. A value containing a tab or
    newline therefore breaks the row layout.
    """
    lines = ["\t".join(get_headers(show_parent))]
    lines.extend("\t".join(row) for row in to_rows(components, show_parent))
    return "".join(f"{line}\n" for line in lines)


RENDERERS: Dict[OutputFormat, Callable[..., str]] = {
    OutputFormat.TABLE: render_table,
    OutputFormat.CSV: render_csv,
    OutputFormat.TSV: render_tsv,
}


def render(components: List[Component], output_format: OutputFormat, show_parent: bool = False) -> str:
    """Render components in the given output format.

    Components are emitted exactly once each, in the order given.
    """
    try:
        renderer = RENDERERS[output_format]
    except KeyError:
        raise ValueError(f"Unsupported output format: {output_format!r}") from None
    return renderer(components, show_parent=show_parent)
