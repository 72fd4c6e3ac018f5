"""Output formatting utilities for Handle Agent.

Provides formatters for:
- Table output
- JSON output
- CSV export
- Markdown
- Plain text cards
"""

import csv
import io
import json
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

from handle_agent.core.data_models import PlatformSuggestion

ROW_COLUMNS = ["index", "platform", "handle", "highlight"]
ROW_HEADERS = {"index": "#", "platform": "Platform", "handle": "Handle", "highlight": "Tip"}


class OutputFormat(str, Enum):
    """Supported output formats."""

    TABLE = "table"
    JSON = "json"
    CSV = "csv"
    MARKDOWN = "markdown"
    TEXT = "text"


def suggestion_rows(
    suggestions: Sequence[PlatformSuggestion], bare: bool = False
) -> List[Dict[str, Any]]:
    """Flatten suggestions into one row per handle, numbered from 1.

    Args:
        suggestions: Generator output
        bare: Drop the display ``@`` from handles

    Returns:
        List of ``{index, platform, handle, highlight}`` dictionaries
    """
    rows: List[Dict[str, Any]] = []
    for suggestion in suggestions:
        handles = suggestion.bare_handles if bare else suggestion.handles
        for handle in handles:
            rows.append(
                {
                    "index": len(rows) + 1,
                    "platform": suggestion.platform,
                    "handle": handle,
                    "highlight": suggestion.highlight,
                }
            )
    return rows


class TableFormatter:
    """Formats rows as ASCII tables."""

    def __init__(
        self,
        max_width: int = 60,
        column_separator: str = " | ",
        header_separator: str = "-",
    ):
        """Initialize table formatter.

        Args:
            max_width: Maximum column width
            column_separator: Separator between columns
            header_separator: Character for header separator line
        """
        self.max_width = max_width
        self.column_separator = column_separator
        self.header_separator = header_separator

    def format(
        self,
        data: Sequence[dict],
        columns: Optional[List[str]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> str:
        if not data:
            return "(no data)"

        if columns is None:
            columns = list(data[0].keys())
        if headers is None:
            headers = {col: col.replace("_", " ").title() for col in columns}

        widths = {}
        for col in columns:
            header_width = len(headers.get(col, col))
            max_data_width = max((len(str(row.get(col, ""))) for row in data), default=0)
            widths[col] = min(max(header_width, max_data_width), self.max_width)

        lines = [
            self.column_separator.join(
                headers.get(col, col).ljust(widths[col])[: widths[col]] for col in columns
            ).rstrip(),
            self.column_separator.join(self.header_separator * widths[col] for col in columns),
        ]
        for row in data:
            lines.append(
                self.column_separator.join(
                    str(row.get(col, "")).ljust(widths[col])[: widths[col]] for col in columns
                ).rstrip()
            )

        return "\n".join(lines)


class CSVFormatter:
    """Formats rows as CSV."""

    def __init__(self, delimiter: str = ",", quoting: int = csv.QUOTE_MINIMAL):
        self.delimiter = delimiter
        self.quoting = quoting

    def format(self, data: Sequence[dict], columns: Optional[List[str]] = None) -> str:
        """Format data as CSV string.

        Args:
            data: List of dictionaries
            columns: Columns to include

        Returns:
            CSV string, empty when there is no data
        """
        if not data:
            return ""

        if columns is None:
            columns = list(data[0].keys())

        output = io.StringIO()
        writer = csv.DictWriter(
            output,
            fieldnames=columns,
            delimiter=self.delimiter,
            quoting=self.quoting,
            extrasaction="ignore",
            lineterminator="\n",
        )
        writer.writeheader()
        for row in data:
            writer.writerow({k: str(v) if v is not None else "" for k, v in row.items()})

        return output.getvalue()


class MarkdownFormatter:
    """Formats suggestions as Markdown."""

    def format_cards(self, suggestions: Sequence[PlatformSuggestion], bare: bool = False) -> str:
        """One section per platform with its tip and a handle list."""
        if not suggestions:
            return "*No data*"

        sections = []
        for suggestion in suggestions:
            handles = suggestion.bare_handles if bare else suggestion.handles
            items = "\n".join(f"- `{handle}`" for handle in handles)
            sections.append(f"## {suggestion.platform}\n\n_{suggestion.highlight}_\n\n{items}")
        return "\n\n".join(sections)


def format_text(suggestions: Sequence[PlatformSuggestion], bare: bool = False) -> str:
    """Plain-text cards, one block per platform."""
    if not suggestions:
        return "(no data)"

    blocks = []
    for suggestion in suggestions:
        handles = suggestion.bare_handles if bare else suggestion.handles
        lines = [suggestion.platform, f"  {suggestion.highlight}"]
        lines.extend(f"  - {handle}" for handle in handles)
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)


def render_suggestions(
    suggestions: Sequence[PlatformSuggestion],
    fmt: OutputFormat = OutputFormat.TABLE,
    title: Optional[str] = None,
    bare: bool = False,
) -> str:
    """Render generator output in the requested format.

    Args:
        suggestions: Generator output
        fmt: Output format
        title: Optional heading (ignored for JSON and CSV)
        bare: Drop the display ``@`` from handles

    Returns:
        Formatted string
    """
    fmt = OutputFormat(fmt)
    rows = suggestion_rows(suggestions, bare=bare)

    if fmt == OutputFormat.JSON:
        data = [s.to_dict() for s in suggestions]
        if bare:
            for entry, suggestion in zip(data, suggestions):
                entry["handles"] = list(suggestion.bare_handles)
        return json.dumps(data, indent=2)
    if fmt == OutputFormat.CSV:
        return CSVFormatter().format(rows, ROW_COLUMNS)

    if fmt == OutputFormat.MARKDOWN:
        result = MarkdownFormatter().format_cards(suggestions, bare=bare)
        return f"# {title}\n\n{result}" if title else result

    if fmt == OutputFormat.TEXT:
        result = format_text(suggestions, bare=bare)
    else:
        result = TableFormatter().format(rows, ROW_COLUMNS, ROW_HEADERS)

    if title:
        result = f"{title}\n{'=' * len(title)}\n\n{result}"
    return result
