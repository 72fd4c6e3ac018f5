"""Utility modules for Handle Agent.

This package provides output formatting for suggestion sets.
"""

from handle_agent.utils.formatters import (
    CSVFormatter,
    MarkdownFormatter,
    OutputFormat,
    TableFormatter,
    format_text,
    render_suggestions,
    suggestion_rows,
)

__all__ = [
    "CSVFormatter",
    "MarkdownFormatter",
    "OutputFormat",
    "TableFormatter",
    "format_text",
    "render_suggestions",
    "suggestion_rows",
]
