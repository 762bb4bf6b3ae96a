"""Logging for schema-explorer with Rich console output helpers."""

import json
import logging
from collections.abc import Sequence
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text


class ExplorerLogger(logging.Logger):
    """
    Logger that combines Python logging with console rendering helpers.

    Standard logging levels go through a RichHandler; the helper methods
    (rule, key_value, print_table, ...) write straight to the shared console.
    """

    def __init__(self, name: str, level: int = logging.INFO) -> None:
        """
        Initialize the logger.

        Args:
            name: Logger name
            level: Initial log level
        """
        super().__init__(name, level)
        self.console = Console()

        handler = RichHandler(
            console=self.console,
            rich_tracebacks=True,
            show_time=True,
            show_path=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        self.addHandler(handler)

    def print(self, message: str) -> None:
        """
        Print a plain message (with Rich markup support).

        Args:
            message: Message to display
        """
        self.console.print(message)

    def rule(self, title: str, style: str = "bold blue") -> None:
        """
        Print a horizontal rule with a title.

        Args:
            title: Title text for the rule
            style: Rich style string (default: "bold blue")
        """
        self.console.rule(f"[{style}]{title}")

    def print_dict(self, data: dict[str, Any] | list[Any]) -> None:
        """
        Print JSON-serializable data with syntax highlighting.

        Args:
            data: Dictionary or list to display
        """
        self.console.print_json(json.dumps(data, indent=2))

    def key_value(self, key: str, value: Any, key_style: str = "dim") -> None:
        """
        Print a formatted key-value pair.

        Args:
            key: The key/label to display
            value: The value to display
            key_style: Style for the key (default: "dim")
        """
        self.print(f"[{key_style}]{key}:[/{key_style}] {value}")

    def print_table(self, headers: Sequence[str], rows: Sequence[Sequence[Any]], title: str | None = None) -> None:
        """
        Print rows as a Rich table.

        Args:
            headers: Column headers
            rows: Row values, converted with str()
            title: Optional table title
        """
        table = Table(title=title, show_lines=False)
        for header in headers:
            table.add_column(header, overflow="fold")
        for row in rows:
            table.add_row(*(Text(str(cell)) for cell in row))
        self.console.print(table)


def get_logger(name: str = "schema_explorer") -> ExplorerLogger:
    """
    Get or create an ExplorerLogger instance.

    Args:
        name: Logger name (default: "schema_explorer")

    Returns:
        ExplorerLogger instance
    """
    logging.setLoggerClass(ExplorerLogger)
    logger = logging.getLogger(name)
    logging.setLoggerClass(logging.Logger)
    logger.propagate = False
    return logger  # type: ignore[return-value]
