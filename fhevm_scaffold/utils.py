"""Shared utility functions for the FHEVM scaffolding tools.

Provides JSON I/O, name helpers, and Rich-based progress reporting.
Progress goes to stdout through :data:`console`; diagnostics go to stderr
through :data:`err_console` so that scripted callers can separate them.
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.rule import Rule
from rich.table import Table

console = Console(highlight=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, soft_wrap=True)

# ---------------------------------------------------------------------------
# String / name helpers
# ---------------------------------------------------------------------------


def sanitize_name(name: str) -> str:
    """Convert an arbitrary identifier to a lowercase, hyphenated package name.

    * Lowercases the input.
    * Replaces spaces and non-alphanumeric characters (except hyphens) with
      hyphens.
    * Collapses consecutive hyphens and strips leading/trailing hyphens.

    Examples::

        sanitize_name("fhe-allowThis-example") -> "fhe-allowthis-example"
        sanitize_name("  Basic Ops (v2) ") -> "basic-ops-v2"
    """
    result = re.sub(r"[^a-z0-9-]", "-", name.strip().lower())
    result = re.sub(r"-+", "-", result)
    return result.strip("-")


_CONTRACT_RE = re.compile(r"^\s*contract\s+(\w+)(?:\s+is\s+|\s*\{)", re.MULTILINE)


def extract_contract_name(source: str) -> str | None:
    """Return the first ``contract X`` declared in Solidity *source*, if any."""
    match = _CONTRACT_RE.search(source)
    return match.group(1) if match else None


# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------


def load_json(path: str | Path) -> Any:
    """Load and parse a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist.
        UnicodeDecodeError: If the file is not UTF-8.
        json.JSONDecodeError: If the file is not valid JSON.
    """
    raw = Path(path).read_text(encoding="utf-8")
    return json.loads(raw)


def dump_json(data: Any) -> str:
    """Serialise *data* as two-space indented JSON with a trailing newline.

    Key order is the insertion order of *data*, so a load/modify/dump round
    trip keeps the original layout of the file.
    """
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def save_json(data: Any, path: str | Path) -> Path:
    """Write *data* to *path* as pretty-printed JSON."""
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(dump_json(data), encoding="utf-8")
    return file_path


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_step_header(step: int, total: int, name: str) -> None:
    """Print a pipeline step header as a full-width rule."""
    console.print()
    console.print(Rule(f"[bold cyan] Step {step}/{total}: {name} [/bold cyan]", style="cyan"))


def print_summary_table(
    rows: list[tuple[str, ...]],
    columns: list[str],
    title: str = "Summary",
) -> None:
    """Print a table with the given column headers."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    for index, column in enumerate(columns):
        if index == 0:
            table.add_column(column, style="green", no_wrap=True)
        else:
            table.add_column(column)

    for row in rows:
        table.add_row(*(str(cell) for cell in row))

    console.print(table)


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]+[/bold green] {escape(message)}")


def print_info(message: str) -> None:
    """Print a dim informational message."""
    console.print(f"  [blue]-[/blue] {escape(message)}")


def print_warning(message: str) -> None:
    """Print a yellow warning message on stderr."""
    err_console.print(f"[bold yellow]Warning:[/bold yellow] {escape(message)}")


def print_error(message: str) -> None:
    """Print a single red ``Error:`` line on stderr."""
    err_console.print(f"[bold red]Error:[/bold red] {escape(message)}")
