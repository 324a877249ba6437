"""Argument parsing and failure reporting shared by the three drivers."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from typing import NoReturn

from fhevm_scaffold.config import ScaffoldConfig
from fhevm_scaffold.errors import NotFoundError, ScaffoldError
from fhevm_scaffold.registry import Registry
from fhevm_scaffold.utils import err_console, print_error


class ScaffoldArgumentParser(argparse.ArgumentParser):
    """``ArgumentParser`` whose usage errors list the valid identifiers.

    Usage errors exit with status 1 before anything touches the file
    system; ``--help`` still exits 0.
    """

    def __init__(self, *args, listing: Callable[[], str] | None = None, **kwargs) -> None:
        kwargs.setdefault("formatter_class", argparse.RawDescriptionHelpFormatter)
        super().__init__(*args, **kwargs)
        self.listing = listing

    def print_listing(self) -> None:
        if self.listing is not None:
            sys.stderr.write(self.listing())

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.print_listing()
        self.exit(1, f"{self.prog}: error: {message}\n")


# ---------------------------------------------------------------------------
# Identifier listings
# ---------------------------------------------------------------------------


def example_listing(registry: Registry) -> str:
    """Every example identifier, grouped by category."""
    lines = ["", "Available examples:"]
    for name, category in registry.categories.items():
        lines.append(f"  {name}:")
        for identifier in category.examples:
            lines.append(f"    {identifier:<30} {registry.lookup(identifier).title}")
    lines.append("")
    return "\n".join(lines)


def category_listing(registry: Registry) -> str:
    """Every category identifier with its example count."""
    lines = ["", "Available categories:"]
    for name, category in registry.categories.items():
        lines.append(f"  {name:<20} {len(category.examples)} examples, {category.difficulty.value}")
    lines.append("")
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Shared options
# ---------------------------------------------------------------------------


def add_common_options(parser: argparse.ArgumentParser) -> None:
    """Options every driver accepts; unset flags fall back to the environment."""
    parser.add_argument(
        "--source-root",
        default=None,
        help="Directory the registry's contract/test paths resolve against "
        "(default: bundled examples, or $FHEVM_SOURCE_ROOT)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        default=None,
        help="Print a traceback when a step fails",
    )


def add_project_options(parser: argparse.ArgumentParser) -> None:
    """Options for the two project generators."""
    add_common_options(parser)
    parser.add_argument(
        "--template",
        default=None,
        help="Base Hardhat project to clone (default: bundled template, or $FHEVM_TEMPLATE_DIR)",
    )
    parser.add_argument(
        "--atomic",
        action="store_true",
        default=None,
        help="Build in a staging directory and move it into place only on success",
    )


def build_config(args: argparse.Namespace) -> ScaffoldConfig:
    """Environment configuration overridden by whatever flags were given."""
    return ScaffoldConfig.from_env(
        source_root=getattr(args, "source_root", None),
        template_dir=getattr(args, "template", None),
        atomic=getattr(args, "atomic", None),
        verbose=getattr(args, "verbose", None),
    )


# ---------------------------------------------------------------------------
# Failure reporting
# ---------------------------------------------------------------------------


def report_failure(exc: ScaffoldError, parser: ScaffoldArgumentParser, *, verbose: bool = False) -> int:
    """Print *exc* as one ``Error:`` line on stderr and return exit status 1.

    Unknown identifiers also get the usage line and the valid identifiers.
    Must be called from inside the ``except`` block when *verbose* is set.
    """
    print_error(str(exc))
    if isinstance(exc, NotFoundError):
        parser.print_usage(sys.stderr)
        parser.print_listing()
    if verbose:
        err_console.print_exception()
    return 1
