"""``create-fhevm-category``: generate one project holding a whole category.

Usage::

    create-fhevm-category --list
    create-fhevm-category basic ./out/basic
"""

from __future__ import annotations

import sys

from fhevm_scaffold.cli.common import (
    ScaffoldArgumentParser,
    add_project_options,
    build_config,
    category_listing,
    report_failure,
)
from fhevm_scaffold.errors import ScaffoldError
from fhevm_scaffold.registry import Registry, default_registry
from fhevm_scaffold.scaffolder.generator import create_category_project
from fhevm_scaffold.utils import console, print_success, print_summary_table


def build_parser(registry: Registry) -> ScaffoldArgumentParser:
    parser = ScaffoldArgumentParser(
        prog="create-fhevm-category",
        description="Generate an FHEVM Hardhat project containing every example of a category.",
        epilog=(
            category_listing(registry)
            + "\nExamples:\n"
            "  create-fhevm-category --list\n"
            "  create-fhevm-category basic ./out/basic\n"
        ),
        listing=lambda: category_listing(registry),
    )
    parser.add_argument("category", nargs="?", help="Category identifier (see --list)")
    parser.add_argument("destination", nargs="?", help="Directory to create; must not exist")
    parser.add_argument(
        "--list", "-l",
        action="store_true",
        help="List categories with example counts and difficulty, then exit",
    )
    add_project_options(parser)
    return parser


def print_categories(registry: Registry) -> None:
    rows = [
        (name, category.title, str(len(category.examples)), category.difficulty.value)
        for name, category in registry.categories.items()
    ]
    print_summary_table(rows, ["Category", "Title", "Examples", "Difficulty"], title="FHEVM Categories")


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns the process exit status."""
    registry = default_registry()
    parser = build_parser(registry)
    args = parser.parse_args(argv)

    if args.list:
        print_categories(registry)
        return 0
    if args.category is None or args.destination is None:
        parser.error("the following arguments are required: category, destination")

    config = build_config(args)
    try:
        result = create_category_project(args.category, args.destination, config, registry)
    except ScaffoldError as exc:
        return report_failure(exc, parser, verbose=config.verbose)

    console.print()
    print_success(
        f"Category {args.category!r} created at {result.request.destination} "
        f"({len(result.files) // 2} examples)"
    )
    console.print("\nNext steps:")
    console.print(f"  cd {result.request.destination}")
    console.print("  npm install")
    console.print("  npm run test")
    return 0


if __name__ == "__main__":
    sys.exit(main())
