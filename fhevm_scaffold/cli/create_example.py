"""``create-fhevm-example``: generate a standalone project for one example.

Usage::

    create-fhevm-example fhe-counter ./out/ex1
    create-fhevm-example blind-auction ./auction --atomic
"""

from __future__ import annotations

import sys

from fhevm_scaffold.cli.common import (
    ScaffoldArgumentParser,
    add_project_options,
    build_config,
    example_listing,
    report_failure,
)
from fhevm_scaffold.errors import ScaffoldError
from fhevm_scaffold.registry import Registry, default_registry
from fhevm_scaffold.scaffolder.generator import create_example_project
from fhevm_scaffold.utils import console, print_success


def build_parser(registry: Registry) -> ScaffoldArgumentParser:
    parser = ScaffoldArgumentParser(
        prog="create-fhevm-example",
        description="Generate a standalone FHEVM Hardhat project for a single example.",
        epilog=(
            example_listing(registry)
            + "\nExamples:\n"
            "  create-fhevm-example fhe-counter ./out/ex1\n"
            "  create-fhevm-example blind-auction ./auction --atomic\n"
        ),
        listing=lambda: example_listing(registry),
    )
    parser.add_argument("example", help="Example identifier (see the list below)")
    parser.add_argument("destination", help="Directory to create; must not exist")
    add_project_options(parser)
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns the process exit status."""
    registry = default_registry()
    parser = build_parser(registry)
    args = parser.parse_args(argv)
    config = build_config(args)

    try:
        result = create_example_project(args.example, args.destination, config, registry)
    except ScaffoldError as exc:
        return report_failure(exc, parser, verbose=config.verbose)

    console.print()
    print_success(f"Example {args.example!r} created at {result.request.destination}")
    console.print("\nNext steps:")
    console.print(f"  cd {result.request.destination}")
    console.print("  npm install")
    console.print("  npm run compile")
    console.print("  npm run test")
    return 0


if __name__ == "__main__":
    sys.exit(main())
