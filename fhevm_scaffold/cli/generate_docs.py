"""``generate-fhevm-docs``: write GitBook pages for registry examples.

Usage::

    generate-fhevm-docs fhe-counter ./docs
    generate-fhevm-docs --category basic ./docs
    generate-fhevm-docs --all
    generate-fhevm-docs --index-only ./docs

With ``--all``, ``--category`` or ``--index-only`` the single positional
argument is the output directory. The output directory defaults to
``$FHEVM_DOCS_DIR`` or ``./docs``.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from fhevm_scaffold.cli.common import (
    ScaffoldArgumentParser,
    add_common_options,
    build_config,
    category_listing,
    example_listing,
    report_failure,
)
from fhevm_scaffold.errors import ScaffoldError
from fhevm_scaffold.registry import ExampleDescriptor, Registry, default_registry
from fhevm_scaffold.reporter.docs import DocsGenerator
from fhevm_scaffold.utils import console, print_success


def build_parser(registry: Registry) -> ScaffoldArgumentParser:
    parser = ScaffoldArgumentParser(
        prog="generate-fhevm-docs",
        description="Generate GitBook documentation pages for FHEVM examples.",
        epilog=(
            example_listing(registry)
            + "\nExamples:\n"
            "  generate-fhevm-docs fhe-counter ./docs\n"
            "  generate-fhevm-docs --category basic ./docs\n"
            "  generate-fhevm-docs --all\n"
        ),
        listing=lambda: example_listing(registry) + category_listing(registry),
    )
    parser.add_argument("example", nargs="?", help="Example identifier")
    parser.add_argument("output", nargs="?", help="Output directory (default: ./docs)")

    scope = parser.add_mutually_exclusive_group()
    scope.add_argument("--all", action="store_true", help="Document every example")
    scope.add_argument("--category", default=None, help="Document every example in CATEGORY")
    scope.add_argument("--index-only", action="store_true", help="Only rebuild SUMMARY.md")

    parser.add_argument("--no-summary", action="store_true", help="Do not rebuild SUMMARY.md")
    parser.add_argument("--force", action="store_true", help="Overwrite existing pages")
    add_common_options(parser)
    return parser


def _normalise_positionals(args: argparse.Namespace, parser: ScaffoldArgumentParser) -> None:
    batch = args.all or args.category is not None or args.index_only
    if batch:
        if args.output is not None:
            parser.error("only the output directory may be given with --all, --category or --index-only")
        args.output, args.example = args.example, None
    elif args.example is None:
        parser.error("an example identifier is required (or use --all / --category)")


def _select(args: argparse.Namespace, registry: Registry) -> list[ExampleDescriptor]:
    if args.all:
        return list(registry.examples.values())
    if args.category is not None:
        return registry.examples_in_category(args.category)
    return [registry.lookup(args.example)]


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns the process exit status."""
    registry = default_registry()
    parser = build_parser(registry)
    args = parser.parse_args(argv)
    _normalise_positionals(args, parser)

    config = build_config(args)
    output_dir = Path(args.output) if args.output else config.docs_dir
    generator = DocsGenerator(config)

    try:
        if args.index_only:
            generator.regenerate_index(output_dir)
            return 0
        descriptors = _select(args, registry)
        pages = generator.generate(
            descriptors,
            output_dir,
            force=args.force,
            summary=not args.no_summary,
        )
    except ScaffoldError as exc:
        return report_failure(exc, parser, verbose=config.verbose)

    console.print()
    print_success(f"{len(pages)} page(s) written to {output_dir}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
