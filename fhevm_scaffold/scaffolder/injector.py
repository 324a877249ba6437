"""File injector: copies example contracts and tests into a cloned project.

Single-example projects receive files at ``contracts/<basename>`` and
``test/<basename>``, replacing any same-named placeholder from the
template. Category projects namespace every file by example identifier
(``contracts/category/<identifier>.sol``) so two examples sharing a
basename cannot overwrite each other.
"""

from __future__ import annotations

import shutil
from collections.abc import Sequence
from pathlib import Path

from pydantic import BaseModel

from fhevm_scaffold.errors import ScaffoldIOError, SourceNotFoundError
from fhevm_scaffold.registry.models import ExampleDescriptor

CATEGORY_SUBDIR = "category"


class InjectedFile(BaseModel):
    """One copied file: what it is, where it came from, where it went."""

    identifier: str
    role: str
    source: Path
    destination: Path


def _plan(
    descriptor: ExampleDescriptor,
    source_root: Path,
    contract_dest: Path,
    test_dest: Path,
) -> list[InjectedFile]:
    planned = [
        InjectedFile(
            identifier=descriptor.identifier,
            role="contract",
            source=source_root / descriptor.contract_path,
            destination=contract_dest,
        ),
        InjectedFile(
            identifier=descriptor.identifier,
            role="test",
            source=source_root / descriptor.test_path,
            destination=test_dest,
        ),
    ]
    for item in planned:
        if not item.source.is_file():
            raise SourceNotFoundError(f"{item.role} for {descriptor.identifier}", item.source)
    return planned


def _copy_all(planned: Sequence[InjectedFile]) -> list[InjectedFile]:
    for item in planned:
        try:
            item.destination.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(item.source, item.destination)
        except OSError as exc:
            raise ScaffoldIOError(f"copy {item.role} {item.source.name}", exc) from exc
    return list(planned)


def inject_example(
    dest_dir: str | Path,
    descriptor: ExampleDescriptor,
    source_root: str | Path,
) -> list[InjectedFile]:
    """Copy one example's contract and test into *dest_dir*.

    Both sources are checked before anything is copied, so a missing test
    does not leave a lone contract behind.

    Raises:
        SourceNotFoundError: The contract or the test is missing; the
            message says which.
        ScaffoldIOError: A copy failed.
    """
    dest = Path(dest_dir)
    planned = _plan(
        descriptor,
        Path(source_root),
        dest / "contracts" / descriptor.contract_basename,
        dest / "test" / descriptor.test_basename,
    )
    return _copy_all(planned)


def category_destinations(dest_dir: Path, descriptor: ExampleDescriptor) -> tuple[Path, Path]:
    """Namespaced contract and test paths for a category project."""
    return (
        dest_dir / "contracts" / CATEGORY_SUBDIR / f"{descriptor.identifier}.sol",
        dest_dir / "test" / CATEGORY_SUBDIR / f"{descriptor.identifier}.test.ts",
    )


def inject_category(
    dest_dir: str | Path,
    descriptors: Sequence[ExampleDescriptor],
    source_root: str | Path,
) -> list[InjectedFile]:
    """Copy every example of a category into ``contracts/category`` and ``test/category``.

    All sources are checked before the first copy.
    """
    dest = Path(dest_dir)
    root = Path(source_root)
    planned: list[InjectedFile] = []
    for descriptor in descriptors:
        contract_dest, test_dest = category_destinations(dest, descriptor)
        planned.extend(_plan(descriptor, root, contract_dest, test_dest))
    return _copy_all(planned)
