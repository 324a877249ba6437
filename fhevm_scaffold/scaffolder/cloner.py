"""Template cloner: copies the base Hardhat project to a new destination.

Excluded directories are pruned while walking the source tree, so large
dependency trees such as ``node_modules`` are never descended into.

The copy is not atomic. If it fails part-way (disk full, permission
denied) the destination is left partially populated and is not removed;
the caller reports the failure and the operator inspects or deletes it.
Use :class:`~fhevm_scaffold.scaffolder.generator.ProjectPipeline` with
``atomic=True`` for all-or-nothing output.
"""

from __future__ import annotations

import shutil
from collections.abc import Iterable
from pathlib import Path

from fhevm_scaffold.config import DEFAULT_EXCLUDED_DIRS
from fhevm_scaffold.errors import DestinationExistsError, ScaffoldIOError, SourceNotFoundError


def ensure_absent(dest_dir: Path) -> None:
    """Raise :class:`DestinationExistsError` if *dest_dir* exists.

    This is a check-then-act test: two concurrent runs targeting the same
    destination can both pass it.
    """
    if Path(dest_dir).exists():
        raise DestinationExistsError(Path(dest_dir))


def _ignore_basenames(names: Iterable[str]):
    excluded = frozenset(names)

    def _ignore(directory: str, entries: list[str]) -> set[str]:
        return {
            entry for entry in entries
            if entry in excluded and (Path(directory) / entry).is_dir()
        }

    return _ignore


def clone_template(
    source_dir: str | Path,
    dest_dir: str | Path,
    excluded_dirs: Iterable[str] = DEFAULT_EXCLUDED_DIRS,
) -> Path:
    """Recursively copy *source_dir* to *dest_dir*.

    Any directory whose basename is in *excluded_dirs* is skipped at every
    depth. Files with an excluded name are still copied.

    Returns:
        The destination path.

    Raises:
        SourceNotFoundError: *source_dir* is missing or not a directory.
        DestinationExistsError: *dest_dir* already exists.
        ScaffoldIOError: The copy failed part-way.
    """
    source = Path(source_dir)
    dest = Path(dest_dir)

    if not source.is_dir():
        raise SourceNotFoundError("template directory", source)
    ensure_absent(dest)

    try:
        dest.parent.mkdir(parents=True, exist_ok=True)
        shutil.copytree(source, dest, ignore=_ignore_basenames(excluded_dirs))
    except FileExistsError:
        raise DestinationExistsError(dest) from None
    except shutil.Error as exc:
        raise ScaffoldIOError(f"clone {source} to {dest}", OSError(str(exc))) from exc
    except OSError as exc:
        raise ScaffoldIOError(f"clone {source} to {dest}", exc) from exc
    return dest
