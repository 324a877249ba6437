"""Config rewriter for the generated project's ``package.json``.

The ``apply_*`` functions are pure (dict in, new dict out); the
``rewrite_*`` functions wrap them with file I/O and error translation.
Existing key order is preserved and new keys are appended, so the file
diff against the template stays small.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Any

from fhevm_scaffold.config import ScaffoldConfig
from fhevm_scaffold.errors import InvalidManifestError, ScaffoldIOError
from fhevm_scaffold.registry.models import CategoryDescriptor, ExampleDescriptor
from fhevm_scaffold.utils import load_json, sanitize_name, save_json

MANIFEST_NAME = "package.json"


# ---------------------------------------------------------------------------
# Pure transforms
# ---------------------------------------------------------------------------


def package_name(prefix: str, identifier: str) -> str:
    """``prefix + identifier``, lowercased and hyphenated."""
    return sanitize_name(f"{prefix}{identifier}")


def merge_keywords(existing: Iterable[str], additions: Iterable[str]) -> list[str]:
    """Union of *existing* and *additions*: existing order first, no duplicates."""
    merged: list[str] = []
    for keyword in [*existing, *additions]:
        if keyword not in merged:
            merged.append(keyword)
    return merged


def _existing_keywords(manifest: dict[str, Any], path: Path) -> list[str]:
    keywords = manifest.get("keywords", [])
    if not isinstance(keywords, list) or not all(isinstance(k, str) for k in keywords):
        raise InvalidManifestError(path, "'keywords' must be a list of strings")
    return keywords


def apply_example_metadata(
    manifest: dict[str, Any],
    descriptor: ExampleDescriptor,
    *,
    prefix: str = "fhevm-",
    metadata_key: str = "fhevm",
    path: Path = Path(MANIFEST_NAME),
) -> dict[str, Any]:
    """Return a copy of *manifest* describing a single-example project."""
    updated = dict(manifest)
    updated["name"] = package_name(prefix, descriptor.identifier)
    updated["description"] = descriptor.description
    updated["keywords"] = merge_keywords(_existing_keywords(manifest, path), descriptor.tags)
    updated[metadata_key] = {
        "identifier": descriptor.identifier,
        "category": descriptor.category,
        "difficulty": descriptor.difficulty.value,
        "concepts": list(descriptor.concepts),
    }
    return updated


def apply_category_metadata(
    manifest: dict[str, Any],
    category: CategoryDescriptor,
    examples: Sequence[ExampleDescriptor],
    *,
    prefix: str = "fhevm-category-",
    metadata_key: str = "fhevm",
    path: Path = Path(MANIFEST_NAME),
) -> dict[str, Any]:
    """Return a copy of *manifest* describing a whole-category project."""
    additions = [category.identifier]
    for example in examples:
        additions.extend(example.tags)

    updated = dict(manifest)
    updated["name"] = package_name(prefix, category.identifier)
    updated["description"] = category.description
    updated["keywords"] = merge_keywords(_existing_keywords(manifest, path), additions)
    updated[metadata_key] = {
        "category": category.identifier,
        "difficulty": category.difficulty.value,
        "examples": [example.identifier for example in examples],
    }
    return updated


# ---------------------------------------------------------------------------
# File I/O
# ---------------------------------------------------------------------------


def read_manifest(dest_dir: str | Path) -> dict[str, Any]:
    """Parse ``<dest_dir>/package.json``.

    Raises:
        InvalidManifestError: Missing, not UTF-8, not valid JSON, or not a
            JSON object.
        ScaffoldIOError: The file exists but cannot be read.
    """
    path = Path(dest_dir) / MANIFEST_NAME
    if not path.is_file():
        raise InvalidManifestError(path, "file is missing")
    try:
        data = load_json(path)
    except UnicodeDecodeError as exc:
        raise InvalidManifestError(path, "not valid UTF-8") from exc
    except json.JSONDecodeError as exc:
        raise InvalidManifestError(path, f"not valid JSON ({exc.msg} at line {exc.lineno})") from exc
    except OSError as exc:
        raise ScaffoldIOError(f"read {path}", exc) from exc
    if not isinstance(data, dict):
        raise InvalidManifestError(path, "top-level value must be an object")
    return data


def write_manifest(dest_dir: str | Path, manifest: dict[str, Any]) -> Path:
    """Write *manifest* back with two-space indentation and a trailing newline."""
    path = Path(dest_dir) / MANIFEST_NAME
    try:
        return save_json(manifest, path)
    except OSError as exc:
        raise ScaffoldIOError(f"write {path}", exc) from exc


def rewrite_manifest(
    dest_dir: str | Path,
    descriptor: ExampleDescriptor,
    config: ScaffoldConfig | None = None,
) -> dict[str, Any]:
    """Load, rewrite for *descriptor*, and save the project's manifest."""
    config = config or ScaffoldConfig()
    path = Path(dest_dir) / MANIFEST_NAME
    updated = apply_example_metadata(
        read_manifest(dest_dir),
        descriptor,
        prefix=config.package_prefix,
        metadata_key=config.metadata_key,
        path=path,
    )
    write_manifest(dest_dir, updated)
    return updated


def rewrite_category_manifest(
    dest_dir: str | Path,
    category: CategoryDescriptor,
    examples: Sequence[ExampleDescriptor],
    config: ScaffoldConfig | None = None,
) -> dict[str, Any]:
    """Load, rewrite for a whole category, and save the project's manifest."""
    config = config or ScaffoldConfig()
    path = Path(dest_dir) / MANIFEST_NAME
    updated = apply_category_metadata(
        read_manifest(dest_dir),
        category,
        examples,
        prefix=config.category_prefix,
        metadata_key=config.metadata_key,
        path=path,
    )
    write_manifest(dest_dir, updated)
    return updated
