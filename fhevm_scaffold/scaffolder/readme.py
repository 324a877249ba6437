"""README and learning-path rendering for generated projects.

Each ``render_*`` function is pure: it builds a context dict from
descriptors and renders one template. Given the same descriptors the output
is byte-identical, which is what lets two runs of the category generator
produce identical trees. ``write_*`` functions do the I/O.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any

from fhevm_scaffold.errors import ScaffoldIOError
from fhevm_scaffold.registry.models import CategoryDescriptor, ExampleDescriptor
from fhevm_scaffold.scaffolder.injector import CATEGORY_SUBDIR
from fhevm_scaffold.scaffolder.templates import TemplateRenderer

README_NAME = "README.md"
LEARNING_PATH_NAME = "LEARNING_PATH.md"

_renderer: TemplateRenderer | None = None


def _default_renderer() -> TemplateRenderer:
    global _renderer
    if _renderer is None:
        _renderer = TemplateRenderer()
    return _renderer


# ---------------------------------------------------------------------------
# Context building
# ---------------------------------------------------------------------------


def example_context(descriptor: ExampleDescriptor) -> dict[str, Any]:
    """Template variables for one example."""
    return {
        "identifier": descriptor.identifier,
        "title": descriptor.title,
        "description": descriptor.description,
        "category": descriptor.category,
        "difficulty": descriptor.difficulty.value,
        "difficulty_label": descriptor.difficulty.value.upper(),
        "concepts": list(descriptor.concepts),
        "tags": list(descriptor.tags),
        "chapter": descriptor.chapter,
        "learning_objectives": list(descriptor.learning_objectives),
        "contract_name": descriptor.contract_stem,
        "contract_basename": descriptor.contract_basename,
        "test_basename": descriptor.test_basename,
    }


def _category_entry(descriptor: ExampleDescriptor) -> dict[str, Any]:
    entry = example_context(descriptor)
    entry["contract_file"] = f"contracts/{CATEGORY_SUBDIR}/{descriptor.identifier}.sol"
    entry["test_file"] = f"test/{CATEGORY_SUBDIR}/{descriptor.identifier}.test.ts"
    return entry


def learning_order(examples: Sequence[ExampleDescriptor]) -> list[ExampleDescriptor]:
    """Examples ordered beginner → advanced; ties keep registry order."""
    return sorted(examples, key=lambda ex: ex.difficulty.rank)


def unique_concepts(examples: Sequence[ExampleDescriptor]) -> list[str]:
    """Every concept across *examples*, first occurrence wins."""
    seen: list[str] = []
    for example in examples:
        for concept in example.concepts:
            if concept not in seen:
                seen.append(concept)
    return seen


def category_context(
    category: CategoryDescriptor,
    examples: Sequence[ExampleDescriptor],
) -> dict[str, Any]:
    """Template variables for a category project."""
    ordered = learning_order(examples)
    return {
        "identifier": category.identifier,
        "title": category.title,
        "description": category.description,
        "difficulty": category.difficulty.value,
        "difficulty_label": category.difficulty.value.upper(),
        "examples": [_category_entry(ex) for ex in examples],
        "learning_path": [_category_entry(ex) for ex in ordered],
        "stages": [
            (level, [_category_entry(ex) for ex in ordered if ex.difficulty.value == level])
            for level in ("beginner", "intermediate", "advanced")
        ],
        "concepts": unique_concepts(examples),
    }


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def render_readme(
    descriptor: ExampleDescriptor,
    renderer: TemplateRenderer | None = None,
) -> str:
    """Render the README for a single-example project."""
    renderer = renderer or _default_renderer()
    return renderer.render("example_readme.md.j2", example_context(descriptor))


def render_category_readme(
    category: CategoryDescriptor,
    examples: Sequence[ExampleDescriptor],
    renderer: TemplateRenderer | None = None,
) -> str:
    """Render the README for a category project."""
    renderer = renderer or _default_renderer()
    return renderer.render("category_readme.md.j2", category_context(category, examples))


def render_learning_path(
    category: CategoryDescriptor,
    examples: Sequence[ExampleDescriptor],
    renderer: TemplateRenderer | None = None,
) -> str:
    """Render ``LEARNING_PATH.md`` for a category project."""
    renderer = renderer or _default_renderer()
    return renderer.render("learning_path.md.j2", category_context(category, examples))


# ---------------------------------------------------------------------------
# Writing
# ---------------------------------------------------------------------------


def write_document(dest_dir: str | Path, name: str, text: str) -> Path:
    """Write *text* to ``<dest_dir>/<name>``."""
    path = Path(dest_dir) / name
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise ScaffoldIOError(f"write {path}", exc) from exc
    return path


def write_readme(dest_dir: str | Path, text: str) -> Path:
    """Write ``README.md`` into *dest_dir*, replacing the template's copy."""
    return write_document(dest_dir, README_NAME, text)
