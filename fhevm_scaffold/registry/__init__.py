"""Example and category registries.

Quick usage::

    from fhevm_scaffold.registry import default_registry

    registry = default_registry()
    counter = registry.lookup("fhe-counter")
    basic = registry.examples_in_category("basic")
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType

from fhevm_scaffold.errors import NotFoundError
from fhevm_scaffold.registry.catalog import CATEGORIES, EXAMPLES
from fhevm_scaffold.registry.models import CategoryDescriptor, Difficulty, ExampleDescriptor

__all__ = [
    "CategoryDescriptor",
    "Difficulty",
    "ExampleDescriptor",
    "Registry",
    "default_registry",
]


class Registry:
    """Read-only lookup over example and category descriptors.

    Both tables keep their authoring order, which is the order used for help
    text, category projects, and learning paths.
    """

    def __init__(
        self,
        examples: Iterable[ExampleDescriptor],
        categories: Iterable[CategoryDescriptor],
    ) -> None:
        example_map: dict[str, ExampleDescriptor] = {}
        for example in examples:
            if example.identifier in example_map:
                raise ValueError(f"Duplicate example identifier: {example.identifier}")
            example_map[example.identifier] = example

        category_map: dict[str, CategoryDescriptor] = {}
        for category in categories:
            if category.identifier in category_map:
                raise ValueError(f"Duplicate category identifier: {category.identifier}")
            category_map[category.identifier] = category

        self._examples: Mapping[str, ExampleDescriptor] = MappingProxyType(example_map)
        self._categories: Mapping[str, CategoryDescriptor] = MappingProxyType(category_map)

    # -- Lookup --------------------------------------------------------------

    @property
    def examples(self) -> Mapping[str, ExampleDescriptor]:
        return self._examples

    @property
    def categories(self) -> Mapping[str, CategoryDescriptor]:
        return self._categories

    def lookup(self, identifier: str) -> ExampleDescriptor:
        """Return the example registered as *identifier*.

        Raises:
            NotFoundError: If no such example exists. The error carries the
                list of valid identifiers for help output.
        """
        try:
            return self._examples[identifier]
        except KeyError:
            raise NotFoundError("example", identifier, self.list_all()) from None

    def lookup_category(self, identifier: str) -> CategoryDescriptor:
        """Return the category registered as *identifier*.

        Raises:
            NotFoundError: If no such category exists.
        """
        try:
            return self._categories[identifier]
        except KeyError:
            raise NotFoundError("category", identifier, self.list_categories()) from None

    def list_all(self) -> list[str]:
        """Every example identifier, in registry order."""
        return list(self._examples)

    def list_categories(self) -> list[str]:
        """Every category identifier, in registry order."""
        return list(self._categories)

    # -- Queries -------------------------------------------------------------

    def examples_in_category(self, identifier: str) -> list[ExampleDescriptor]:
        """Descriptors of a category's examples, in the category's order."""
        category = self.lookup_category(identifier)
        return [self.lookup(name) for name in category.examples]

    def by_difficulty(self, difficulty: Difficulty | str) -> list[ExampleDescriptor]:
        level = Difficulty(difficulty)
        return [ex for ex in self._examples.values() if ex.difficulty is level]

    def search(self, query: str) -> list[ExampleDescriptor]:
        """Case-insensitive match over title, description, concepts, and tags."""
        needle = query.strip().lower()
        if not needle:
            return []
        return [
            ex
            for ex in self._examples.values()
            if needle in ex.title.lower()
            or needle in ex.description.lower()
            or any(needle in concept.lower() for concept in ex.concepts)
            or any(needle in tag.lower() for tag in ex.tags)
        ]

    def summary(self) -> dict[str, int]:
        """Example count per category, plus ``total``."""
        counts = {name: len(cat.examples) for name, cat in self._categories.items()}
        counts["total"] = len(self._examples)
        return counts

    # -- Integrity -----------------------------------------------------------

    def validate(self, source_root: Path | None = None) -> list[str]:
        """Check the registry invariants and return a list of problems.

        * every category member exists and belongs to that category;
        * every example's category exists and lists the example;
        * with *source_root*, every contract and test file exists.

        An empty list means the registry is consistent.
        """
        problems: list[str] = []

        for category in self._categories.values():
            for name in category.examples:
                example = self._examples.get(name)
                if example is None:
                    problems.append(f"category {category.identifier!r} lists unknown example {name!r}")
                elif example.category != category.identifier:
                    problems.append(
                        f"example {name!r} is listed in {category.identifier!r} "
                        f"but declares category {example.category!r}"
                    )

        for example in self._examples.values():
            category = self._categories.get(example.category)
            if category is None:
                problems.append(f"example {example.identifier!r} has unknown category {example.category!r}")
            elif example.identifier not in category.examples:
                problems.append(
                    f"example {example.identifier!r} is missing from category {category.identifier!r}"
                )

            if source_root is not None:
                for role, relative in (("contract", example.contract_path), ("test", example.test_path)):
                    if not (Path(source_root) / relative).is_file():
                        problems.append(f"{role} for {example.identifier!r} not found: {relative}")

        return problems


_DEFAULT: Registry | None = None


def default_registry() -> Registry:
    """The registry built from the bundled catalogue (constructed once)."""
    global _DEFAULT
    if _DEFAULT is None:
        _DEFAULT = Registry(EXAMPLES.values(), CATEGORIES.values())
    return _DEFAULT
