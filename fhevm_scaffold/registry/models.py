"""Pydantic v2 models for the example and category registries.

Descriptors are frozen: they are authored once in :mod:`.catalog` and only
ever read afterwards.
"""

from __future__ import annotations

import re
from enum import Enum
from pathlib import PurePosixPath

from pydantic import BaseModel, ConfigDict, Field, field_validator

_IDENTIFIER_RE = re.compile(r"^[A-Za-z0-9]+(?:-[A-Za-z0-9]+)*$")


class Difficulty(str, Enum):
    """Learning difficulty of an example or a category."""
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"

    @property
    def rank(self) -> int:
        """Position in the learning order (beginner first)."""
        return list(Difficulty).index(self)


def _check_identifier(value: str) -> str:
    if not _IDENTIFIER_RE.match(value):
        raise ValueError(f"identifier must be a kebab-case token, got {value!r}")
    return value


def _check_unique(values: tuple[str, ...]) -> tuple[str, ...]:
    seen: set[str] = set()
    for value in values:
        if value in seen:
            raise ValueError(f"duplicate entry {value!r}")
        seen.add(value)
    return values


class ExampleDescriptor(BaseModel):
    """One teachable unit: a contract, its test, and its metadata."""

    model_config = ConfigDict(frozen=True)

    identifier: str = Field(..., description="Unique kebab-case token, e.g. 'fhe-counter'")
    title: str = Field(..., min_length=1, description="Display title")
    category: str = Field(..., description="Identifier of the owning category")
    description: str = Field(..., description="What the example teaches")
    contract_path: str = Field(..., description="Contract source, relative to the source root")
    test_path: str = Field(..., description="Test source, relative to the source root")
    difficulty: Difficulty
    concepts: tuple[str, ...] = Field(default=(), description="Concept tags, in teaching order")
    tags: tuple[str, ...] = Field(default=(), description="Search tags")
    chapter: str = Field(default="", description="Documentation chapter")
    learning_objectives: tuple[str, ...] = Field(default=())

    @field_validator("identifier", "category")
    @classmethod
    def validate_identifier(cls, value: str) -> str:
        return _check_identifier(value)

    @field_validator("concepts", "tags")
    @classmethod
    def validate_no_duplicates(cls, values: tuple[str, ...]) -> tuple[str, ...]:
        return _check_unique(values)

    @property
    def contract_basename(self) -> str:
        return PurePosixPath(self.contract_path).name

    @property
    def test_basename(self) -> str:
        return PurePosixPath(self.test_path).name

    @property
    def contract_stem(self) -> str:
        return PurePosixPath(self.contract_path).stem


class CategoryDescriptor(BaseModel):
    """A themed, ordered group of examples."""

    model_config = ConfigDict(frozen=True)

    identifier: str
    title: str = Field(..., min_length=1)
    description: str
    examples: tuple[str, ...] = Field(..., description="Example identifiers in learning order")
    difficulty: Difficulty

    @field_validator("identifier")
    @classmethod
    def validate_identifier(cls, value: str) -> str:
        return _check_identifier(value)

    @field_validator("examples")
    @classmethod
    def validate_no_duplicates(cls, values: tuple[str, ...]) -> tuple[str, ...]:
        return _check_unique(values)
