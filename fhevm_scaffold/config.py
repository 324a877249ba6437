"""FHEVM scaffolding configuration.

Centralised, typed configuration for the three generators. Settings use a
Pydantic v2 model so they can be validated at construction time and
read from environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

RESOURCES_DIR = Path(__file__).parent / "resources"
"""Bundled example sources and the base Hardhat template."""

DEFAULT_TEMPLATE_NAME = "fhevm-hardhat-template"

DEFAULT_EXCLUDED_DIRS: list[str] = [
    "node_modules",
    ".git",
    "artifacts",
    "cache",
    "coverage",
    "types",
    "dist",
]

_TRUTHY = {"1", "true", "yes", "on"}


class ScaffoldConfig(BaseModel):
    """Global scaffolding configuration.

    Instances are created once by a CLI driver (usually via
    :meth:`from_env`) and passed to the generators.
    """

    source_root: Path = Field(
        default=RESOURCES_DIR,
        description="Root that registry contract/test paths are resolved against",
    )
    template_dir: Path = Field(
        default=RESOURCES_DIR / DEFAULT_TEMPLATE_NAME,
        description="Base Hardhat project cloned into every generated project",
    )
    docs_dir: Path = Field(default=Path("./docs"), description="Default docs output directory")
    package_prefix: str = Field(default="fhevm-", min_length=1)
    category_prefix: str = Field(default="fhevm-category-", min_length=1)
    metadata_key: str = Field(default="fhevm", min_length=1)
    summary_name: str = Field(default="SUMMARY.md")
    excluded_dirs: list[str] = Field(default_factory=lambda: list(DEFAULT_EXCLUDED_DIRS))

    # Stage into a sibling temp directory and rename on success.
    atomic: bool = Field(default=False)
    verbose: bool = Field(default=False)

    # ------------------------------------------------------------------
    # Path helpers
    # ------------------------------------------------------------------

    def resolve_source(self, relative: str | Path) -> Path:
        """Resolve a registry path against :attr:`source_root`."""
        return self.source_root / Path(relative)

    @classmethod
    def from_env(cls, **overrides: Any) -> "ScaffoldConfig":
        """Build a ``ScaffoldConfig`` from environment variables.

        Recognised variables (all optional):
            FHEVM_SOURCE_ROOT, FHEVM_TEMPLATE_DIR, FHEVM_DOCS_DIR,
            FHEVM_ATOMIC, FHEVM_VERBOSE.

        Keyword *overrides* whose value is not ``None`` win over the
        environment, so CLI flags can be passed straight through.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("FHEVM_SOURCE_ROOT"):
            kwargs["source_root"] = Path(os.environ["FHEVM_SOURCE_ROOT"])
        if os.environ.get("FHEVM_TEMPLATE_DIR"):
            kwargs["template_dir"] = Path(os.environ["FHEVM_TEMPLATE_DIR"])
        if os.environ.get("FHEVM_DOCS_DIR"):
            kwargs["docs_dir"] = Path(os.environ["FHEVM_DOCS_DIR"])
        if os.environ.get("FHEVM_ATOMIC"):
            kwargs["atomic"] = os.environ["FHEVM_ATOMIC"].strip().lower() in _TRUTHY
        if os.environ.get("FHEVM_VERBOSE"):
            kwargs["verbose"] = os.environ["FHEVM_VERBOSE"].strip().lower() in _TRUTHY

        kwargs.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**kwargs)
