"""Shared pytest fixtures for the FHEVM scaffolding test suite.

Provides reusable fixtures for:
- A small Hardhat template tree (with ``node_modules`` and ``.git`` noise)
- A fake source root holding example contracts and tests
- Sample descriptors and a registry built from them
- A ``ScaffoldConfig`` pointing at the above
"""

from __future__ import annotations

import json
import textwrap
from pathlib import Path

import pytest

from fhevm_scaffold.config import ScaffoldConfig
from fhevm_scaffold.registry import CategoryDescriptor, Difficulty, ExampleDescriptor, Registry


# ---------------------------------------------------------------------------
# Environment isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _clean_fhevm_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer ``FHEVM_*`` variables out of every test."""
    for name in ("FHEVM_SOURCE_ROOT", "FHEVM_TEMPLATE_DIR", "FHEVM_DOCS_DIR", "FHEVM_ATOMIC", "FHEVM_VERBOSE"):
        monkeypatch.delenv(name, raising=False)


# ---------------------------------------------------------------------------
# Template tree
# ---------------------------------------------------------------------------

TEMPLATE_MANIFEST = {
    "name": "fhevm-hardhat-template",
    "version": "0.1.0",
    "description": "template",
    "keywords": ["fhevm", "hardhat"],
    "scripts": {"test": "hardhat test"},
}


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    """A minimal Hardhat template, including directories the cloner must skip."""
    root = tmp_path / "template"
    _write(root / "package.json", json.dumps(TEMPLATE_MANIFEST, indent=2) + "\n")
    _write(root / "hardhat.config.ts", "export default {};\n")
    _write(root / "tsconfig.json", "{}\n")
    _write(root / "README.md", "# Template\n")
    _write(root / "contracts" / "Counter.sol", "contract Counter {}\n")
    _write(root / "test" / "Counter.ts", "// placeholder\n")
    _write(root / "deploy" / "deploy.ts", "// deploy Counter\n")
    _write(root / "node_modules" / "hardhat" / "index.js", "module.exports = {};\n")
    _write(root / ".git" / "HEAD", "ref: refs/heads/main\n")
    _write(root / "scripts" / "node_modules" / "nested.js", "// nested\n")
    return root


# ---------------------------------------------------------------------------
# Sources and descriptors
# ---------------------------------------------------------------------------


def _contract_source(name: str) -> str:
    return textwrap.dedent(
        f"""\
        // SPDX-License-Identifier: BSD-3-Clause-Clear
        pragma solidity ^0.8.24;

        /**
         * {name} used in tests.
         */
        contract {name} is SepoliaConfig {{
            uint32 private _value;
        }}
        """
    )


def make_example(
    identifier: str,
    contract: str,
    category: str = "demo",
    difficulty: Difficulty = Difficulty.BEGINNER,
    concepts: tuple[str, ...] = ("encryption", "arithmetic"),
    tags: tuple[str, ...] = ("demo",),
) -> ExampleDescriptor:
    return ExampleDescriptor(
        identifier=identifier,
        title=contract,
        category=category,
        description=f"Demonstrates {contract}",
        contract_path=f"contracts/{category}/{contract}.sol",
        test_path=f"test/{category}/{contract}.test.ts",
        difficulty=difficulty,
        concepts=concepts,
        tags=tags,
    )


@pytest.fixture
def demo_examples() -> list[ExampleDescriptor]:
    """Three examples of mixed difficulty, listed hardest first."""
    return [
        make_example("demo-vault", "DemoVault", difficulty=Difficulty.ADVANCED,
                     concepts=("permissions", "vaults"), tags=("vault", "demo")),
        make_example("demo-counter", "DemoCounter", difficulty=Difficulty.BEGINNER,
                     concepts=("encryption", "arithmetic"), tags=("counter", "demo")),
        make_example("demo-compare", "DemoCompare", difficulty=Difficulty.BEGINNER,
                     concepts=("comparison", "encryption"), tags=("comparison",)),
    ]


@pytest.fixture
def demo_category(demo_examples: list[ExampleDescriptor]) -> CategoryDescriptor:
    return CategoryDescriptor(
        identifier="demo",
        title="Demo Examples",
        description="Examples used by the test suite",
        examples=tuple(example.identifier for example in demo_examples),
        difficulty=Difficulty.INTERMEDIATE,
    )


@pytest.fixture
def demo_registry(demo_examples: list[ExampleDescriptor], demo_category: CategoryDescriptor) -> Registry:
    return Registry(demo_examples, [demo_category])


@pytest.fixture
def source_root(tmp_path: Path, demo_examples: list[ExampleDescriptor]) -> Path:
    """Contract and test files for every demo example."""
    root = tmp_path / "sources"
    for example in demo_examples:
        _write(root / example.contract_path, _contract_source(example.contract_stem))
        _write(root / example.test_path, f'describe("{example.contract_stem}", () => {{}});\n')
    return root


@pytest.fixture
def config(template_dir: Path, source_root: Path) -> ScaffoldConfig:
    """Configuration pointing at the fixture template and sources."""
    return ScaffoldConfig(template_dir=template_dir, source_root=source_root)


# ---------------------------------------------------------------------------
# Tree helpers
# ---------------------------------------------------------------------------


def snapshot(root: Path) -> dict[str, bytes]:
    """Relative path → file bytes for every file under *root*."""
    return {
        path.relative_to(root).as_posix(): path.read_bytes()
        for path in sorted(root.rglob("*"))
        if path.is_file()
    }


@pytest.fixture
def tree_snapshot():
    """The :func:`snapshot` helper, for tests outside this directory."""
    return snapshot


@pytest.fixture
def example_factory():
    """The :func:`make_example` helper."""
    return make_example
