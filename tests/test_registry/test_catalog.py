"""Tests for the bundled catalogue (fhevm_scaffold.registry.catalog)."""

from __future__ import annotations

import pytest

from fhevm_scaffold.config import RESOURCES_DIR
from fhevm_scaffold.registry import Difficulty, default_registry
from fhevm_scaffold.utils import extract_contract_name

pytestmark = pytest.mark.unit


class TestBundledCatalogue:
    def test_registry_is_consistent_with_resources(self):
        assert default_registry().validate(RESOURCES_DIR) == []

    def test_default_registry_is_cached(self):
        assert default_registry() is default_registry()

    def test_fhe_counter(self):
        counter = default_registry().lookup("fhe-counter")
        assert counter.title == "FHE Counter"
        assert counter.difficulty is Difficulty.BEGINNER
        assert counter.contract_basename == "FHECounter.sol"
        assert counter.test_basename == "FHECounter.test.ts"

    def test_basic_has_nine_examples(self):
        assert len(default_registry().lookup_category("basic").examples) == 9

    def test_summary_totals(self):
        summary = default_registry().summary()
        assert summary["total"] == sum(count for name, count in summary.items() if name != "total")

    def test_contract_declares_file_stem(self):
        registry = default_registry()
        for example in registry.examples.values():
            source = (RESOURCES_DIR / example.contract_path).read_text(encoding="utf-8")
            assert extract_contract_name(source) == example.contract_stem, example.identifier

    def test_no_basename_collisions_within_category(self):
        registry = default_registry()
        for name in registry.list_categories():
            basenames = [ex.contract_basename for ex in registry.examples_in_category(name)]
            assert len(basenames) == len(set(basenames)), name
