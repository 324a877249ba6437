"""Tests for source injection (fhevm_scaffold.scaffolder.injector)."""

from __future__ import annotations

from pathlib import Path

import pytest

from fhevm_scaffold.errors import SourceNotFoundError
from fhevm_scaffold.scaffolder.cloner import clone_template
from fhevm_scaffold.scaffolder.injector import category_destinations, inject_category, inject_example

pytestmark = pytest.mark.unit


@pytest.fixture
def project(template_dir: Path, tmp_path: Path) -> Path:
    return clone_template(template_dir, tmp_path / "project")


class TestInjectExample:
    def test_copies_contract_and_test(self, project: Path, source_root: Path, demo_examples):
        counter = demo_examples[1]
        injected = inject_example(project, counter, source_root)

        assert [item.role for item in injected] == ["contract", "test"]
        contract = project / "contracts" / "DemoCounter.sol"
        test = project / "test" / "DemoCounter.test.ts"
        assert contract.read_bytes() == (source_root / counter.contract_path).read_bytes()
        assert test.read_bytes() == (source_root / counter.test_path).read_bytes()
        assert injected[0].destination == contract

    def test_placeholder_is_overwritten_when_names_match(self, project: Path, tmp_path: Path, example_factory):
        counter = example_factory("counter", "Counter")
        root = tmp_path / "alt"
        (root / "contracts" / "demo").mkdir(parents=True)
        (root / "test" / "demo").mkdir(parents=True)
        (root / counter.contract_path).write_text("contract Counter is SepoliaConfig {}\n", encoding="utf-8")
        (root / counter.test_path).write_text("// real test\n", encoding="utf-8")

        inject_example(project, counter, root)

        assert (project / "contracts" / "Counter.sol").read_text(encoding="utf-8").startswith("contract Counter is")

    def test_missing_contract_names_role(self, project: Path, source_root: Path, demo_examples):
        counter = demo_examples[1]
        (source_root / counter.contract_path).unlink()

        with pytest.raises(SourceNotFoundError) as excinfo:
            inject_example(project, counter, source_root)

        assert excinfo.value.role == "contract for demo-counter"
        assert str(excinfo.value).startswith("Contract for demo-counter not found")

    def test_missing_test_copies_nothing(self, project: Path, source_root: Path, demo_examples):
        counter = demo_examples[1]
        (source_root / counter.test_path).unlink()

        with pytest.raises(SourceNotFoundError) as excinfo:
            inject_example(project, counter, source_root)

        assert excinfo.value.role == "test for demo-counter"
        assert not (project / "contracts" / "DemoCounter.sol").exists()


class TestInjectCategory:
    def test_files_are_namespaced_by_identifier(self, project: Path, source_root: Path, demo_examples):
        injected = inject_category(project, demo_examples, source_root)

        assert len(injected) == 6
        contracts = sorted(p.name for p in (project / "contracts" / "category").iterdir())
        tests = sorted(p.name for p in (project / "test" / "category").iterdir())
        assert contracts == ["demo-compare.sol", "demo-counter.sol", "demo-vault.sol"]
        assert tests == ["demo-compare.test.ts", "demo-counter.test.ts", "demo-vault.test.ts"]

    def test_shared_basenames_do_not_collide(self, project: Path, tmp_path: Path, example_factory):
        first = example_factory("first-token", "Token", category="one")
        second = example_factory("second-token", "Token", category="two")
        root = tmp_path / "alt"
        for example, body in ((first, "contract Token {} // one\n"), (second, "contract Token {} // two\n")):
            (root / example.contract_path).parent.mkdir(parents=True, exist_ok=True)
            (root / example.test_path).parent.mkdir(parents=True, exist_ok=True)
            (root / example.contract_path).write_text(body, encoding="utf-8")
            (root / example.test_path).write_text(body, encoding="utf-8")

        inject_category(project, [first, second], root)

        assert "one" in (project / "contracts" / "category" / "first-token.sol").read_text(encoding="utf-8")
        assert "two" in (project / "contracts" / "category" / "second-token.sol").read_text(encoding="utf-8")

    def test_any_missing_source_aborts_before_copying(self, project: Path, source_root: Path, demo_examples):
        (source_root / demo_examples[-1].test_path).unlink()

        with pytest.raises(SourceNotFoundError):
            inject_category(project, demo_examples, source_root)

        assert not (project / "contracts" / "category").exists()

    def test_category_destinations(self, demo_examples):
        contract, test = category_destinations(Path("/p"), demo_examples[0])
        assert contract == Path("/p/contracts/category/demo-vault.sol")
        assert test == Path("/p/test/category/demo-vault.test.ts")
