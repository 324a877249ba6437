"""Tests for the template cloner (fhevm_scaffold.scaffolder.cloner)."""

from __future__ import annotations

from pathlib import Path

import pytest

from fhevm_scaffold.errors import DestinationExistsError, ScaffoldIOError, SourceNotFoundError
from fhevm_scaffold.scaffolder import cloner
from fhevm_scaffold.scaffolder.cloner import clone_template, ensure_absent

pytestmark = pytest.mark.unit


class TestCloneTemplate:
    def test_copies_tree(self, template_dir: Path, tmp_path: Path):
        dest = clone_template(template_dir, tmp_path / "out")
        assert (dest / "package.json").is_file()
        assert (dest / "contracts" / "Counter.sol").read_text(encoding="utf-8") == "contract Counter {}\n"
        assert (dest / "deploy" / "deploy.ts").is_file()

    def test_skips_node_modules_and_git_at_any_depth(self, template_dir: Path, tmp_path: Path):
        dest = clone_template(template_dir, tmp_path / "out")
        assert not (dest / "node_modules").exists()
        assert not (dest / ".git").exists()
        assert (dest / "scripts").is_dir()
        assert not (dest / "scripts" / "node_modules").exists()
        assert not any(part == "node_modules" for path in dest.rglob("*") for part in path.parts)

    def test_excluded_dirs_are_never_walked(self, template_dir: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        seen: list[str] = []
        real_ignore = cloner._ignore_basenames

        def recording(names):
            inner = real_ignore(names)

            def _ignore(directory, entries):
                seen.append(Path(directory).name)
                return inner(directory, entries)

            return _ignore

        monkeypatch.setattr(cloner, "_ignore_basenames", recording)
        clone_template(template_dir, tmp_path / "out")
        assert "template" in seen
        assert "scripts" in seen
        assert "node_modules" not in seen
        assert "hardhat" not in seen

    def test_file_named_like_excluded_dir_is_copied(self, template_dir: Path, tmp_path: Path):
        (template_dir / "contracts" / "cache").write_text("not a directory\n", encoding="utf-8")
        dest = clone_template(template_dir, tmp_path / "out")
        assert (dest / "contracts" / "cache").is_file()

    def test_custom_exclusions(self, template_dir: Path, tmp_path: Path):
        dest = clone_template(template_dir, tmp_path / "out", excluded_dirs=["deploy"])
        assert not (dest / "deploy").exists()
        assert (dest / "node_modules").exists()

    def test_creates_missing_parents(self, template_dir: Path, tmp_path: Path):
        dest = clone_template(template_dir, tmp_path / "a" / "b" / "out")
        assert dest.is_dir()

    def test_missing_source(self, tmp_path: Path):
        with pytest.raises(SourceNotFoundError) as excinfo:
            clone_template(tmp_path / "nope", tmp_path / "out")
        assert "Template directory not found" in str(excinfo.value)
        assert not (tmp_path / "out").exists()

    def test_existing_destination_untouched(self, template_dir: Path, tmp_path: Path):
        dest = tmp_path / "out"
        dest.mkdir()
        keep = dest / "mine.txt"
        keep.write_text("precious\n", encoding="utf-8")
        before = keep.stat().st_mtime_ns

        with pytest.raises(DestinationExistsError):
            clone_template(template_dir, dest)

        assert sorted(p.name for p in dest.iterdir()) == ["mine.txt"]
        assert keep.read_text(encoding="utf-8") == "precious\n"
        assert keep.stat().st_mtime_ns == before

    def test_os_error_is_wrapped(self, template_dir: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        def broken(*args, **kwargs):
            raise PermissionError(13, "Permission denied")

        monkeypatch.setattr(cloner.shutil, "copytree", broken)
        with pytest.raises(ScaffoldIOError) as excinfo:
            clone_template(template_dir, tmp_path / "out")
        assert isinstance(excinfo.value.error, PermissionError)


class TestEnsureAbsent:
    def test_absent_passes(self, tmp_path: Path):
        ensure_absent(tmp_path / "free")

    def test_existing_file_counts(self, tmp_path: Path):
        target = tmp_path / "file"
        target.write_text("x", encoding="utf-8")
        with pytest.raises(DestinationExistsError):
            ensure_absent(target)
