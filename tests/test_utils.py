"""Unit tests for shared helpers (fhevm_scaffold.utils).

Tests cover:
- sanitize_name
- extract_contract_name
- JSON load/dump/save
- Rich output helpers writing to the right stream
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from fhevm_scaffold.utils import (
    dump_json,
    extract_contract_name,
    load_json,
    print_error,
    print_info,
    print_success,
    print_summary_table,
    print_warning,
    sanitize_name,
    save_json,
)


# ---------------------------------------------------------------------------
# Names
# ---------------------------------------------------------------------------


class TestSanitizeName:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("fhevm-fhe-counter", "fhevm-fhe-counter"),
            ("fhevm-fhe-allowThis-example", "fhevm-fhe-allowthis-example"),
            ("  Basic Ops (v2) ", "basic-ops-v2"),
            ("a__b--c", "a-b-c"),
            ("---", ""),
        ],
    )
    def test_sanitize(self, raw: str, expected: str):
        assert sanitize_name(raw) == expected


class TestExtractContractName:
    @pytest.mark.unit
    def test_with_inheritance(self):
        assert extract_contract_name("contract FHECounter is SepoliaConfig {\n}") == "FHECounter"

    @pytest.mark.unit
    def test_without_inheritance(self):
        assert extract_contract_name("pragma solidity ^0.8.24;\n\ncontract Plain {\n}\n") == "Plain"

    @pytest.mark.unit
    def test_first_contract_wins(self):
        source = "contract First {\n}\n\ncontract Second is First {\n}\n"
        assert extract_contract_name(source) == "First"

    @pytest.mark.unit
    def test_ignores_prose_and_interfaces(self):
        source = "// a contract keeps state\ninterface IThing {\n}\nlibrary Lib {\n}\n"
        assert extract_contract_name(source) is None

    @pytest.mark.unit
    def test_abstract_contract_not_matched(self):
        assert extract_contract_name("abstract contract Base {\n}\n") is None


# ---------------------------------------------------------------------------
# JSON
# ---------------------------------------------------------------------------


class TestJson:
    @pytest.mark.unit
    def test_dump_uses_two_spaces_and_trailing_newline(self):
        text = dump_json({"b": 1, "a": [1, 2]})
        assert text.endswith("}\n")
        assert '\n  "b": 1' in text

    @pytest.mark.unit
    def test_dump_keeps_insertion_order(self):
        text = dump_json({"z": 1, "a": 2})
        assert text.index('"z"') < text.index('"a"')

    @pytest.mark.unit
    def test_save_and_load(self, tmp_path: Path):
        path = save_json({"name": "fhevm"}, tmp_path / "deep" / "data.json")
        assert load_json(path) == {"name": "fhevm"}

    @pytest.mark.unit
    def test_load_invalid_raises(self, tmp_path: Path):
        path = tmp_path / "bad.json"
        path.write_text("{", encoding="utf-8")
        with pytest.raises(json.JSONDecodeError):
            load_json(path)


# ---------------------------------------------------------------------------
# Console output
# ---------------------------------------------------------------------------


class TestOutput:
    @pytest.mark.unit
    def test_success_and_info_go_to_stdout(self, capsys: pytest.CaptureFixture[str]):
        print_success("cloned")
        print_info("detail")
        captured = capsys.readouterr()
        assert "cloned" in captured.out
        assert "detail" in captured.out
        assert captured.err == ""

    @pytest.mark.unit
    def test_error_is_one_prefixed_line_on_stderr(self, capsys: pytest.CaptureFixture[str]):
        print_error("Destination already exists: " + "x" * 200)
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.startswith("Error: Destination already exists")
        assert captured.err.count("\n") == 1

    @pytest.mark.unit
    def test_markup_in_messages_is_literal(self, capsys: pytest.CaptureFixture[str]):
        print_warning("path [bold]x[/bold]")
        assert "[bold]x[/bold]" in capsys.readouterr().err

    @pytest.mark.unit
    def test_summary_table(self, capsys: pytest.CaptureFixture[str]):
        print_summary_table([("basic", "9")], ["Category", "Examples"], title="Categories")
        out = capsys.readouterr().out
        assert "basic" in out
        assert "Examples" in out
