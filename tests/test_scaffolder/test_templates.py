"""Tests for the Jinja2 renderer (fhevm_scaffold.scaffolder.templates)."""

from __future__ import annotations

from pathlib import Path

import pytest
from jinja2 import TemplateNotFound, UndefinedError

from fhevm_scaffold.scaffolder.templates import TemplateRenderer

pytestmark = pytest.mark.unit


class TestTemplateRenderer:
    def test_bundled_templates(self):
        names = TemplateRenderer().list_templates()
        assert names == [
            "category_readme.md.j2",
            "deploy.ts.j2",
            "doc_page.md.j2",
            "example_readme.md.j2",
            "learning_path.md.j2",
            "summary.md.j2",
        ]

    def test_missing_variable_raises(self):
        with pytest.raises(UndefinedError):
            TemplateRenderer().render("summary.md.j2", {})

    def test_unknown_template(self):
        with pytest.raises(TemplateNotFound):
            TemplateRenderer().render("nope.j2", {})

    def test_custom_directory(self, tmp_path: Path):
        (tmp_path / "hello.txt.j2").write_text("Hello {{ name }}\n", encoding="utf-8")
        renderer = TemplateRenderer(tmp_path)
        assert renderer.render("hello.txt.j2", {"name": "<fhe>"}) == "Hello <fhe>\n"

    def test_missing_directory_lists_nothing(self, tmp_path: Path):
        assert TemplateRenderer(tmp_path / "absent").list_templates() == []

    def test_summary_template(self):
        text = TemplateRenderer().render(
            "summary.md.j2",
            {"pages": [{"identifier": "a", "filename": "a.md"}, {"identifier": "b", "filename": "b.md"}]},
        )
        assert text == "# Summary\n\n- [a](a.md)\n- [b](b.md)\n"

    def test_gitbook_markers_are_literal(self):
        text = TemplateRenderer().render(
            "doc_page.md.j2",
            {
                "title": "T",
                "description": "D",
                "contract_name": "C",
                "test_basename": "C.test.ts",
                "contract_source": "contract C {}",
                "test_source": "// t",
            },
        )
        assert '{% hint style="info" %}' in text
        assert '{% tab title="C.sol" %}' in text
        assert "{% endtabs %}" in text
