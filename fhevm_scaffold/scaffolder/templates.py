"""Jinja2 rendering for generated READMEs, deploy scripts and GitBook pages.

Every document the generators write comes from one ``.j2`` file in
``fhevm_scaffold/scaffolder/templates/``. Rendering reads nothing but the
template and the context dict it is given, so identical descriptors always
produce identical bytes.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined

BUNDLED_TEMPLATES = Path(__file__).parent / "templates"

TEMPLATE_SUFFIX = ".j2"


def build_environment(template_dir: Path) -> Environment:
    """Jinja2 environment shared by every document type.

    Output is markdown, TypeScript or JSON, never HTML, so autoescaping is
    off. Block tags do not leave blank lines behind and the final newline of
    each template is kept.
    """
    return Environment(
        loader=FileSystemLoader(str(template_dir)),
        autoescape=False,
        undefined=StrictUndefined,
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )


class TemplateRenderer:
    """Renders document templates by name.

    A variable missing from the context raises ``jinja2.UndefinedError``
    instead of rendering as an empty string.

    Usage::

        renderer = TemplateRenderer()
        text = renderer.render("summary.md.j2", {"pages": []})
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        self.template_dir = Path(template_dir) if template_dir is not None else BUNDLED_TEMPLATES
        self.env = build_environment(self.template_dir)

    def render(self, name: str, context: dict[str, Any]) -> str:
        """Render template *name* (relative to :attr:`template_dir`) with *context*."""
        return self.env.get_template(name).render(**context)

    def list_templates(self) -> list[str]:
        """Names of every ``.j2`` file under :attr:`template_dir`, sorted."""
        if not self.template_dir.is_dir():
            return []
        return sorted(
            path.relative_to(self.template_dir).as_posix()
            for path in self.template_dir.rglob(f"*{TEMPLATE_SUFFIX}")
        )
