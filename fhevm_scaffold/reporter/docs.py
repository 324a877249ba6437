"""GitBook documentation generator.

Produces one ``<identifier>.md`` page per example (title, description, a
hint block, and tabs holding the contract and test sources) and a
``SUMMARY.md`` index. The index is rebuilt from the directory listing on
every run, sorted by filename, so regenerating it over the same pages is
byte-identical.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from pathlib import Path

from pydantic import BaseModel, Field

from fhevm_scaffold.config import ScaffoldConfig
from fhevm_scaffold.errors import DestinationExistsError, ScaffoldIOError, SourceNotFoundError
from fhevm_scaffold.registry.models import ExampleDescriptor
from fhevm_scaffold.scaffolder.templates import TemplateRenderer
from fhevm_scaffold.utils import extract_contract_name, print_info, print_success

PAGE_SUFFIX = ".md"

# GitBook landing page, never listed in the index.
LANDING_PAGE = "README.md"

_DOC_COMMENT_RE = re.compile(r"/\*\*\s*\n\s*\*\s*(.+?)\s*\n")
_NOTICE_RE = re.compile(r"@notice\s+(.+)")


# ---------------------------------------------------------------------------
# Data Models
# ---------------------------------------------------------------------------


class DocPage(BaseModel):
    """A page listed in the index."""

    identifier: str = Field(..., description="Page stem, used as the link text")
    filename: str = Field(..., description="File name relative to the docs directory")


# ---------------------------------------------------------------------------
# Pure helpers
# ---------------------------------------------------------------------------


def extract_description(source: str) -> str:
    """First line of the leading ``/** ... */`` block, else the first ``@notice``."""
    match = _DOC_COMMENT_RE.search(source)
    if match:
        return match.group(1)
    match = _NOTICE_RE.search(source)
    return match.group(1).strip() if match else ""


def index_pages(filenames: Iterable[str], summary_name: str = "SUMMARY.md") -> list[DocPage]:
    """Example pages among *filenames*, sorted lexicographically.

    The index itself and the GitBook landing page are skipped.
    """
    skipped = {summary_name.lower(), LANDING_PAGE.lower()}
    return [
        DocPage(identifier=Path(name).stem, filename=name)
        for name in sorted(set(filenames))
        if name.endswith(PAGE_SUFFIX) and name.lower() not in skipped
    ]


def render_index(
    filenames: Iterable[str],
    renderer: TemplateRenderer | None = None,
    summary_name: str = "SUMMARY.md",
) -> str:
    """Render ``SUMMARY.md`` listing every page in *filenames*."""
    renderer = renderer or TemplateRenderer()
    pages = index_pages(filenames, summary_name)
    return renderer.render("summary.md.j2", {"pages": [page.model_dump() for page in pages]})


# ---------------------------------------------------------------------------
# DocsGenerator
# ---------------------------------------------------------------------------


class DocsGenerator:
    """Writes GitBook pages for registry examples.

    Usage::

        generator = DocsGenerator(config)
        generator.generate(registry.examples_in_category("basic"), Path("docs"))
    """

    def __init__(
        self,
        config: ScaffoldConfig | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config or ScaffoldConfig()
        self.renderer = renderer or TemplateRenderer()

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------

    def read_sources(self, descriptor: ExampleDescriptor) -> tuple[str, str]:
        """Return the raw contract and test text for *descriptor*.

        Raises:
            SourceNotFoundError: Naming whichever of the two files is missing.
        """
        texts: list[str] = []
        for role, relative in (("contract", descriptor.contract_path), ("test", descriptor.test_path)):
            path = self.config.resolve_source(relative)
            if not path.is_file():
                raise SourceNotFoundError(f"{role} for {descriptor.identifier}", path)
            try:
                texts.append(path.read_text(encoding="utf-8"))
            except UnicodeDecodeError as exc:
                raise ScaffoldIOError(f"decode {path} as UTF-8", exc) from exc
            except OSError as exc:
                raise ScaffoldIOError(f"read {path}", exc) from exc
        return texts[0], texts[1]

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render_page(self, descriptor: ExampleDescriptor, contract_source: str, test_source: str) -> str:
        """Render one example page. Pure: same inputs, same bytes."""
        contract_name = extract_contract_name(contract_source) or descriptor.contract_stem
        return self.renderer.render(
            "doc_page.md.j2",
            {
                "title": descriptor.title,
                "description": descriptor.description or extract_description(contract_source),
                "contract_name": contract_name,
                "test_basename": descriptor.test_basename,
                "contract_source": contract_source.rstrip("\n"),
                "test_source": test_source.rstrip("\n"),
            },
        )

    # ------------------------------------------------------------------
    # Writing
    # ------------------------------------------------------------------

    @staticmethod
    def page_path(output_dir: Path, descriptor: ExampleDescriptor) -> Path:
        return Path(output_dir) / f"{descriptor.identifier}{PAGE_SUFFIX}"

    def write_page(self, descriptor: ExampleDescriptor, output_dir: Path, *, force: bool = False) -> Path:
        """Render and write one page.

        Raises:
            DestinationExistsError: The page exists and *force* is false.
                The existing file is not touched.
        """
        path = self.page_path(output_dir, descriptor)
        if path.exists() and not force:
            raise DestinationExistsError(path)
        contract_source, test_source = self.read_sources(descriptor)
        text = self.render_page(descriptor, contract_source, test_source)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise ScaffoldIOError(f"write {path}", exc) from exc
        print_success(f"{descriptor.identifier} -> {path}")
        return path

    def regenerate_index(self, output_dir: Path) -> Path:
        """Rebuild the index from the pages currently in *output_dir*."""
        output = Path(output_dir)
        summary_path = output / self.config.summary_name
        try:
            output.mkdir(parents=True, exist_ok=True)
            names = [entry.name for entry in output.iterdir() if entry.is_file()]
            summary_path.write_text(
                render_index(names, self.renderer, self.config.summary_name),
                encoding="utf-8",
            )
        except OSError as exc:
            raise ScaffoldIOError(f"write {summary_path}", exc) from exc
        print_info(f"index rebuilt: {summary_path}")
        return summary_path

    def generate(
        self,
        descriptors: Sequence[ExampleDescriptor],
        output_dir: Path,
        *,
        force: bool = False,
        summary: bool = True,
    ) -> list[Path]:
        """Write a page per descriptor, then rebuild the index.

        Every destination and source is checked before the first write, so
        a conflict or missing source leaves the docs directory unchanged.
        """
        output = Path(output_dir)
        if not force:
            for descriptor in descriptors:
                path = self.page_path(output, descriptor)
                if path.exists():
                    raise DestinationExistsError(path)
        for descriptor in descriptors:
            self.read_sources(descriptor)

        written = [self.write_page(descriptor, output, force=True) for descriptor in descriptors]
        if summary:
            self.regenerate_index(output)
        return written
