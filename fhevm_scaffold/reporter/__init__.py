"""Documentation generation for the FHEVM examples."""

from fhevm_scaffold.reporter.docs import (
    DocPage,
    DocsGenerator,
    extract_description,
    index_pages,
    render_index,
)

__all__ = [
    "DocPage",
    "DocsGenerator",
    "extract_description",
    "index_pages",
    "render_index",
]
