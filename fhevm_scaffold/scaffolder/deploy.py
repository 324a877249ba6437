"""Hardhat deploy script generation.

The base template ships a ``deploy/deploy.ts`` for its placeholder
contract. After injection it is replaced with a script that deploys the
injected contract(s), named after the ``contract`` declared in each
Solidity source.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from fhevm_scaffold.errors import ScaffoldIOError, SourceNotFoundError
from fhevm_scaffold.scaffolder.readme import write_document
from fhevm_scaffold.scaffolder.templates import TemplateRenderer
from fhevm_scaffold.utils import extract_contract_name

DEPLOY_SCRIPT = Path("deploy") / "deploy.ts"


def contract_name_for(contract_path: str | Path) -> str:
    """Name of the first contract declared in *contract_path*.

    Falls back to the file stem when the source declares no contract
    (interfaces and libraries only).
    """
    path = Path(contract_path)
    if not path.is_file():
        raise SourceNotFoundError("contract", path)
    try:
        source = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ScaffoldIOError(f"decode {path} as UTF-8", exc) from exc
    except OSError as exc:
        raise ScaffoldIOError(f"read {path}", exc) from exc
    return extract_contract_name(source) or path.name.split(".")[0]


def deploy_id(contract_names: Sequence[str]) -> str:
    return "deploy_" + "_".join(name.lower() for name in contract_names)


def render_deploy_script(
    contract_names: Sequence[str],
    renderer: TemplateRenderer | None = None,
) -> str:
    """Render a ``hardhat-deploy`` script deploying *contract_names* in order."""
    if not contract_names:
        raise ValueError("at least one contract name is required")
    renderer = renderer or TemplateRenderer()
    return renderer.render(
        "deploy.ts.j2",
        {"contract_names": list(contract_names), "deploy_id": deploy_id(contract_names)},
    )


def write_deploy_script(
    dest_dir: str | Path,
    contract_names: Sequence[str],
    renderer: TemplateRenderer | None = None,
) -> Path:
    """Write ``deploy/deploy.ts`` into *dest_dir*."""
    return write_document(dest_dir, str(DEPLOY_SCRIPT), render_deploy_script(contract_names, renderer))
