"""Typed failures raised by the scaffolding pipeline.

Every pipeline step raises one of these instead of returning a status flag.
The CLI drivers are the only place they are caught and rendered.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


class ScaffoldError(Exception):
    """Base class for every failure the drivers know how to report."""


class NotFoundError(ScaffoldError):
    """An example or category identifier is not in the registry."""

    def __init__(self, kind: str, identifier: str, available: Sequence[str]) -> None:
        self.kind = kind
        self.identifier = identifier
        self.available = list(available)
        super().__init__(f"Unknown {kind}: {identifier}")


class DestinationExistsError(ScaffoldError):
    """The destination is already on disk and will not be overwritten."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        super().__init__(
            f"Destination already exists: {self.path}. "
            "Choose a different path or remove the existing one."
        )


class SourceNotFoundError(ScaffoldError):
    """A file the registry or template refers to is missing on disk."""

    def __init__(self, role: str, path: Path) -> None:
        self.role = role
        self.path = Path(path)
        super().__init__(f"{role[:1].upper()}{role[1:]} not found: {self.path}")


class InvalidManifestError(ScaffoldError):
    """``package.json`` is missing, unreadable, or not a JSON object."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Invalid manifest {self.path}: {reason}")


class ScaffoldIOError(ScaffoldError):
    """A file could not be read or written, or its text is not UTF-8."""

    def __init__(self, action: str, error: OSError | ValueError) -> None:
        self.action = action
        self.error = error
        super().__init__(f"Failed to {action}: {error}")
