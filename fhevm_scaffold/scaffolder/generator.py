"""Project generation pipeline.

Runs the fixed sequence clone → inject → rewrite config → write docs for one
example or for a whole category. The pipeline itself only sequences calls
and tracks state; every file-system mutation lives in a *steps* object, so
tests can drive the orchestration with fakes.

State machine for one run::

    START → VALIDATED → CLONED → INJECTED → CONFIG_WRITTEN → DOCS_WRITTEN → DONE
      └──────────┴──────────┴──────────┴──────────────┴──────────────┴──→ FAILED

``DONE`` and ``FAILED`` are terminal. Nothing is retried; without
``atomic`` a failed run leaves its partial output in place for inspection.
With ``atomic`` the project is built in a sibling staging directory and
renamed into place only after the last step succeeds.
"""

from __future__ import annotations

import shutil
import tempfile
from collections.abc import Sequence
from enum import Enum
from pathlib import Path
from typing import Literal, Protocol

from pydantic import BaseModel, ConfigDict, Field

from fhevm_scaffold.config import ScaffoldConfig
from fhevm_scaffold.errors import ScaffoldIOError, SourceNotFoundError
from fhevm_scaffold.registry import CategoryDescriptor, ExampleDescriptor, Registry, default_registry
from fhevm_scaffold.scaffolder.cloner import clone_template, ensure_absent
from fhevm_scaffold.scaffolder.deploy import contract_name_for, write_deploy_script
from fhevm_scaffold.scaffolder.injector import (
    InjectedFile,
    category_destinations,
    inject_category,
    inject_example,
)
from fhevm_scaffold.scaffolder.manifest import rewrite_category_manifest, rewrite_manifest
from fhevm_scaffold.scaffolder.readme import (
    LEARNING_PATH_NAME,
    render_category_readme,
    render_learning_path,
    render_readme,
    write_document,
    write_readme,
)
from fhevm_scaffold.scaffolder.templates import TemplateRenderer
from fhevm_scaffold.utils import print_info, print_step_header, print_success, print_warning

REQUIRED_ENTRIES: tuple[str, ...] = (
    "contracts",
    "test",
    "package.json",
    "README.md",
    "hardhat.config.ts",
    "tsconfig.json",
)


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class PipelineStage(str, Enum):
    START = "start"
    VALIDATED = "validated"
    CLONED = "cloned"
    INJECTED = "injected"
    CONFIG_WRITTEN = "config_written"
    DOCS_WRITTEN = "docs_written"
    DONE = "done"
    FAILED = "failed"


_NEXT_STAGE: dict[PipelineStage, PipelineStage] = {
    PipelineStage.START: PipelineStage.VALIDATED,
    PipelineStage.VALIDATED: PipelineStage.CLONED,
    PipelineStage.CLONED: PipelineStage.INJECTED,
    PipelineStage.INJECTED: PipelineStage.CONFIG_WRITTEN,
    PipelineStage.CONFIG_WRITTEN: PipelineStage.DOCS_WRITTEN,
    PipelineStage.DOCS_WRITTEN: PipelineStage.DONE,
}

_TERMINAL = frozenset({PipelineStage.DONE, PipelineStage.FAILED})


class GenerationRequest(BaseModel):
    """One invocation's target, built by a driver and consumed once."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["example", "category"] = "example"
    target: str
    destination: Path
    template_dir: Path


class PipelineResult(BaseModel):
    """What a completed run produced."""

    request: GenerationRequest
    stages: list[PipelineStage] = Field(default_factory=list)
    files: list[str] = Field(default_factory=list, description="Injected files, relative to the project")


class ProjectSteps(Protocol):
    """The four mutating operations a pipeline sequences."""

    def clone(self, workdir: Path) -> None: ...

    def inject(self, workdir: Path) -> list[InjectedFile]: ...

    def write_config(self, workdir: Path) -> None: ...

    def write_docs(self, workdir: Path) -> None: ...


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def validate_generated_project(
    project_dir: str | Path,
    required: Sequence[str] = REQUIRED_ENTRIES,
) -> None:
    """Raise :class:`SourceNotFoundError` for the first missing required entry."""
    root = Path(project_dir)
    for entry in required:
        if not (root / entry).exists():
            raise SourceNotFoundError(f"generated {entry}", root / entry)


# ---------------------------------------------------------------------------
# Concrete steps
# ---------------------------------------------------------------------------


class ExampleSteps:
    """Steps that build a single-example project."""

    def __init__(
        self,
        descriptor: ExampleDescriptor,
        config: ScaffoldConfig,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.descriptor = descriptor
        self.config = config
        self.renderer = renderer or TemplateRenderer()

    def clone(self, workdir: Path) -> None:
        clone_template(self.config.template_dir, workdir, self.config.excluded_dirs)
        print_success(f"Cloned template from {self.config.template_dir}")

    def inject(self, workdir: Path) -> list[InjectedFile]:
        injected = inject_example(workdir, self.descriptor, self.config.source_root)
        for item in injected:
            print_info(f"{item.role}: {item.destination.relative_to(workdir).as_posix()}")
        return injected

    def write_config(self, workdir: Path) -> None:
        manifest = rewrite_manifest(workdir, self.descriptor, self.config)
        print_success(f"package.json name set to {manifest['name']}")
        name = contract_name_for(workdir / "contracts" / self.descriptor.contract_basename)
        write_deploy_script(workdir, [name], self.renderer)
        print_info(f"deploy script targets {name}")

    def write_docs(self, workdir: Path) -> None:
        write_readme(workdir, render_readme(self.descriptor, self.renderer))
        validate_generated_project(workdir)
        print_success("README.md written")


class CategorySteps:
    """Steps that build a project holding every example of a category."""

    def __init__(
        self,
        category: CategoryDescriptor,
        examples: Sequence[ExampleDescriptor],
        config: ScaffoldConfig,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.category = category
        self.examples = list(examples)
        self.config = config
        self.renderer = renderer or TemplateRenderer()

    def clone(self, workdir: Path) -> None:
        clone_template(self.config.template_dir, workdir, self.config.excluded_dirs)
        print_success(f"Cloned template from {self.config.template_dir}")

    def inject(self, workdir: Path) -> list[InjectedFile]:
        injected = inject_category(workdir, self.examples, self.config.source_root)
        print_info(f"{len(self.examples)} contracts and {len(self.examples)} tests injected")
        return injected

    def write_config(self, workdir: Path) -> None:
        manifest = rewrite_category_manifest(workdir, self.category, self.examples, self.config)
        print_success(f"package.json name set to {manifest['name']}")
        names = [
            contract_name_for(category_destinations(workdir, example)[0])
            for example in self.examples
        ]
        write_deploy_script(workdir, names, self.renderer)
        print_info(f"deploy script targets {len(names)} contracts")

    def write_docs(self, workdir: Path) -> None:
        write_readme(workdir, render_category_readme(self.category, self.examples, self.renderer))
        write_document(
            workdir,
            LEARNING_PATH_NAME,
            render_learning_path(self.category, self.examples, self.renderer),
        )
        validate_generated_project(workdir)
        print_success(f"README.md and {LEARNING_PATH_NAME} written")


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------


class ProjectPipeline:
    """Sequences one generation run and records its state transitions.

    Attributes:
        request: What to build and where.
        steps: Object performing the file-system work.
        stage: Current state; ``history`` holds every state visited.
    """

    _STEPS: tuple[tuple[PipelineStage, str, str], ...] = (
        (PipelineStage.CLONED, "Clone template", "clone"),
        (PipelineStage.INJECTED, "Inject sources", "inject"),
        (PipelineStage.CONFIG_WRITTEN, "Write project config", "write_config"),
        (PipelineStage.DOCS_WRITTEN, "Write documentation", "write_docs"),
    )

    def __init__(self, request: GenerationRequest, steps: ProjectSteps, *, atomic: bool = False) -> None:
        self.request = request
        self.steps = steps
        self.atomic = atomic
        self.stage = PipelineStage.START
        self.history: list[PipelineStage] = [PipelineStage.START]
        self._staging_root: Path | None = None

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    def _advance(self, stage: PipelineStage) -> None:
        if self.stage in _TERMINAL:
            raise RuntimeError(f"pipeline already finished ({self.stage.value})")
        if stage is not PipelineStage.FAILED and _NEXT_STAGE[self.stage] is not stage:
            raise RuntimeError(f"illegal transition {self.stage.value} -> {stage.value}")
        self.stage = stage
        self.history.append(stage)

    # ------------------------------------------------------------------
    # Run
    # ------------------------------------------------------------------

    def run(self) -> PipelineResult:
        """Execute every step in order.

        Returns:
            A :class:`PipelineResult` once the project is in place.

        Raises:
            ScaffoldError: The first step failure. The pipeline is left in
                ``FAILED`` and nothing after the failing step runs.
        """
        files: list[str] = []
        try:
            self._validate()
            self._advance(PipelineStage.VALIDATED)

            workdir = self._prepare_workdir()
            for index, (stage, label, method) in enumerate(self._STEPS, start=1):
                print_step_header(index, len(self._STEPS), label)
                outcome = getattr(self.steps, method)(workdir)
                if stage is PipelineStage.INJECTED:
                    files = [item.destination.relative_to(workdir).as_posix() for item in outcome]
                self._advance(stage)

            if self.atomic:
                self._promote(workdir)
            self._advance(PipelineStage.DONE)
        except Exception:
            self._advance(PipelineStage.FAILED)
            raise
        finally:
            self._discard_staging()

        return PipelineResult(request=self.request, stages=list(self.history), files=files)

    def _validate(self) -> None:
        ensure_absent(self.request.destination)
        if not self.request.template_dir.is_dir():
            raise SourceNotFoundError("template directory", self.request.template_dir)

    # ------------------------------------------------------------------
    # Atomic staging
    # ------------------------------------------------------------------

    def _prepare_workdir(self) -> Path:
        destination = self.request.destination
        if not self.atomic:
            return destination
        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            self._staging_root = Path(
                tempfile.mkdtemp(prefix=f".{destination.name}.", suffix=".staging", dir=destination.parent)
            )
        except OSError as exc:
            raise ScaffoldIOError(f"create staging directory next to {destination}", exc) from exc
        return self._staging_root / destination.name

    def _promote(self, workdir: Path) -> None:
        destination = self.request.destination
        ensure_absent(destination)
        try:
            workdir.rename(destination)
        except OSError as exc:
            raise ScaffoldIOError(f"move {workdir} to {destination}", exc) from exc

    def _discard_staging(self) -> None:
        if self._staging_root is None or not self._staging_root.exists():
            return
        try:
            shutil.rmtree(self._staging_root)
        except OSError as exc:
            print_warning(f"Could not remove staging directory {self._staging_root}: {exc}")


# ---------------------------------------------------------------------------
# Convenience constructors
# ---------------------------------------------------------------------------


def create_example_project(
    identifier: str,
    destination: str | Path,
    config: ScaffoldConfig | None = None,
    registry: Registry | None = None,
    renderer: TemplateRenderer | None = None,
) -> PipelineResult:
    """Generate a standalone project for one example.

    Raises:
        NotFoundError: *identifier* is not a registered example. Nothing is
            written in that case.
    """
    config = config or ScaffoldConfig()
    registry = registry or default_registry()
    descriptor = registry.lookup(identifier)
    request = GenerationRequest(
        kind="example",
        target=descriptor.identifier,
        destination=Path(destination),
        template_dir=config.template_dir,
    )
    steps = ExampleSteps(descriptor, config, renderer)
    return ProjectPipeline(request, steps, atomic=config.atomic).run()


def create_category_project(
    identifier: str,
    destination: str | Path,
    config: ScaffoldConfig | None = None,
    registry: Registry | None = None,
    renderer: TemplateRenderer | None = None,
) -> PipelineResult:
    """Generate one project containing every example of a category."""
    config = config or ScaffoldConfig()
    registry = registry or default_registry()
    category = registry.lookup_category(identifier)
    examples = registry.examples_in_category(identifier)
    request = GenerationRequest(
        kind="category",
        target=category.identifier,
        destination=Path(destination),
        template_dir=config.template_dir,
    )
    steps = CategorySteps(category, examples, config, renderer)
    return ProjectPipeline(request, steps, atomic=config.atomic).run()
