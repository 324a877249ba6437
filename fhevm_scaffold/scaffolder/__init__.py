"""FHEVM scaffolder: builds standalone Hardhat projects from registry entries.

Quick usage::

    from fhevm_scaffold.scaffolder import create_example_project

    result = create_example_project("fhe-counter", "./out/ex1")
    print(result.files)
"""

from fhevm_scaffold.scaffolder.generator import (
    CategorySteps,
    ExampleSteps,
    GenerationRequest,
    PipelineResult,
    PipelineStage,
    ProjectPipeline,
    create_category_project,
    create_example_project,
    validate_generated_project,
)
from fhevm_scaffold.scaffolder.templates import TemplateRenderer

__all__ = [
    "CategorySteps",
    "ExampleSteps",
    "GenerationRequest",
    "PipelineResult",
    "PipelineStage",
    "ProjectPipeline",
    "TemplateRenderer",
    "create_category_project",
    "create_example_project",
    "validate_generated_project",
]
