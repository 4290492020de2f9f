"""Module generation orchestrator.

Takes a module name and runs the whole pipeline: derive identifiers, render
the seven module files, write them below the modules directory, print the
file tree, then wire the module into the route registry and the Swagger
registry.  The two registry steps are independent of each other and of
individual file-write failures.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from modgen.config import GeneratorConfig
from modgen.naming import Identifiers, derive_identifiers
from modgen.registry.patcher import (
    PatchStatus,
    RegistryKind,
    RegistryOutcome,
    docs_patch_op,
    patch_registry_file,
    route_patch_op,
)
from modgen.scaffolder import EmitResult, FileEmitter, TemplateRenderer
from modgen.utils import (
    print_error,
    print_file_tree,
    print_header,
    print_success,
    print_warning,
)


class GenerationReport(BaseModel):
    """Everything one ``generate`` call did."""

    module_name: str
    identifiers: Identifiers
    module_dir: Path
    files: list[EmitResult] = Field(default_factory=list)
    registries: list[RegistryOutcome] = Field(default_factory=list)

    @property
    def created_files(self) -> list[str]:
        """Names of the files that were written, in generation order."""
        return [r.path.name for r in self.files if r.ok]

    @property
    def failed_files(self) -> list[str]:
        return [r.path.name for r in self.files if not r.ok]

    def registry(self, kind: RegistryKind) -> RegistryOutcome | None:
        """Outcome for the registry of *kind*, if that step ran."""
        for outcome in self.registries:
            if outcome.kind is kind:
                return outcome
        return None


class ModuleGenerator:
    """Scaffolds one module and wires it into the project registries.

    Attributes:
        config: Paths and patch settings for the target project.
        renderer: Renders the module templates.
        emitter: Writes rendered files to disk.
    """

    def __init__(
        self, config: GeneratorConfig | None = None, show_progress: bool = True
    ) -> None:
        self.config = config or GeneratorConfig()
        self.renderer = TemplateRenderer()
        self.emitter = FileEmitter(show_progress=show_progress)

    async def generate(self, raw_name: str) -> GenerationReport:
        """Generate module *raw_name* and patch both registries.

        Args:
            raw_name: Module name, used verbatim for the directory, file
                names and URL paths.

        Returns:
            A ``GenerationReport`` describing written files and registry
            outcomes.

        Raises:
            ValueError: If *raw_name* is empty.
            DirectoryCreationError: If the module directory cannot be created.
        """
        if not raw_name:
            raise ValueError("Module name must not be empty")

        identifiers = derive_identifiers(raw_name)
        module_dir = self.config.module_path(raw_name)
        print_header(f"Generating module '{raw_name}'")

        # 1. Render and write the module files
        files = self.renderer.render_module(identifiers)
        results = await self.emitter.emit(module_dir, files)
        for failed in (r for r in results if not r.ok):
            print_error(f"Failed to create {failed.label}")

        report = GenerationReport(
            module_name=raw_name,
            identifiers=identifiers,
            module_dir=module_dir,
            files=results,
        )

        # 2. Tree view of what was created
        print_file_tree(_display_path(module_dir, self.config.project_root), report.created_files)

        # 3. Route registry
        if self.config.patch_routes:
            outcome = await patch_registry_file(
                self.config.route_registry_path, route_patch_op(identifiers, self.config)
            )
            _report_outcome(outcome, "Route added to", self.config.route_registry)
            report.registries.append(outcome)

        # 4. Swagger registry
        if self.config.patch_docs:
            outcome = await patch_registry_file(
                self.config.docs_registry_path, docs_patch_op(identifiers, self.config)
            )
            _report_outcome(outcome, "Swagger doc added to", self.config.docs_registry)
            report.registries.append(outcome)

        print_success(f"\nModule '{raw_name}' created successfully!\n")
        return report


def _report_outcome(outcome: RegistryOutcome, done_message: str, display: str) -> None:
    for warning in outcome.warnings:
        print_warning(warning)
    if outcome.status is PatchStatus.PATCHED:
        print_success(f"\n{done_message} {display}")
    elif outcome.status is PatchStatus.UNCHANGED:
        print_success(f"\n{display} already up to date")
    elif outcome.status is PatchStatus.FAILED:
        print_error(f"Failed to update {display}: {outcome.error}")


def _display_path(path: Path, root: Path) -> Path:
    """*path* relative to *root* when possible, for console output."""
    try:
        return path.relative_to(root)
    except ValueError:
        return path
