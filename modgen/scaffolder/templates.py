"""Jinja2 template rendering for module scaffolding.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``modgen/scaffolder/templates/`` directory and renders the seven artifacts
of a module (interface, schema, validation, route, controller, service,
swagger) from the module name and its derived identifiers.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape
from pydantic import BaseModel, Field

from modgen.naming import Identifiers


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

# (artifact kind, template path) in generation order.
MODULE_ARTIFACTS: tuple[tuple[str, str], ...] = (
    ("interface", "module/interface.ts.j2"),
    ("schema", "module/schema.ts.j2"),
    ("validation", "module/validation.ts.j2"),
    ("route", "module/route.ts.j2"),
    ("controller", "module/controller.ts.j2"),
    ("service", "module/service.ts.j2"),
    ("swagger", "module/swagger.ts.j2"),
)

MODULE_FILE_EXTENSION = ".ts"


class GeneratedFile(BaseModel):
    """One rendered artifact, ready to be written below the module directory."""

    relative_path: str = Field(..., description="Path relative to the module directory")
    content: str
    label: str = Field(..., description="Human-readable name used in progress output")


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for module scaffolding.

    Templates see ``raw_name``, ``snake`` and ``pascal`` in their context.
    Undefined variables raise instead of rendering as empty strings.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )

    # -- Single template rendering -----------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"module/route.ts.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

    def render_string(self, template_string: str, context: dict[str, Any]) -> str:
        """Render an inline template string with the provided context."""
        template = self.env.from_string(template_string)
        return template.render(**context)

    # -- Module rendering --------------------------------------------------

    def render_module(self, identifiers: Identifiers) -> list[GeneratedFile]:
        """Render the seven module artifacts in their fixed order.

        File names are ``<raw_name>.<kind>.ts``; the raw name is used verbatim.
        """
        context = build_context(identifiers)
        files: list[GeneratedFile] = []
        for kind, template_path in MODULE_ARTIFACTS:
            file_name = f"{identifiers.raw}.{kind}{MODULE_FILE_EXTENSION}"
            files.append(
                GeneratedFile(
                    relative_path=file_name,
                    content=self.render(template_path, context),
                    label=file_name,
                )
            )
        return files

    # -- Utility -----------------------------------------------------------

    def list_templates(self, prefix: str = "") -> list[str]:
        """Return a sorted list of all ``.j2`` template paths under *prefix*.

        Paths are relative to the template root directory, with forward
        slashes.
        """
        search_dir = self.template_dir / prefix if prefix else self.template_dir
        if not search_dir.is_dir():
            return []
        return sorted(
            p.relative_to(self.template_dir).as_posix()
            for p in search_dir.rglob("*.j2")
        )


def build_context(identifiers: Identifiers) -> dict[str, Any]:
    """Build the Jinja2 template context for one module."""
    return {
        "raw_name": identifiers.raw,
        "snake": identifiers.snake,
        "pascal": identifiers.pascal,
    }
