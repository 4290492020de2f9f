"""modgen configuration.

Typed settings for the generator: where the project lives, where modules
are created, which registry files get patched and how inserted entries are
indented.  Pydantic v2 validates values at construction time and handles
JSON round-trips.
"""

from __future__ import annotations

import os
from pathlib import Path, PurePosixPath
from typing import Any

from pydantic import BaseModel, Field, field_validator


class GeneratorConfig(BaseModel):
    """Settings for one generator run.

    All relative paths (``modules_dir``, ``route_registry``,
    ``docs_registry``) are resolved against ``project_root``.
    """

    project_root: Path = Field(default=Path("."))
    modules_dir: str = Field(
        default="src/app/modules", description="Directory that holds one folder per module"
    )
    route_registry: str = Field(
        default="src/routes.ts", description="File declaring the module route array"
    )
    docs_registry: str = Field(
        default="src/swaggerOptions.ts", description="File declaring the Swagger paths object"
    )
    route_collection: str = Field(default="moduleRoutes", min_length=1)
    docs_collection: str = Field(default="paths", min_length=1)
    route_indent: str = Field(default=" " * 4)
    docs_indent: str = Field(default=" " * 12)
    patch_routes: bool = Field(default=True)
    patch_docs: bool = Field(default=True)

    @field_validator("modules_dir", "route_registry", "docs_registry")
    @classmethod
    def _must_be_relative(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("path must not be empty")
        if PurePosixPath(value).is_absolute() or Path(value).is_absolute():
            raise ValueError(f"path must be relative to project_root: {value}")
        return value

    @field_validator("route_indent", "docs_indent")
    @classmethod
    def _whitespace_only(cls, value: str) -> str:
        if value.strip():
            raise ValueError("indent must contain only whitespace")
        return value

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def modules_path(self) -> Path:
        """Absolute-or-relative directory where module folders are created."""
        return self.project_root / self.modules_dir

    @property
    def route_registry_path(self) -> Path:
        return self.project_root / self.route_registry

    @property
    def docs_registry_path(self) -> Path:
        return self.project_root / self.docs_registry

    def module_path(self, raw_name: str) -> Path:
        """Directory that receives the generated files of *raw_name*."""
        return self.modules_path / raw_name

    def module_import_base(self, registry: str) -> str:
        """Import specifier prefix for modules, as seen from *registry*.

        For the default layout (``src/routes.ts`` importing from
        ``src/app/modules``) this is ``./app/modules``.
        """
        registry_dir = PurePosixPath(registry).parent
        rel = Path(os.path.relpath(self.modules_dir, str(registry_dir))).as_posix()
        if rel == ".":
            return "."
        if not rel.startswith("."):
            rel = f"./{rel}"
        return rel

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file and return its path."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "GeneratorConfig":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls, **overrides: Any) -> "GeneratorConfig":
        """Build a ``GeneratorConfig`` from environment variables.

        Recognised variables (all optional):
            MODGEN_PROJECT_ROOT, MODGEN_MODULES_DIR, MODGEN_ROUTE_REGISTRY,
            MODGEN_DOCS_REGISTRY, MODGEN_ROUTE_COLLECTION,
            MODGEN_DOCS_COLLECTION.

        Keyword *overrides* win over the environment.
        """
        env_map = {
            "project_root": "MODGEN_PROJECT_ROOT",
            "modules_dir": "MODGEN_MODULES_DIR",
            "route_registry": "MODGEN_ROUTE_REGISTRY",
            "docs_registry": "MODGEN_DOCS_REGISTRY",
            "route_collection": "MODGEN_ROUTE_COLLECTION",
            "docs_collection": "MODGEN_DOCS_COLLECTION",
        }
        kwargs: dict[str, Any] = {}
        for field_name, var in env_map.items():
            if os.environ.get(var):
                kwargs[field_name] = os.environ[var]
        kwargs.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**kwargs)
