"""Idempotent patching of the route and Swagger registry files.

A ``PatchOp`` carries one import line and one collection entry.  Applying
it adds the import after the last existing import and splices the entry
into the registry's collection literal; either part is skipped when its
text is already present, so applying the same op twice changes nothing the
second time.

:func:`apply_patch` is a pure text transform.  :func:`patch_registry_file`
wraps it in a single read-modify-write of one registry file and never
raises: a missing file, a missing landmark or an I/O error is reported in
the returned ``RegistryOutcome``.
"""

from __future__ import annotations

import asyncio
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

from modgen.config import GeneratorConfig
from modgen.naming import Identifiers
from modgen.utils import read_text, write_text_atomic

from .landmarks import (
    find_array_insertion_point,
    find_import_insertion_point,
    find_object_block_end,
    sibling_indent_after,
    sibling_indent_before,
)


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class RegistryKind(str, Enum):
    """Which registry a patch targets, and so which collection literal to find."""

    ROUTE = "route"
    API_DOCS = "api_docs"


class PatchStatus(str, Enum):
    PATCHED = "patched"
    UNCHANGED = "unchanged"
    MISSING = "missing"
    FAILED = "failed"


class PatchOp(BaseModel):
    """One import plus one collection entry to add to a registry file."""

    kind: RegistryKind
    import_line: str = Field(..., min_length=1)
    entry_fragment: str = Field(..., min_length=1, description="Entry text without indentation")
    collection_name: str = Field(
        ..., min_length=1, description="Array variable (routes) or object key (docs)"
    )
    indent: str = Field(default="    ", description="Used when no sibling entry shows the indent")


class PatchResult(BaseModel):
    """Text produced by :func:`apply_patch` and what happened to it."""

    text: str
    import_added: bool = False
    entry_added: bool = False
    warnings: list[str] = Field(default_factory=list)

    @property
    def changed(self) -> bool:
        return self.import_added or self.entry_added


class RegistryOutcome(BaseModel):
    """Result of patching one registry file on disk."""

    kind: RegistryKind
    path: Path
    status: PatchStatus
    warnings: list[str] = Field(default_factory=list)
    error: str | None = None


# ---------------------------------------------------------------------------
# Pure text patching
# ---------------------------------------------------------------------------


def apply_patch(text: str, op: PatchOp) -> PatchResult:
    """Apply *op* to *text* and return the patched text.

    The import step and the entry step are guarded independently by a
    substring check, and each degrades to a warning when its landmark is
    missing.
    """
    result = PatchResult(text=text)

    if op.import_line not in result.text:
        result.text = _insert_import(result.text, op.import_line)
        result.import_added = True

    entry = op.entry_fragment.strip()
    if entry not in result.text:
        if op.kind is RegistryKind.ROUTE:
            patched = _insert_array_entry(result.text, op, entry)
            missing = f"Could not find {op.collection_name} array to insert route."
        else:
            patched = _insert_object_entry(result.text, op, entry)
            missing = f"Could not find {op.collection_name} object to insert swagger doc."
        if patched is None:
            result.warnings.append(missing)
        else:
            result.text = patched
            result.entry_added = True

    return result


def _insert_import(text: str, import_line: str) -> str:
    newline = _line_ending(text)
    offset = find_import_insertion_point(text)
    if offset is None:
        return f"{import_line}{newline}{text}"
    head = text[:offset]
    if not head.endswith("\n"):
        head += newline
    return f"{head}{import_line}{newline}{text[offset:]}"


def _insert_array_entry(text: str, op: PatchOp, entry: str) -> str | None:
    offset = find_array_insertion_point(text, op.collection_name)
    if offset is None:
        return None
    indent = sibling_indent_after(text, offset) or op.indent
    return f"{text[:offset]}{_line_ending(text)}{indent}{entry}{text[offset:]}"


def _insert_object_entry(text: str, op: PatchOp, entry: str) -> str | None:
    offset = find_object_block_end(text, op.collection_name)
    if offset is None:
        return None
    indent = sibling_indent_before(text, offset) or op.indent
    # The previous last entry needs a separator before the new one.
    comma = "" if text[offset - 1] in ",{" else ","
    return f"{text[:offset]}{comma}{_line_ending(text)}{indent}{entry}{text[offset:]}"


def _line_ending(text: str) -> str:
    """``"\\r\\n"`` for CRLF files, ``"\\n"`` otherwise."""
    return "\r\n" if "\r\n" in text else "\n"


# ---------------------------------------------------------------------------
# Patch construction
# ---------------------------------------------------------------------------


def route_patch_op(identifiers: Identifiers, config: GeneratorConfig) -> PatchOp:
    """Import and ``moduleRoutes`` entry for the module's router."""
    raw = identifiers.raw
    base = config.module_import_base(config.route_registry)
    return PatchOp(
        kind=RegistryKind.ROUTE,
        import_line=f"import {raw}Route from '{base}/{raw}/{raw}.route';",
        entry_fragment=f'{{ path: "/{raw}", route: {raw}Route }},',
        collection_name=config.route_collection,
        indent=config.route_indent,
    )


def docs_patch_op(identifiers: Identifiers, config: GeneratorConfig) -> PatchOp:
    """Import and ``paths`` spread entry for the module's Swagger docs."""
    raw = identifiers.raw
    base = config.module_import_base(config.docs_registry)
    return PatchOp(
        kind=RegistryKind.API_DOCS,
        import_line=f'import {{ {raw}SwaggerDocs }} from "{base}/{raw}/{raw}.swagger";',
        entry_fragment=f"...{raw}SwaggerDocs,",
        collection_name=config.docs_collection,
        indent=config.docs_indent,
    )


# ---------------------------------------------------------------------------
# Registry files on disk
# ---------------------------------------------------------------------------


async def patch_registry_file(path: str | Path, op: PatchOp) -> RegistryOutcome:
    """Read *path*, apply *op* and write the result back in one overwrite.

    Nothing is written when the patch leaves the text unchanged.
    """
    target = Path(path)
    if not await asyncio.to_thread(target.is_file):
        return RegistryOutcome(
            kind=op.kind,
            path=target,
            status=PatchStatus.MISSING,
            warnings=[f"{target.name} not found! Skipped {_kind_label(op.kind)} injection."],
        )

    try:
        original = await asyncio.to_thread(read_text, target)
    except (OSError, UnicodeDecodeError) as exc:
        return RegistryOutcome(
            kind=op.kind, path=target, status=PatchStatus.FAILED, error=str(exc)
        )

    result = apply_patch(original, op)
    if not result.changed:
        return RegistryOutcome(
            kind=op.kind,
            path=target,
            status=PatchStatus.UNCHANGED,
            warnings=result.warnings,
        )

    try:
        await asyncio.to_thread(write_text_atomic, target, result.text)
    except OSError as exc:
        return RegistryOutcome(
            kind=op.kind,
            path=target,
            status=PatchStatus.FAILED,
            warnings=result.warnings,
            error=str(exc),
        )

    return RegistryOutcome(
        kind=op.kind, path=target, status=PatchStatus.PATCHED, warnings=result.warnings
    )


def _kind_label(kind: RegistryKind) -> str:
    return "route" if kind is RegistryKind.ROUTE else "swagger"
