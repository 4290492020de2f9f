"""Writes rendered module files to disk.

The target directory is created first; failing to create it aborts the run
before anything is written.  After that every file is attempted
independently: a failed write is reported and recorded, and the remaining
files are still written.  Nothing is rolled back.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from pathlib import Path

from pydantic import BaseModel

from modgen.utils import console, create_progress, ensure_dir

from .templates import GeneratedFile


class DirectoryCreationError(Exception):
    """Raised when the module directory cannot be created."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Cannot create directory {path}: {reason}")


class EmitResult(BaseModel):
    """Outcome of writing one generated file."""

    label: str
    path: Path
    ok: bool
    error: str | None = None


class FileEmitter:
    """Writes ``GeneratedFile`` objects below a base directory."""

    def __init__(self, show_progress: bool = True) -> None:
        self.show_progress = show_progress

    async def emit(
        self, base_path: str | Path, files: Sequence[GeneratedFile]
    ) -> list[EmitResult]:
        """Write *files* below *base_path*, overwriting existing files.

        Args:
            base_path: Module directory; created recursively if missing.
            files: Rendered files, written in the given order.

        Returns:
            One ``EmitResult`` per file, in the same order.

        Raises:
            DirectoryCreationError: If *base_path* cannot be created.
        """
        base = Path(base_path)
        try:
            await asyncio.to_thread(ensure_dir, base)
        except OSError as exc:
            raise DirectoryCreationError(base, str(exc)) from exc

        results: list[EmitResult] = []
        with create_progress(disable=not self.show_progress) as progress:
            for generated in files:
                task = progress.add_task(f"Creating {generated.label}...", total=1)
                target = base / generated.relative_path
                try:
                    await asyncio.to_thread(_write_file, target, generated.content)
                except OSError as exc:
                    progress.update(
                        task,
                        description=f"[red]Failed to create {generated.label}[/red]",
                        completed=1,
                    )
                    console.print(f"[red]{exc}[/red]")
                    results.append(
                        EmitResult(label=generated.label, path=target, ok=False, error=str(exc))
                    )
                    continue
                progress.update(
                    task,
                    description=f"[green]{generated.label} created[/green]",
                    completed=1,
                )
                results.append(EmitResult(label=generated.label, path=target, ok=True))
        return results


def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: write content, creating nested parents if needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
