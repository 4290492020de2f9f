"""Shared utility functions for modgen.

Provides the file-system helpers (directory creation, whole-file reads,
atomic whole-file writes) and the Rich-based console reporting used by every
stage of the generator.
"""

from __future__ import annotations

import os
import stat
import tempfile
from collections.abc import Iterable
from pathlib import Path

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.rule import Rule
from rich.tree import Tree

console = Console()

# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist.

    Args:
        path: Directory path.

    Returns:
        The ``Path`` object that was created.

    Raises:
        OSError: If the directory cannot be created.
    """
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def read_text(path: str | Path) -> str:
    """Read a whole UTF-8 text file, keeping its line endings as they are."""
    with open(path, encoding="utf-8", newline="") as handle:
        return handle.read()


def write_text_atomic(path: str | Path, content: str) -> Path:
    """Replace *path* with *content* in a single step.

    The content is written to a temporary file in the same directory and
    moved over the target with ``os.replace``, so readers never observe a
    half-written file.  A symlink is followed and the file it points to is
    replaced, so the link itself survives.  The parent directory must
    already exist.

    Raises:
        OSError: If the temporary file cannot be written or moved.
    """
    target = Path(path).resolve()
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{target.name}.", suffix=".tmp", dir=str(target.parent)
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
            handle.write(content)
        if target.exists():
            os.chmod(tmp_name, stat.S_IMODE(target.stat().st_mode))
        os.replace(tmp_name, target)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    return target


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_header(title: str, color: str = "bright_cyan") -> None:
    """Print a full-width rule with *title*."""
    console.print()
    console.print(Rule(f"[bold {color}] {title} [/bold {color}]", style=color))
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")


def print_file_tree(root: str | Path, files: Iterable[str]) -> Tree:
    """Print *files* as a one-level tree under *root*.

    Returns:
        The rendered ``Tree`` so callers can inspect or re-render it.
    """
    tree = Tree(f"[bright_cyan]{Path(root).as_posix()}/[/bright_cyan]")
    for name in files:
        tree.add(f"[grey62]{name}[/grey62]")
    console.print()
    console.print(tree)
    return tree


def create_progress(disable: bool = False) -> Progress:
    """Create a Rich progress display for per-file generation tasks.

    Args:
        disable: Build a silent progress display (no live rendering).

    Returns:
        A ``Progress`` instance suitable for use as a context manager.
    """
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        TimeElapsedColumn(),
        console=console,
        disable=disable,
    )
