"""Tests for writing module files (modgen.scaffolder.emitter).

Covers:
- Directory creation and ordered writes
- Overwriting existing files
- Per-file failures not stopping later files
- DirectoryCreationError when the module directory cannot be made
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from modgen.scaffolder.emitter import (
    DirectoryCreationError,
    EmitResult,
    FileEmitter,
    _write_file,
)
from modgen.scaffolder.templates import GeneratedFile, TemplateRenderer


pytestmark = pytest.mark.unit


@pytest.fixture
def files(user_profile) -> list[GeneratedFile]:
    return TemplateRenderer().render_module(user_profile)


@pytest.fixture
def emitter() -> FileEmitter:
    return FileEmitter(show_progress=False)


class TestEmit:
    async def test_creates_directory_and_files(self, emitter, files, tmp_path: Path):
        base = tmp_path / "src" / "app" / "modules" / "userProfile"
        results = await emitter.emit(base, files)

        assert base.is_dir()
        assert len(results) == 7
        assert all(isinstance(r, EmitResult) and r.ok for r in results)
        assert sorted(p.name for p in base.iterdir()) == sorted(f.relative_path for f in files)

    async def test_results_follow_input_order(self, emitter, files, tmp_path: Path):
        results = await emitter.emit(tmp_path / "m", files)
        assert [r.label for r in results] == [f.label for f in files]
        assert [r.path for r in results] == [tmp_path / "m" / f.relative_path for f in files]

    async def test_content_written(self, emitter, files, tmp_path: Path):
        await emitter.emit(tmp_path, files)
        for f in files:
            assert (tmp_path / f.relative_path).read_text(encoding="utf-8") == f.content

    async def test_overwrites_existing(self, emitter, files, tmp_path: Path):
        existing = tmp_path / files[0].relative_path
        existing.write_text("hand edited", encoding="utf-8")
        await emitter.emit(tmp_path, files)
        assert existing.read_text(encoding="utf-8") == files[0].content

    async def test_nested_relative_path(self, emitter, tmp_path: Path):
        nested = GeneratedFile(relative_path="docs/readme.md", content="# x\n", label="readme")
        results = await emitter.emit(tmp_path, [nested])
        assert results[0].ok
        assert (tmp_path / "docs" / "readme.md").read_text(encoding="utf-8") == "# x\n"

    async def test_empty_file_list(self, emitter, tmp_path: Path):
        base = tmp_path / "empty"
        assert await emitter.emit(base, []) == []
        assert base.is_dir()

    async def test_with_progress_display(self, files, tmp_path: Path):
        results = await FileEmitter(show_progress=True).emit(tmp_path, files)
        assert all(r.ok for r in results)


class TestPartialFailure:
    async def test_failed_write_does_not_stop_others(self, emitter, files, tmp_path: Path):
        def flaky(path: Path, content: str) -> None:
            if path.name.endswith(".schema.ts"):
                raise PermissionError("read-only")
            _write_file(path, content)

        with patch("modgen.scaffolder.emitter._write_file", side_effect=flaky):
            results = await emitter.emit(tmp_path, files)

        failed = [r for r in results if not r.ok]
        assert [r.label for r in failed] == ["userProfile.schema.ts"]
        assert "read-only" in failed[0].error
        assert sum(r.ok for r in results) == 6
        assert not (tmp_path / "userProfile.schema.ts").exists()
        assert (tmp_path / "userProfile.swagger.ts").exists()

    async def test_failure_is_reported(self, emitter, files, tmp_path: Path, capsys):
        with patch("modgen.scaffolder.emitter._write_file", side_effect=OSError("boom")):
            results = await emitter.emit(tmp_path, files)
        assert not any(r.ok for r in results)
        assert "boom" in capsys.readouterr().out


class TestDirectoryCreation:
    async def test_unwritable_base_raises(self, emitter, files, tmp_path: Path):
        blocker = tmp_path / "modules"
        blocker.write_text("not a directory", encoding="utf-8")
        with pytest.raises(DirectoryCreationError) as exc_info:
            await emitter.emit(blocker / "userProfile", files)
        assert exc_info.value.path == blocker / "userProfile"

    async def test_nothing_written_on_directory_failure(self, emitter, files, tmp_path: Path):
        with patch("modgen.scaffolder.emitter.ensure_dir", side_effect=PermissionError("denied")):
            with pytest.raises(DirectoryCreationError, match="denied"):
                await emitter.emit(tmp_path / "m", files)
        assert not (tmp_path / "m").exists()
