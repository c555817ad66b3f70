"""Template synchronization tests."""

from __future__ import annotations

from pathlib import Path

import pytest

import devflow.templates.synchronizer as synchronizer_module
from devflow.schemas.enums import CopyStatus
from devflow.templates import (
    TEMPLATE_ROOT,
    TemplateFilter,
    list_template_files,
    synchronize_template,
)


def _write(path: Path, content: bytes) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content)


@pytest.fixture
def source_tree(tmp_path: Path) -> Path:
    source = tmp_path / "source"
    _write(source / "b.txt", b"bravo")
    _write(source / "a" / "nested" / "c.bin", b"\x00\x01\x02")
    _write(source / ".devflow" / "steps" / ".keep", b"")
    _write(source / "node_modules" / "pkg" / "index.js", b"ignored")
    (source / "empty-dir").mkdir()
    return source


def _snapshot(root: Path) -> dict[str, bytes]:
    return {
        path.relative_to(root).as_posix(): path.read_bytes()
        for path in sorted(root.rglob("*"))
        if path.is_file()
    }


def test_first_run_copies_every_accepted_file(source_tree: Path, tmp_path: Path) -> None:
    destination = tmp_path / "dest"
    outcomes = synchronize_template(source_tree, destination)

    assert [outcome.path for outcome in outcomes] == [
        ".devflow/steps/.keep",
        "a/nested/c.bin",
        "b.txt",
    ]
    assert {outcome.status for outcome in outcomes} == {CopyStatus.COPIED}
    assert all(outcome.reason is None for outcome in outcomes)
    assert (destination / "a" / "nested" / "c.bin").read_bytes() == b"\x00\x01\x02"
    assert (destination / "empty-dir").is_dir()


def test_bookkeeping_directories_are_filtered_without_outcome(
    source_tree: Path, tmp_path: Path
) -> None:
    destination = tmp_path / "dest"
    outcomes = synchronize_template(source_tree, destination)
    assert not any("node_modules" in outcome.path for outcome in outcomes)
    assert not (destination / "node_modules").exists()


def test_second_run_without_force_skips_and_preserves_edits(
    source_tree: Path, tmp_path: Path
) -> None:
    destination = tmp_path / "dest"
    synchronize_template(source_tree, destination)
    (destination / "b.txt").write_bytes(b"user edit")
    before = _snapshot(destination)

    outcomes = synchronize_template(source_tree, destination)

    assert {outcome.status for outcome in outcomes} == {CopyStatus.SKIPPED}
    assert all(outcome.reason == "already exists" for outcome in outcomes)
    assert _snapshot(destination) == before


def test_forced_run_overwrites_conflicts(source_tree: Path, tmp_path: Path) -> None:
    destination = tmp_path / "dest"
    synchronize_template(source_tree, destination)
    (destination / "b.txt").write_bytes(b"user edit")
    (source_tree / "b.txt").write_bytes(b"bravo v2")
    _write(source_tree / "new.txt", b"fresh")

    outcomes = synchronize_template(source_tree, destination, force=True)
    statuses = {outcome.path: outcome.status for outcome in outcomes}

    assert statuses["b.txt"] == CopyStatus.OVERWRITTEN
    assert statuses["a/nested/c.bin"] == CopyStatus.OVERWRITTEN
    assert statuses["new.txt"] == CopyStatus.COPIED
    assert (destination / "b.txt").read_bytes() == b"bravo v2"


def test_custom_filter_replaces_default(source_tree: Path, tmp_path: Path) -> None:
    destination = tmp_path / "dest"
    outcomes = synchronize_template(
        source_tree,
        destination,
        path_filter=lambda rel: not rel.endswith(".bin"),
    )
    paths = [outcome.path for outcome in outcomes]
    assert "a/nested/c.bin" not in paths
    assert "node_modules/pkg/index.js" in paths


def test_template_filter_supports_exclude_globs() -> None:
    path_filter = TemplateFilter.from_globs(["*.md", "queue/"])
    assert path_filter(".devflow/state.json")
    assert not path_filter(".devflow/README.md")
    assert not path_filter(".devflow/queue/.gitkeep")
    assert not path_filter("x/__pycache__/mod.pyc")


def test_io_failure_aborts_synchronization(
    source_tree: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    def _failing_copy(source: Path, target: Path) -> None:
        raise PermissionError(f"denied: {target}")

    monkeypatch.setattr(synchronizer_module.shutil, "copyfile", _failing_copy)
    with pytest.raises(PermissionError):
        synchronize_template(source_tree, tmp_path / "dest")


def test_missing_source_root_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        synchronize_template(tmp_path / "missing", tmp_path / "dest")


def test_bundled_template_contains_workspace_records() -> None:
    files = list_template_files(TEMPLATE_ROOT)
    assert files == sorted(files)
    for expected in (
        ".devflow/state.json",
        ".devflow/preset.json",
        ".devflow/config.yaml",
        ".devflow/steps/.keep",
        ".devflow/history/.gitkeep",
        ".devflow/queue/.gitkeep",
    ):
        assert expected in files
