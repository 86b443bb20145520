"""
Recursive template copy with a per-file text transform.

Entries are visited in whatever order `os.scandir` yields them. Nothing is cleaned up on failure: a partially written
destination stays on disk and the error propagates.
"""

from __future__ import annotations

import os
import shutil
from collections.abc import Callable
from pathlib import Path

from create_rust_app.errors import ScaffoldIOError

FileCallback = Callable[[Path, Path], None]


def _mkdir(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ScaffoldIOError(f"Failed to create directory {path}: {exc}") from exc


def copy_file(source: Path, dest: Path, transform: Callable[[str], str]) -> None:
    try:
        raw = source.read_bytes()
    except OSError as exc:
        raise ScaffoldIOError(f"Failed to read {source}: {exc}") from exc

    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError:
        # Binary asset: copy as-is.
        try:
            shutil.copyfile(source, dest)
        except OSError as exc:
            raise ScaffoldIOError(f"Failed to copy {source} -> {dest}: {exc}") from exc
        return

    try:
        dest.write_bytes(transform(text).encode("utf-8"))
    except OSError as exc:
        raise ScaffoldIOError(f"Failed to write {dest}: {exc}") from exc


def copy_tree(
    source_dir: Path,
    dest_dir: Path,
    transform: Callable[[str], str],
    *,
    on_file: FileCallback | None = None,
) -> list[Path]:
    """Mirror `source_dir` under `dest_dir`, passing every text file through `transform`.

    Returns the destination paths of all files written.
    """
    _mkdir(dest_dir)
    try:
        entries = list(os.scandir(source_dir))
    except OSError as exc:
        raise ScaffoldIOError(f"Failed to list {source_dir}: {exc}") from exc

    written: list[Path] = []
    for entry in entries:
        src_path = Path(entry.path)
        dest_path = dest_dir / entry.name
        if entry.is_dir():
            written.extend(copy_tree(src_path, dest_path, transform, on_file=on_file))
            continue
        if not entry.is_file():
            continue
        if on_file is not None:
            on_file(src_path, dest_path)
        copy_file(src_path, dest_path, transform)
        written.append(dest_path)
    return written
