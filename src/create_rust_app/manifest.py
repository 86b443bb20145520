"""
Workspace manifest registration.

The manifest (a Cargo workspace `Cargo.toml`) is never parsed as TOML. It is handled as an ordered list of lines: the
`members = [` marker is located by pattern and the new entry is spliced in right after it, so comments, ordering and
formatting elsewhere in the file are left exactly as they were.
"""

from __future__ import annotations

import re
from pathlib import Path

from create_rust_app.errors import ConfigurationError, ScaffoldIOError

MEMBERS_MARKER_RE = re.compile(r"^\s*members\s*=\s*\[\s*$")


def member_line(member_path: str, *, indent: str = "\t") -> str:
    return f"{indent}'{member_path}',"


def find_members_marker(lines: list[str]) -> int | None:
    for idx, line in enumerate(lines):
        if MEMBERS_MARKER_RE.match(line.rstrip("\r\n")):
            return idx
    return None


def _member_entry_re(member_path: str) -> re.Pattern[str]:
    quoted = re.escape(member_path)
    return re.compile(rf"""^\s*(['"]){quoted}\1\s*,?\s*$""")


def has_member(text: str, member_path: str) -> bool:
    entry_re = _member_entry_re(member_path)
    return any(entry_re.match(line) for line in text.splitlines())


def _line_ending(line: str) -> str:
    if line.endswith("\r\n"):
        return "\r\n"
    if line.endswith("\n"):
        return "\n"
    if line.endswith("\r"):
        return "\r"
    return ""


def insert_member(text: str, member_path: str) -> str:
    """Return `text` with an entry for `member_path` after the members marker (unchanged if already listed)."""
    if has_member(text, member_path):
        return text

    lines = text.splitlines(keepends=True)
    marker_idx = find_members_marker(lines)
    if marker_idx is None:
        raise ConfigurationError(
            "Workspace manifest has no `members = [` list to register the app in.",
            hint="Add a multi-line `members = [` array under [workspace].",
        )

    marker = lines[marker_idx]
    newline = _line_ending(marker) or "\n"
    if not _line_ending(marker):
        # Marker is the last line without a trailing newline.
        lines[marker_idx] = marker + newline
    lines.insert(marker_idx + 1, member_line(member_path) + newline)
    return "".join(lines)


def read_manifest(manifest_path: Path) -> str:
    try:
        return manifest_path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ScaffoldIOError(f"Failed to read workspace manifest {manifest_path}: {exc}") from exc


def register_member(manifest_path: Path, member_path: str) -> bool:
    """Add `member_path` to the manifest's members list. Returns False when it was already registered."""
    text = read_manifest(manifest_path)
    updated = insert_member(text, member_path)
    if updated == text:
        return False
    try:
        manifest_path.write_bytes(updated.encode("utf-8"))
    except OSError as exc:
        raise ScaffoldIOError(f"Failed to write workspace manifest {manifest_path}: {exc}") from exc
    return True
