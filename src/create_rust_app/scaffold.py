"""
Create a new Rust app in a workspace from the app template.

Every precondition (template present, target absent, manifest registrable) is checked before the first write. After
that nothing is rolled back: if the copy fails partway, delete the partial app directory and rerun.
"""

from __future__ import annotations

import dataclasses
from pathlib import Path

from create_rust_app.config import ScaffoldConfig
from create_rust_app.copier import FileCallback, copy_tree
from create_rust_app.errors import ConfigurationError, ConflictError
from create_rust_app.manifest import find_members_marker, has_member, read_manifest, register_member
from create_rust_app.naming import validate_app_name
from create_rust_app.placeholder import make_transform


@dataclasses.dataclass(frozen=True)
class ScaffoldPaths:
    template_dir: Path
    target_dir: Path
    manifest: Path
    member_path: str


@dataclasses.dataclass(frozen=True)
class ScaffoldResult:
    app_name: str
    target_dir: Path
    member_path: str
    files: list[Path]
    manifest_updated: bool


def resolve_paths(root: Path, app_name: str, config: ScaffoldConfig) -> ScaffoldPaths:
    member = (Path(config.apps_dir) / app_name).as_posix()
    return ScaffoldPaths(
        template_dir=root / config.template_dir,
        target_dir=root / config.apps_dir / app_name,
        manifest=root / config.manifest,
        member_path=member,
    )


def _check_preconditions(paths: ScaffoldPaths, app_name: str) -> None:
    if not paths.template_dir.is_dir():
        raise ConfigurationError(
            f"Template directory not found: {paths.template_dir}",
            hint="Make sure the rust app template exists (see template_dir in tools/create_rust_app.toml).",
        )

    if paths.target_dir.exists():
        raise ConflictError(f"App {app_name} already exists at {paths.target_dir}")

    if not paths.manifest.is_file():
        raise ConfigurationError(f"Workspace manifest not found: {paths.manifest}")

    text = read_manifest(paths.manifest)
    if not has_member(text, paths.member_path) and find_members_marker(text.splitlines()) is None:
        raise ConfigurationError(
            f"Workspace manifest {paths.manifest} has no `members = [` list.",
            hint="Add a multi-line `members = [` array under [workspace].",
        )


def create_app(
    raw_name: str | None,
    *,
    root: Path,
    config: ScaffoldConfig | None = None,
    on_file: FileCallback | None = None,
) -> ScaffoldResult:
    if config is None:
        config = ScaffoldConfig()

    app_name = validate_app_name(raw_name, max_length=config.max_name_length)
    paths = resolve_paths(root, app_name, config)
    _check_preconditions(paths, app_name)

    files = copy_tree(
        paths.template_dir,
        paths.target_dir,
        make_transform(config.placeholder, app_name),
        on_file=on_file,
    )
    updated = register_member(paths.manifest, paths.member_path)

    return ScaffoldResult(
        app_name=app_name,
        target_dir=paths.target_dir,
        member_path=paths.member_path,
        files=files,
        manifest_updated=updated,
    )
