from __future__ import annotations

from pathlib import Path

import pytest

WORKSPACE_MANIFEST = """\
[workspace]
resolver = "2"
members = [
\t'apps/user_services',
]

[workspace.dependencies]
serde = { version = "1", features = ["derive"] }
"""

TEMPLATE_FILES: dict[str, str] = {
    "Cargo.toml": '[package]\nname = "rust_app_template"\nversion = "0.1.0"\n',
    "project.json": '{\n  "name": "rust_app_template",\n  "sourceRoot": "apps/rust_app_template"\n}\n',
    "cmd/server/main.rs": "use rust_app_template::common::config::Config;\n\nfn main() {}\n",
    "cmd/seeder/main.rs": "fn main() {\n    println!(\"seeding\");\n}\n",
    "common/utils/error.rs": "pub enum AppError {\n    Internal,\n}\n",
    "healthcheck_modules/handler.rs": 'pub const SERVICE: &str = "rust_app_template";\n',
}


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(text.encode("utf-8"))


@pytest.fixture()
def workspace(tmp_path: Path) -> Path:
    """A minimal Cargo/Nx workspace with the app template and a root manifest."""
    root = tmp_path / "workspace"
    for rel, text in TEMPLATE_FILES.items():
        _write(root / "tools" / "rust_app_template" / rel, text)
    _write(root / "Cargo.toml", WORKSPACE_MANIFEST)
    (root / "apps" / "user_services").mkdir(parents=True)
    return root
