from __future__ import annotations

import argparse
import sys
from pathlib import Path

from create_rust_app.config import load_config
from create_rust_app.errors import ScaffoldError
from create_rust_app.scaffold import ScaffoldResult, create_app


def _eprint(*args: object) -> None:
    print(*args, file=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="create-rust-app",
        description="Create a new Rust app in the workspace from tools/rust_app_template.",
    )
    parser.add_argument("app_name", nargs="?", help="Name of the new app (letters, digits, underscores).")
    parser.add_argument(
        "--root",
        type=Path,
        default=None,
        help="Workspace root containing the template, apps/ and Cargo.toml (default: current directory).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="TOML file with a [create_rust_app] table (default: tools/create_rust_app.toml when present).",
    )
    parser.add_argument("--verbose", action="store_true", help="Print each copied file to stderr.")
    return parser


def _print_summary(result: ScaffoldResult) -> None:
    name = result.app_name
    print(f"Created Rust app: {name}")
    print(f"Location: {result.member_path}")
    if not result.manifest_updated:
        print(f"Workspace manifest already lists {result.member_path}; left unchanged.")
    print(f"To build: nx build {name}")
    print(f"To test: nx test {name}")
    print(f"To run: nx run {name}")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    # A name starting with "-" (e.g. "-app") is left over as an unknown option; hand it to the validator.
    args, extra = parser.parse_known_args(argv)
    if extra:
        if args.app_name is not None or len(extra) != 1:
            parser.error(f"unrecognized arguments: {' '.join(extra)}")
        args.app_name = extra[0]
    root = args.root if args.root is not None else Path.cwd()

    def _on_file(src: Path, dst: Path) -> None:
        _eprint(f"+ {src} -> {dst}")

    try:
        config = load_config(root, args.config)
        result = create_app(args.app_name, root=root, config=config, on_file=_on_file if args.verbose else None)
    except ScaffoldError as exc:
        _eprint(f"ERROR: {exc}")
        if exc.hint:
            _eprint(f"Try: {exc.hint}")
        return 1

    _print_summary(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
