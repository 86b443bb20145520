from __future__ import annotations

import re

from create_rust_app.errors import ValidationError

APP_NAME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9_]*$")
DEFAULT_MAX_NAME_LENGTH = 50


def suggest_app_name(raw: str) -> str:
    return raw.replace("-", "_")


def validate_app_name(raw: str | None, *, max_length: int = DEFAULT_MAX_NAME_LENGTH) -> str:
    """
    Validate a requested app name and return it unchanged.

    Hyphens are reported before the general pattern check so the caller gets the underscore suggestion instead of
    the generic message.
    """
    if not raw:
        raise ValidationError("Please provide an app name: create-rust-app <app_name>")

    if "-" in raw:
        raise ValidationError(
            "Hyphens are not allowed in Rust app names. Use underscores instead.",
            suggestion=suggest_app_name(raw),
        )

    if not APP_NAME_RE.fullmatch(raw):
        raise ValidationError(
            "App name must start with a letter and contain only letters, numbers, and underscores (no hyphens)."
        )

    if len(raw) > max_length:
        raise ValidationError(f"App name must be {max_length} characters or less (got {len(raw)}).")

    return raw
