from __future__ import annotations

from collections.abc import Callable

DEFAULT_PLACEHOLDER = "rust_app_template"


def replace_placeholder(text: str, token: str, app_name: str) -> str:
    if not token:
        return text
    return text.replace(token, app_name)


def make_transform(token: str, app_name: str) -> Callable[[str], str]:
    def _transform(text: str) -> str:
        return replace_placeholder(text, token, app_name)

    return _transform
