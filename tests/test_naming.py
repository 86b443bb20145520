from __future__ import annotations

import pytest

from create_rust_app.errors import ValidationError
from create_rust_app.naming import suggest_app_name, validate_app_name


@pytest.mark.parametrize(
    "name",
    ["a", "my_app", "MyApp", "user_services", "app2", "A_1_b_2", "x" * 50, "a__"],
)
def test_validate_app_name_accepts_conforming_names(name: str) -> None:
    assert validate_app_name(name) == name


@pytest.mark.parametrize("name", [None, ""])
def test_validate_app_name_rejects_missing_name(name: str | None) -> None:
    with pytest.raises(ValidationError, match="provide an app name"):
        validate_app_name(name)


@pytest.mark.parametrize(
    ("name", "suggestion"),
    [
        ("my-app", "my_app"),
        ("a-b-c", "a_b_c"),
        ("trailing-", "trailing_"),
        ("--x", "__x"),
    ],
)
def test_validate_app_name_rejects_hyphen_with_underscore_suggestion(name: str, suggestion: str) -> None:
    with pytest.raises(ValidationError, match="Hyphens are not allowed") as excinfo:
        validate_app_name(name)
    assert excinfo.value.suggestion == suggestion
    assert excinfo.value.hint == suggestion


@pytest.mark.parametrize(
    "name",
    ["1app", "_app", "$app", "my app", "my.app", "app!", "appé", "app\n", " app"],
)
def test_validate_app_name_rejects_pattern_violations(name: str) -> None:
    with pytest.raises(ValidationError, match="must start with a letter") as excinfo:
        validate_app_name(name)
    assert excinfo.value.suggestion is None


def test_validate_app_name_rejects_names_over_limit() -> None:
    with pytest.raises(ValidationError, match="50 characters or less"):
        validate_app_name("x" * 51)


def test_validate_app_name_honors_custom_limit() -> None:
    assert validate_app_name("abcd", max_length=4) == "abcd"
    with pytest.raises(ValidationError, match="4 characters or less"):
        validate_app_name("abcde", max_length=4)


def test_suggest_app_name_replaces_every_hyphen() -> None:
    assert suggest_app_name("a-b--c") == "a_b__c"
    assert suggest_app_name("plain") == "plain"
