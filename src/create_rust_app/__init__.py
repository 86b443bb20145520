from create_rust_app.config import ScaffoldConfig, load_config
from create_rust_app.copier import copy_tree
from create_rust_app.errors import (
    ConfigurationError,
    ConflictError,
    ScaffoldError,
    ScaffoldIOError,
    ValidationError,
)
from create_rust_app.manifest import insert_member, register_member
from create_rust_app.naming import suggest_app_name, validate_app_name
from create_rust_app.placeholder import make_transform, replace_placeholder
from create_rust_app.scaffold import ScaffoldResult, create_app

__all__ = [
    "ConfigurationError",
    "ConflictError",
    "ScaffoldConfig",
    "ScaffoldError",
    "ScaffoldIOError",
    "ScaffoldResult",
    "ValidationError",
    "copy_tree",
    "create_app",
    "insert_member",
    "load_config",
    "make_transform",
    "register_member",
    "replace_placeholder",
    "suggest_app_name",
    "validate_app_name",
]
