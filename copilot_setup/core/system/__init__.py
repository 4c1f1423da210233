"""
Platform lookups
"""
from .paths import (
    EditorChannel,
    resolve_user_config_root,
    resolve_settings_path,
)

__all__ = [
    "EditorChannel",
    "resolve_user_config_root",
    "resolve_settings_path",
]
