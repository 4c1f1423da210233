"""
Settings domain module
"""
from .models import SettingsDocument, SettingsOverrides, normalize_overrides
from .merger import load_settings, apply_overrides, save_settings, merge_settings

__all__ = [
    "SettingsDocument",
    "SettingsOverrides",
    "normalize_overrides",
    "load_settings",
    "apply_overrides",
    "save_settings",
    "merge_settings",
]
