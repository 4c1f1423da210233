"""
Setup domain module
"""
from .models import SetupOptions
from .version import check_editor_version, parse_editor_version
from .service import SetupService

__all__ = [
    "SetupOptions",
    "check_editor_version",
    "parse_editor_version",
    "SetupService",
]
