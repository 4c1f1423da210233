"""
Core infrastructure layer
"""
from .constants import *
from .exceptions import *
from .context import RunContext
from .logging import setup_logging, get_logger, get_stdout_console, get_stderr_console
from .interfaces import RemoteFetcher, VersionProbe
from .system import EditorChannel, resolve_user_config_root, resolve_settings_path
from .utils import resolve_local_path, file_fingerprint

__all__ = [
    "RunContext",
    "setup_logging",
    "get_logger",
    "get_stdout_console",
    "get_stderr_console",
    "RemoteFetcher",
    "VersionProbe",
    "EditorChannel",
    "resolve_user_config_root",
    "resolve_settings_path",
    "resolve_local_path",
    "file_fingerprint",
]
