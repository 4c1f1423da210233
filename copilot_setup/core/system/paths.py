"""
Per-platform editor configuration paths
"""
import os
import platform
from enum import Enum
from pathlib import Path
from typing import Mapping, Optional, Union

from ..constants import EDITOR_PRODUCT_DIRS, SETTINGS_FILE_NAME
from ..exceptions import ConfigError


class EditorChannel(str, Enum):
    """Editor release channel"""
    STABLE = "stable"
    INSIDERS = "insiders"


def _channel_value(channel: Union[str, EditorChannel]) -> str:
    value = channel.value if isinstance(channel, EditorChannel) else str(channel).lower()
    if value not in EDITOR_PRODUCT_DIRS:
        raise ConfigError(
            f"Unknown editor channel: {channel} (expected one of: {', '.join(EDITOR_PRODUCT_DIRS)})"
        )
    return value


def resolve_user_config_root(
    channel: Union[str, EditorChannel],
    system: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
    home: Optional[Path] = None,
) -> Path:
    """
    Resolve the editor's per-user configuration directory.
    
    Rules:
    - Windows: %APPDATA%/<product>/User
    - macOS: ~/Library/Application Support/<product>/User
    - Linux and others: $XDG_CONFIG_HOME (default ~/.config)/<product>/User
    
    Args:
        channel: Editor channel (stable or insiders)
        system: platform.system() value, detected when omitted
        environ: Environment mapping, os.environ when omitted
        home: Home directory, Path.home() when omitted
    
    Returns:
        Path of the editor "User" directory
    
    Raises:
        ConfigError: If channel is unknown
    """
    product = EDITOR_PRODUCT_DIRS[_channel_value(channel)]
    system = (system or platform.system()).lower()
    environ = os.environ if environ is None else environ
    home = home or Path.home()

    if system == "windows":
        appdata = environ.get("APPDATA")
        base = Path(appdata) if appdata else home / "AppData" / "Roaming"
    elif system == "darwin":
        base = home / "Library" / "Application Support"
    else:
        xdg = environ.get("XDG_CONFIG_HOME")
        base = Path(xdg) if xdg else home / ".config"

    return base / product / "User"


def resolve_settings_path(
    channel: Union[str, EditorChannel],
    system: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
    home: Optional[Path] = None,
) -> Path:
    """Path of the editor's user settings.json"""
    return resolve_user_config_root(channel, system, environ, home) / SETTINGS_FILE_NAME
