"""
Setup configuration parser
"""
from pathlib import Path
from typing import Dict, Any, List, Optional, Tuple

from ...core.constants import (
    DEFAULT_BRANCH,
    DEFAULT_CATEGORIES,
    DEFAULT_CHANNEL,
    DEFAULT_REPO_URL,
    DEFAULT_SETTINGS_OVERRIDES,
    USER_ROOT_PLACEHOLDER,
)
from ...core.exceptions import ConfigError
from ...core.system import EditorChannel, resolve_user_config_root
from ...core.utils import resolve_local_path
from ...domain.setup import SetupOptions
from ...domain.sync import SyncCategory, SyncSelection


def parse_channel(cfg: Dict[str, Any]) -> str:
    """Validate the editor channel"""
    raw = str(cfg.get("channel", DEFAULT_CHANNEL)).lower()
    try:
        return EditorChannel(raw).value
    except ValueError as e:
        choices = ", ".join(c.value for c in EditorChannel)
        raise ConfigError(f"Invalid channel '{raw}', expected one of: {choices}") from e


def resolve_destination(destination: str, user_root: Path) -> Path:
    """
    Resolve a category destination.
    
    A leading {user} is replaced by the editor user root, ~ is expanded.
    """
    if destination.startswith(USER_ROOT_PLACEHOLDER):
        rest = destination[len(USER_ROOT_PLACEHOLDER):].lstrip("/\\")
        return user_root / rest if rest else user_root
    return resolve_local_path(destination)


def _string_list(item: Dict[str, Any], key: str, name: str) -> List[str]:
    value = item.get(key, [])
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"Category '{name}': '{key}' must be a list of strings")
    return list(value)


def parse_category_configs(cfg: Dict[str, Any], user_root: Path) -> List[SyncCategory]:
    """Parse [[category]] items, falling back to the default categories"""
    items = cfg.get("category", DEFAULT_CATEGORIES)
    categories = []
    
    for item in items:
        name = item.get("name")
        if not name:
            raise ConfigError("Every category needs a 'name'")
        if "destination" not in item:
            raise ConfigError(f"Category '{name}' needs a 'destination'")
        
        files = _string_list(item, "files", name)
        folders = _string_list(item, "folders", name)
        if files and folders:
            raise ConfigError(f"Category '{name}' sets both 'files' and 'folders'")
        
        categories.append(
            SyncCategory(
                name=name,
                source=item.get("source", name),
                destination=resolve_destination(item["destination"], user_root),
                selection=SyncSelection(files=files, folders=folders),
            )
        )
    
    return categories


def parse_settings_overrides(cfg: Dict[str, Any]) -> List[Tuple[str, Any]]:
    """
    Build the ordered override table.
    
    [settings] entries replace matching defaults in place and append new
    keys after them. replace_default_settings = true drops the defaults.
    """
    table = cfg.get("settings", {})
    if not isinstance(table, dict):
        raise ConfigError("'settings' must be a table")
    
    if cfg.get("replace_default_settings", False):
        return list(table.items())
    
    overrides = dict(DEFAULT_SETTINGS_OVERRIDES)
    overrides.update(table)
    return list(overrides.items())


def parse_setup_options(cfg: Dict[str, Any], user_root: Optional[Path] = None) -> SetupOptions:
    """
    Turn a merged configuration dictionary into SetupOptions.
    
    Args:
        cfg: Merged configuration (TOML + CLI + env)
        user_root: Editor user root, resolved from the channel when omitted
    
    Returns:
        SetupOptions ready for SetupService.run
    
    Raises:
        ConfigError: If any value is invalid
    """
    channel = parse_channel(cfg)
    if user_root is None:
        user_root = resolve_user_config_root(channel)
    
    settings_path = cfg.get("settings_path")
    
    return SetupOptions(
        repo_url=str(cfg.get("repo", DEFAULT_REPO_URL)),
        branch=str(cfg.get("branch", DEFAULT_BRANCH)),
        channel=channel,
        categories=parse_category_configs(cfg, user_root),
        overrides=parse_settings_overrides(cfg),
        settings_path=resolve_local_path(settings_path) if settings_path else None,
        keep_temp=bool(cfg.get("keep_temp", False)),
        dry_run=bool(cfg.get("dry_run", False)),
        skip_settings=bool(cfg.get("skip_settings", False)),
    )
