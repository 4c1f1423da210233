"""
Settings document merge: load, apply overrides, save
"""
import json
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional, Tuple, Union

from ...core.constants import SETTINGS_INDENT
from ...core.context import RunContext
from ...core.logging import get_logger
from .models import SettingsDocument, normalize_overrides

logger = get_logger(__name__)


def load_settings(path: Path) -> SettingsDocument:
    """
    Load a JSON settings document.
    
    A missing or empty file yields an empty document. A file that cannot
    be read, is not valid JSON, or whose top level is not an object is
    logged and also yields an empty document.
    
    Args:
        path: Settings file path
    
    Returns:
        Parsed document (a new dict)
    """
    if not path.exists():
        logger.debug(f"Settings file not found, starting empty: {path}")
        return {}

    try:
        text = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Failed to read settings file, its contents will be replaced on save: {path} ({e})")
        return {}

    if not text.strip():
        return {}

    try:
        document = json.loads(text)
    except ValueError as e:
        logger.warning(
            f"Settings file is not valid JSON (comments and trailing commas are not "
            f"supported), its contents will be replaced on save: {path} ({e})"
        )
        return {}

    if not isinstance(document, dict):
        logger.warning(
            f"Settings file does not hold a JSON object, its contents will be replaced on save: {path}"
        )
        return {}

    return document


def apply_overrides(
    document: SettingsDocument,
    overrides: Union[Mapping[str, Any], Iterable[Tuple[str, Any]]],
) -> SettingsDocument:
    """
    Set each override key on a copy of document.
    
    Keys not named in overrides keep their values untouched. The input
    document is not modified.
    """
    merged = dict(document)
    for key, value in normalize_overrides(overrides):
        if key in merged and merged[key] == value:
            logger.debug(f"[same] {key} = {value!r}")
        else:
            logger.debug(f"[set] {key} = {value!r}")
        merged[key] = value
    return merged


def save_settings(
    path: Path,
    document: SettingsDocument,
    context: Optional[RunContext] = None,
) -> bool:
    """
    Write the full document to path, replacing the file.
    
    Returns:
        True if the file was written, False in dry-run
    """
    context = context or RunContext()
    content = json.dumps(document, indent=SETTINGS_INDENT, ensure_ascii=False) + "\n"

    if context.dry_run:
        logger.info(f"[dry-run] would write {len(document)} settings to {path}")
        logger.debug(content)
        return False

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    logger.info(f"[write] {path}")
    return True


def merge_settings(
    path: Path,
    overrides: Union[Mapping[str, Any], Iterable[Tuple[str, Any]]],
    context: Optional[RunContext] = None,
) -> SettingsDocument:
    """Load path, apply overrides and save the result"""
    document = apply_overrides(load_settings(path), overrides)
    save_settings(path, document, context)
    return document
