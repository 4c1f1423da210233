"""
Core utility functions
"""
import hashlib
from pathlib import Path
from typing import Union

from .constants import HASH_CHUNK_SIZE


# ============================================================
# Path Resolution Utilities
# ============================================================

def resolve_local_path(path: Union[str, Path]) -> Path:
    """Resolve local path, expand ~ and other symbols"""
    return Path(path).expanduser()


# ============================================================
# Content Fingerprints
# ============================================================

def file_fingerprint(path: Path) -> str:
    """
    Compute SHA256 digest of file content.
    
    Reads in chunks so large assets are never loaded whole.
    
    Args:
        path: File to hash
    
    Returns:
        64-character lowercase hex digest
    """
    hasher = hashlib.sha256()
    with open(path, "rb") as f:
        while chunk := f.read(HASH_CHUNK_SIZE):
            hasher.update(chunk)
    return hasher.hexdigest()
