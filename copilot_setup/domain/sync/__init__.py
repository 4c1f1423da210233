"""
Sync domain module
"""
from .models import SyncSelection, SyncCategory, SyncReport
from .file_sync import copy_if_changed, needs_copy, sync_directory, sync_tree

__all__ = [
    "SyncSelection",
    "SyncCategory",
    "SyncReport",
    "copy_if_changed",
    "needs_copy",
    "sync_directory",
    "sync_tree",
]
