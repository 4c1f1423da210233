"""
copilot-setup - editor agent asset installer

Fetches a remote asset repository and prepares the local editor:
- Change-detecting file sync of agents, prompts, instructions and skills
- Non-destructive merge of settings overrides into the user settings.json
- Editor version gate and platform-aware user directory lookup
"""

__version__ = "0.1.0"

# Export core components
from .core import (
    RunContext,
    EditorChannel,
    resolve_user_config_root,
    resolve_settings_path,
)

# Export domain models
from .domain.sync import (
    SyncSelection,
    SyncCategory,
    SyncReport,
    sync_directory,
)

from .domain.settings import (
    load_settings,
    apply_overrides,
    save_settings,
    merge_settings,
)

from .domain.setup import (
    SetupOptions,
    SetupService,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "RunContext",
    "EditorChannel",
    "resolve_user_config_root",
    "resolve_settings_path",
    # File sync
    "SyncSelection",
    "SyncCategory",
    "SyncReport",
    "sync_directory",
    # Settings merge
    "load_settings",
    "apply_overrides",
    "save_settings",
    "merge_settings",
    # Setup
    "SetupOptions",
    "SetupService",
]
