"""
Unified exception definitions
"""


class SetupError(Exception):
    """Base exception class"""
    pass


class ConfigError(SetupError):
    """Configuration error"""
    pass


class PreconditionError(SetupError):
    """Environment precondition not met"""
    pass


class ToolNotFoundError(PreconditionError):
    """Required command-line tool is not installed"""
    pass


class VersionError(PreconditionError):
    """Installed editor is older than the supported minimum"""
    pass


class FetchError(SetupError):
    """Remote asset retrieval error"""
    pass


class SyncError(SetupError):
    """Sync error"""
    pass


class FileSyncError(SyncError):
    """File sync error"""
    pass
