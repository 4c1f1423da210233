"""
Core interfaces for dependency injection
"""
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional


class RemoteFetcher(ABC):
    """Remote asset source interface"""
    
    @abstractmethod
    def ensure_available(self) -> None:
        """Raise ToolNotFoundError if the fetch tool cannot run"""
        pass
    
    @abstractmethod
    def fetch(self, url: str, ref: str, destination: Path) -> None:
        """Produce a shallow local copy of url at ref in destination"""
        pass


class VersionProbe(ABC):
    """Installed editor version lookup interface"""
    
    @abstractmethod
    def probe(self, channel: str) -> Optional[str]:
        """Return the installed version for channel, or None if unavailable"""
        pass
