"""
Run context shared by every mutating operation
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class RunContext:
    """
    Immutable per-run settings.
    
    Attributes:
        dry_run: Compute every decision but skip directory creation,
            file copies and document writes
    """
    dry_run: bool = False

    @property
    def mode_label(self) -> str:
        return "dry-run" if self.dry_run else "apply"
