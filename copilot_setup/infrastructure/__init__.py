"""
Infrastructure layer
"""
from .workspace import TempWorkspace

__all__ = ["TempWorkspace"]
