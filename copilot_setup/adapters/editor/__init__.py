from .probe import EditorVersionProbe

__all__ = ["EditorVersionProbe"]
