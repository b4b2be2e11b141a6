"""Layout snapshots loaded from YAML definitions."""

from .loader import LayoutDefinitionError, LayoutLoader, LoadedLayout

__all__ = ["LayoutDefinitionError", "LayoutLoader", "LoadedLayout"]
