"""Ward table handling."""

from .table import ColumnKind, WardTable

__all__ = ["ColumnKind", "WardTable"]
