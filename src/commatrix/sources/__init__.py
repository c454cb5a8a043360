"""Producers of flow records."""

from .custom import load_custom_entries, load_matrix_file
from .static import get_static_entries

__all__ = ["load_custom_entries", "load_matrix_file", "get_static_entries"]
