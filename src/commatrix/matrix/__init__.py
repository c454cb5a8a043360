"""Communication matrix model and algebra."""

from .models import FlowKey, FlowRecord
from .store import ComMatrix
from .roles import resolve_role, separate_by_role
from .diff import diff_entries, generate_diff

__all__ = [
    "FlowKey",
    "FlowRecord",
    "ComMatrix",
    "resolve_role",
    "separate_by_role",
    "diff_entries",
    "generate_diff",
]
