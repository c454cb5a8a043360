"""
Annotated diff between two communication matrices.

Every flow of the combined matrix is classified by identity: present only
in the first matrix (+), only in the second (-), or in both (unmarked).
"""

from __future__ import annotations

from dataclasses import dataclass

from .models import FlowRecord, csv_header
from .store import ComMatrix

ADDED = "+"
REMOVED = "-"
UNCHANGED = ""

# Ports opened by rpc.statd are assigned at random on every boot.
NOISY_SERVICES = frozenset({"rpc.statd"})


@dataclass(frozen=True)
class DiffEntry:
    mark: str
    record: FlowRecord

    def __str__(self) -> str:
        if self.mark:
            return f"{self.mark} {self.record}"
        return str(self.record)


def diff_entries(a: ComMatrix, b: ComMatrix) -> list[DiffEntry]:
    """
    Classify every flow of the normalized combination of ``a`` and ``b``.

    Inputs need not be normalized; each identity yields at most one entry,
    in (node role, protocol, port) order.
    """
    a_keys = a.keys()
    b_keys = b.keys()
    entries = []
    for r in a.combine(b):
        in_a = r.key in a_keys
        in_b = r.key in b_keys
        if in_a and in_b:
            entries.append(DiffEntry(UNCHANGED, r))
        elif in_a:
            entries.append(DiffEntry(ADDED, r))
        elif r.service not in NOISY_SERVICES:
            entries.append(DiffEntry(REMOVED, r))
    return entries


def generate_diff(a: ComMatrix, b: ComMatrix) -> str:
    """
    Render the diff of ``a`` against ``b`` as annotated CSV lines.

    The header is followed by one line per flow of the normalized
    combination, prefixed with "+ ", "- " or nothing.
    """
    lines = [csv_header()]
    lines.extend(str(e) for e in diff_entries(a, b))
    return "".join(f"{line}\n" for line in lines)
