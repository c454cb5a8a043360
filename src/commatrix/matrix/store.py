"""
Communication matrix store.

Holds an ordered list of flow records and implements the matrix algebra:
identity-based deduplication, deterministic ordering, combination and
set difference. Operations return new matrices; only ``normalize()``
replaces the record list of an existing instance.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator

from .models import FlowKey, FlowRecord

logger = logging.getLogger(__name__)


class ComMatrix:
    """An ordered collection of flow records."""

    def __init__(self, records: Iterable[FlowRecord] | None = None):
        self.records: list[FlowRecord] = list(records or [])

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[FlowRecord]:
        return iter(self.records)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ComMatrix):
            return NotImplemented
        return self.records == other.records

    def __repr__(self) -> str:
        return f"ComMatrix({len(self.records)} records)"

    def __str__(self) -> str:
        return "".join(f"{r}\n" for r in self.records)

    def add(self, records: Iterable[FlowRecord]) -> None:
        self.records = self.records + list(records)

    def keys(self) -> set[FlowKey]:
        return {r.key for r in self.records}

    def contains(self, record: FlowRecord) -> bool:
        """Identity membership test."""
        for r in self.records:
            if r.same_flow(record):
                return True
        return False

    def deduped(self) -> ComMatrix:
        """Keep the first record seen for every identity."""
        seen: set[FlowKey] = set()
        res = []
        for r in self.records:
            if r.key not in seen:
                seen.add(r.key)
                res.append(r)
        if len(res) != len(self.records):
            logger.debug("dropped %d duplicate records", len(self.records) - len(res))
        return ComMatrix(res)

    def sorted(self) -> ComMatrix:
        """Stable sort by (node role, protocol, port)."""
        return ComMatrix(sorted(self.records, key=lambda r: r.sort_key))

    def normalized(self) -> ComMatrix:
        return self.deduped().sorted()

    def normalize(self) -> None:
        """Replace this matrix's records with their normalized form."""
        self.records = self.normalized().records

    def combine(self, other: ComMatrix) -> ComMatrix:
        """
        Sorted union of two matrices without identity duplicates.

        Records of ``self`` come first, so on a shared identity the
        record of ``self`` is the one kept.
        """
        return ComMatrix(self.records + other.records).normalized()

    def difference(self, other: ComMatrix) -> ComMatrix:
        """Records of this matrix whose identity is absent from ``other``."""
        other_keys = other.keys()
        return ComMatrix([r for r in self.records if r.key not in other_keys])

    def to_dicts(self) -> list[dict[str, Any]]:
        return [r.to_dict() for r in self.records]

    @classmethod
    def from_dicts(cls, items: Iterable[Any], source: str = "<input>") -> ComMatrix:
        return cls(FlowRecord.from_dict(item, source) for item in items)
