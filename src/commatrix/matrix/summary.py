"""Port-count summary of a communication matrix."""

from __future__ import annotations

import numpy as np

from .store import ComMatrix


def port_count_matrix(matrix: ComMatrix) -> tuple[list[str], list[str], np.ndarray]:
    """Build a role x protocol matrix of flow counts."""
    roles = sorted({r.node_role for r in matrix})
    protocols = sorted({r.protocol for r in matrix})
    role_idx = {role: i for i, role in enumerate(roles)}
    proto_idx = {proto: j for j, proto in enumerate(protocols)}

    counts = np.zeros((len(roles), len(protocols)), dtype=np.int64)
    for r in matrix:
        counts[role_idx[r.node_role]][proto_idx[r.protocol]] += 1

    return roles, protocols, counts
