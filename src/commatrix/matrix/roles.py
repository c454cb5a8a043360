"""Node role resolution and per-role matrix partitioning."""

from __future__ import annotations

from typing import Mapping

from ..errors import RoleNotFoundError
from .models import MASTER, WORKER
from .store import ComMatrix

ROLE_LABEL_PREFIX = "node-role.kubernetes.io/"


def resolve_role(
    labels: Mapping[str, str], prefix: str = ROLE_LABEL_PREFIX, name: str = ""
) -> str:
    """
    Determine a node's role from its labels.

    master and control-plane labels map to "master", the worker label to
    "worker". Otherwise the suffix of the first label carrying ``prefix``
    is returned, following the iteration order of ``labels``.
    """
    if prefix + "master" in labels:
        return MASTER
    if prefix + "control-plane" in labels:
        return MASTER
    if prefix + "worker" in labels:
        return WORKER

    # TODO: pick a deterministic label when a node carries several custom roles
    for label in labels:
        if label.startswith(prefix):
            return label[len(prefix):]

    raise RoleNotFoundError(name)


def separate_by_role(matrix: ComMatrix) -> tuple[ComMatrix, ComMatrix]:
    """
    Split a matrix into its master and worker records.

    Records with any other role are left out of both.
    """
    master, worker = [], []
    for r in matrix:
        if r.node_role == MASTER:
            master.append(r)
        elif r.node_role == WORKER:
            worker.append(r)
    return ComMatrix(master), ComMatrix(worker)
