"""Writes exported matrices to files."""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import Deployment, parse_deployment
from ..errors import OutputError
from ..matrix.roles import separate_by_role
from ..matrix.store import ComMatrix
from .formats import ExportFormat, export_matrix, parse_format

logger = logging.getLogger(__name__)


def render_files(
    matrix: ComMatrix,
    prefix: str,
    fmt: str | ExportFormat,
    deployment: str | Deployment,
) -> dict[str, bytes]:
    """
    Render the output files for one format as {file name: payload}.

    The nft format is rendered once per node role: a master file always,
    a worker file for multi-node deployments.
    """
    fmt = parse_format(fmt)
    deployment = parse_deployment(deployment)

    if fmt != ExportFormat.NFT:
        return {f"{prefix}.{fmt.value}": export_matrix(matrix, fmt)}

    master, worker = separate_by_role(matrix)
    files = {f"{prefix}-master.{fmt.value}": export_matrix(master, fmt)}
    if deployment == Deployment.MNO:
        files[f"{prefix}-worker.{fmt.value}"] = export_matrix(worker, fmt)
    return files


def write_matrix_files(
    matrix: ComMatrix,
    prefix: str,
    fmt: str | ExportFormat,
    deployment: str | Deployment,
    dest_dir: str | Path = ".",
) -> list[Path]:
    """Export ``matrix`` and write the resulting files under ``dest_dir``."""
    return write_files(render_files(matrix, prefix, fmt, deployment), dest_dir)


def write_files(files: dict[str, bytes], dest_dir: str | Path = ".") -> list[Path]:
    dest = Path(dest_dir)
    try:
        dest.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputError(dest, e.strerror or str(e)) from e
    written = []
    for name, payload in files.items():
        path = dest / name
        try:
            path.write_bytes(payload)
        except OSError as e:
            raise OutputError(path, e.strerror or str(e)) from e
        logger.info("wrote %s (%d bytes)", path, len(payload))
        written.append(path)
    return written
