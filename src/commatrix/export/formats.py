"""
Matrix exporters.

Renders a normalized matrix as CSV, JSON, YAML or an nftables ruleset.
The set of formats is closed; any other tag is rejected.
"""

from __future__ import annotations

import csv
import io
import json
from enum import Enum

import yaml

from ..errors import UnsupportedFormatError
from ..matrix.models import CSV_HEADERS, TCP, UDP
from ..matrix.store import ComMatrix


class ExportFormat(str, Enum):
    CSV = "csv"
    JSON = "json"
    YAML = "yaml"
    NFT = "nft"


FORMAT_ALIASES = {"nft-firewall": ExportFormat.NFT}


def parse_format(value: str | ExportFormat) -> ExportFormat:
    if isinstance(value, ExportFormat):
        return value
    if value in FORMAT_ALIASES:
        return FORMAT_ALIASES[value]
    try:
        return ExportFormat(value)
    except ValueError:
        raise UnsupportedFormatError(
            value, [f.value for f in ExportFormat] + list(FORMAT_ALIASES)
        ) from None


NFT_TEMPLATE = """#!/usr/sbin/nft -f

table inet openshift_filter {{
    chain OPENSHIFT {{
        type filter hook input priority 1; policy accept;

        # Allow loopback traffic
        iif lo accept

        # Allow established and related traffic
        ct state established,related accept

        # Allow ICMP on ipv4
        ip protocol icmp accept
        # Allow ICMP on ipv6
        ip6 nexthdr ipv6-icmp accept

        # Allow specific TCP and UDP ports
{port_rules}
        # Logging and default drop
        log prefix "firewall " drop
    }}
}}
"""


def to_csv(matrix: ComMatrix) -> bytes:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(CSV_HEADERS.values())
    for r in matrix:
        writer.writerow(r.to_csv_row())
    return buf.getvalue().encode("utf-8")


def to_json(matrix: ComMatrix) -> bytes:
    return json.dumps(matrix.to_dicts(), indent=4).encode("utf-8")


def to_yaml(matrix: ComMatrix) -> bytes:
    data = {"matrix": matrix.to_dicts()}
    return yaml.dump(data, default_flow_style=False, sort_keys=False).encode("utf-8")


def _ports(matrix: ComMatrix, protocol: str) -> list[str]:
    ports: list[str] = []
    for r in matrix:
        if r.protocol == protocol and str(r.port) not in ports:
            ports.append(str(r.port))
    return ports


def to_nftables(matrix: ComMatrix) -> bytes:
    """
    Render an nftables input chain accepting the matrix's ports.

    Ports are grouped by protocol only; callers wanting per-role rules
    partition the matrix first.
    """
    rules = []
    for proto, keyword in ((TCP, "tcp"), (UDP, "udp")):
        ports = _ports(matrix, proto)
        # nft rejects an empty set
        if ports:
            rules.append(f"        {keyword} dport {{ {', '.join(ports)} }} accept\n")
    return NFT_TEMPLATE.format(port_rules="".join(rules)).encode("utf-8")


EXPORTERS = {
    ExportFormat.CSV: to_csv,
    ExportFormat.JSON: to_json,
    ExportFormat.YAML: to_yaml,
    ExportFormat.NFT: to_nftables,
}


def export_matrix(matrix: ComMatrix, fmt: str | ExportFormat) -> bytes:
    return EXPORTERS[parse_format(fmt)](matrix)
