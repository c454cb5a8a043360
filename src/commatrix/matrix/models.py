"""
Flow record data model.

A flow record describes one expected network flow towards a node role.
Records are identified by (node role, port, protocol) only; the workload
fields are carried along as metadata.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, NamedTuple

from ..errors import MalformedInputError

INGRESS = "Ingress"
EGRESS = "Egress"

TCP = "TCP"
UDP = "UDP"

MASTER = "master"
WORKER = "worker"

# Wire field name -> CSV column header, in column order.
CSV_HEADERS: dict[str, str] = {
    "direction": "Direction",
    "protocol": "Protocol",
    "port": "Port",
    "namespace": "Namespace",
    "service": "Service",
    "pod": "Pod",
    "container": "Container",
    "nodeRole": "Node Role",
    "optional": "Optional",
}

REQUIRED_FIELDS = ("direction", "protocol", "port", "nodeRole")
TEXT_FIELDS = ("direction", "protocol", "namespace", "service", "pod", "container", "nodeRole")


class FlowKey(NamedTuple):
    """Identity of a flow record."""
    node_role: str
    port: int
    protocol: str


@dataclass(frozen=True)
class FlowRecord:
    """A single expected network flow."""
    direction: str
    protocol: str
    port: int
    namespace: str = ""
    service: str = ""
    pod: str = ""
    container: str = ""
    node_role: str = ""
    optional: bool = False

    @property
    def key(self) -> FlowKey:
        return FlowKey(self.node_role, self.port, self.protocol)

    @property
    def sort_key(self) -> tuple[str, str, int]:
        return (self.node_role, self.protocol, self.port)

    def same_flow(self, other: FlowRecord) -> bool:
        return self.key == other.key

    def to_dict(self) -> dict[str, Any]:
        return {
            "direction": self.direction,
            "protocol": self.protocol,
            "port": self.port,
            "namespace": self.namespace,
            "service": self.service,
            "pod": self.pod,
            "container": self.container,
            "nodeRole": self.node_role,
            "optional": self.optional,
        }

    def to_csv_row(self) -> list[str]:
        values = self.to_dict()
        values["optional"] = "true" if self.optional else "false"
        return [str(values[name]) for name in CSV_HEADERS]

    def __str__(self) -> str:
        return ",".join(self.to_csv_row())

    @classmethod
    def from_dict(cls, data: Any, source: str = "<input>") -> FlowRecord:
        """
        Build a record from its wire representation.

        Unknown fields, missing required fields and wrongly typed values
        raise MalformedInputError naming ``source``.
        """
        if not isinstance(data, dict):
            raise MalformedInputError(source, f"expected an object, got {type(data).__name__}")

        unknown = sorted(set(data) - set(CSV_HEADERS))
        if unknown:
            raise MalformedInputError(source, f"unknown fields {unknown}")

        missing = [f for f in REQUIRED_FIELDS if f not in data]
        if missing:
            raise MalformedInputError(source, f"missing fields {missing}")

        for name in TEXT_FIELDS:
            if name in data and not isinstance(data[name], str):
                raise MalformedInputError(source, f"field {name!r} must be a string")

        port = data["port"]
        # bool is an int subclass
        if isinstance(port, bool) or not isinstance(port, int):
            raise MalformedInputError(source, "field 'port' must be an integer")

        optional = data.get("optional", False)
        if not isinstance(optional, bool):
            raise MalformedInputError(source, "field 'optional' must be a boolean")

        return cls(
            direction=data["direction"],
            protocol=data["protocol"],
            port=port,
            namespace=data.get("namespace", ""),
            service=data.get("service", ""),
            pod=data.get("pod", ""),
            container=data.get("container", ""),
            node_role=data["nodeRole"],
            optional=optional,
        )


def csv_header() -> str:
    return ",".join(CSV_HEADERS.values())
