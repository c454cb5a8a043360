"""
Report configuration.

Environment and deployment selection plus output settings, loadable from
a YAML file and overridable from the command line.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import yaml

from .errors import ConfigurationError, ValidationError
from .export.formats import ExportFormat, parse_format


class Environment(str, Enum):
    BAREMETAL = "baremetal"
    CLOUD = "cloud"


class Deployment(str, Enum):
    SNO = "sno"  # single node
    MNO = "mno"  # multi node


ENVIRONMENT_ALIASES = {"aws": Environment.CLOUD}
DEPLOYMENT_ALIASES = {"single-node": Deployment.SNO, "multi-node": Deployment.MNO}


def parse_environment(value: str | Environment) -> Environment:
    if isinstance(value, Environment):
        return value
    if value in ENVIRONMENT_ALIASES:
        return ENVIRONMENT_ALIASES[value]
    try:
        return Environment(value)
    except ValueError:
        raise ValidationError(
            "cluster environment", value,
            [e.value for e in Environment] + list(ENVIRONMENT_ALIASES),
        ) from None


def parse_deployment(value: str | Deployment) -> Deployment:
    if isinstance(value, Deployment):
        return value
    if value in DEPLOYMENT_ALIASES:
        return DEPLOYMENT_ALIASES[value]
    try:
        return Deployment(value)
    except ValueError:
        raise ValidationError(
            "deployment type", value,
            [d.value for d in Deployment] + list(DEPLOYMENT_ALIASES),
        ) from None


@dataclass
class ReportConfig:
    """Settings for one matrix report."""
    environment: Environment = Environment.BAREMETAL
    deployment: Deployment = Deployment.MNO
    formats: list[ExportFormat] = field(default_factory=lambda: [ExportFormat.CSV])
    destination: str = "."
    prefix: str = "communication-matrix"
    custom_entries: str | None = None
    observed_entries: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "environment": self.environment.value,
            "deployment": self.deployment.value,
            "formats": [f.value for f in self.formats],
            "destination": self.destination,
            "prefix": self.prefix,
            "custom_entries": self.custom_entries,
            "observed_entries": self.observed_entries,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any], source: str = "<config>") -> ReportConfig:
        if not isinstance(data, dict):
            raise ConfigurationError(source, f"expected a mapping, got {type(data).__name__}")
        formats = data.get("formats") or ["csv"]
        if isinstance(formats, str):
            formats = [formats]
        if not isinstance(formats, list):
            raise ConfigurationError(source, "'formats' must be a list of format names")
        return cls(
            environment=parse_environment(data.get("environment", "baremetal")),
            deployment=parse_deployment(data.get("deployment", "mno")),
            formats=[parse_format(f) for f in formats],
            destination=data.get("destination") or ".",
            prefix=data.get("prefix") or "communication-matrix",
            custom_entries=data.get("custom_entries"),
            observed_entries=data.get("observed_entries"),
        )

    @classmethod
    def load_yaml(cls, yaml_str: str, source: str = "<config>") -> ReportConfig:
        try:
            data = yaml.safe_load(yaml_str)
        except yaml.YAMLError as e:
            raise ConfigurationError(source, f"invalid YAML: {e}") from e
        return cls.from_dict(data or {}, source)

    def merge(self, **overrides: Any) -> ReportConfig:
        """Return a copy with every non-empty override applied."""
        data = self.to_dict()
        data.update({k: v for k, v in overrides.items() if v not in (None, (), [])})
        return ReportConfig.from_dict(data)
