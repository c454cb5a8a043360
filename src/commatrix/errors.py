"""Exceptions raised by commatrix."""

from __future__ import annotations

from pathlib import Path


class CommatrixError(Exception):
    """Base exception for commatrix errors."""

    def __init__(self, message: str, suggestion: str | None = None):
        self.message = message
        self.suggestion = suggestion
        super().__init__(message)


class ValidationError(CommatrixError):
    """Caller input (environment, deployment, format) was not recognized."""

    def __init__(self, kind: str, value: str, allowed: list[str]):
        self.kind = kind
        self.value = value
        message = f"invalid {kind}: {value!r}"
        suggestion = f"Please specify one of: {', '.join(allowed)}"
        super().__init__(message, suggestion)


class UnsupportedFormatError(ValidationError):
    """Export requested for a format outside the supported set."""

    def __init__(self, value: str, allowed: list[str]):
        super().__init__("format", value, allowed)


class MalformedInputError(CommatrixError):
    """An entries file could not be read or does not hold flow records."""

    def __init__(self, path: Path | str, reason: str):
        self.path = Path(path)
        message = f"failed to load entries from {self.path}: {reason}"
        suggestion = (
            "The file must be a JSON array of objects with the fields "
            "direction, protocol, port, namespace, service, pod, container, "
            "nodeRole and optional."
        )
        super().__init__(message, suggestion)


class RoleNotFoundError(CommatrixError):
    """A node or workload carries no recognizable role label."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"unable to determine role for node {name}")


class ConfigurationError(CommatrixError):
    """A report configuration file is unreadable or malformed."""

    def __init__(self, config_file: Path | str, reason: str):
        self.path = Path(config_file)
        message = f"invalid configuration in {self.path}: {reason}"
        suggestion = "Please check the configuration file format and contents."
        super().__init__(message, suggestion)


class OutputError(CommatrixError):
    """An output file or directory could not be written."""

    def __init__(self, path: Path | str, reason: str):
        self.path = Path(path)
        message = f"cannot write {self.path}: {reason}"
        suggestion = "Please check directory permissions or specify a different destination."
        super().__init__(message, suggestion)
