"""Matrix exporters."""

from .formats import ExportFormat, export_matrix, parse_format

__all__ = ["ExportFormat", "export_matrix", "parse_format"]
