"""Tests for report configuration."""

import pytest

from commatrix.config import (
    Deployment,
    Environment,
    ReportConfig,
    parse_deployment,
    parse_environment,
)
from commatrix.errors import ConfigurationError, UnsupportedFormatError, ValidationError
from commatrix.export.formats import ExportFormat


class TestParsing:
    def test_environment(self):
        assert parse_environment("baremetal") == Environment.BAREMETAL
        assert parse_environment("aws") == Environment.CLOUD

    def test_deployment(self):
        assert parse_deployment("sno") == Deployment.SNO
        assert parse_deployment("multi-node") == Deployment.MNO

    def test_invalid_environment_suggestion(self):
        with pytest.raises(ValidationError) as exc:
            parse_environment("gcp")
        assert "baremetal" in exc.value.suggestion


class TestReportConfig:
    def test_defaults(self):
        config = ReportConfig()
        assert config.formats == [ExportFormat.CSV]
        assert config.prefix == "communication-matrix"

    def test_load_yaml(self):
        config = ReportConfig.load_yaml(
            "environment: cloud\n"
            "deployment: sno\n"
            "formats: [json, nft-firewall]\n"
            "prefix: cm\n"
        )
        assert config.environment == Environment.CLOUD
        assert config.deployment == Deployment.SNO
        assert config.formats == [ExportFormat.JSON, ExportFormat.NFT]
        assert config.prefix == "cm"

    def test_single_format_string(self):
        assert ReportConfig.from_dict({"formats": "yaml"}).formats == [ExportFormat.YAML]

    def test_empty_yaml(self):
        assert ReportConfig.load_yaml("") == ReportConfig()

    def test_invalid_format(self):
        with pytest.raises(UnsupportedFormatError):
            ReportConfig.from_dict({"formats": ["docx"]})

    def test_merge_overrides(self):
        base = ReportConfig(prefix="base")
        merged = base.merge(environment="cloud", prefix=None, formats=[])
        assert merged.environment == Environment.CLOUD
        assert merged.prefix == "base"
        assert merged.formats == [ExportFormat.CSV]
        assert base.environment == Environment.BAREMETAL

    def test_null_formats_use_default(self):
        assert ReportConfig.load_yaml("formats:\n").formats == [ExportFormat.CSV]

    def test_invalid_yaml(self):
        with pytest.raises(ConfigurationError) as exc:
            ReportConfig.load_yaml("formats: [json\n", "report.yaml")
        assert "report.yaml" in exc.value.message
        assert exc.value.suggestion

    def test_top_level_not_a_mapping(self):
        with pytest.raises(ConfigurationError) as exc:
            ReportConfig.load_yaml("- json\n")
        assert "expected a mapping" in exc.value.message

    def test_formats_not_a_list(self):
        with pytest.raises(ConfigurationError):
            ReportConfig.from_dict({"formats": {"json": True}})
