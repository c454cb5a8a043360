"""Tests for static entries and entry file loaders."""

import json

import pytest

from commatrix.errors import MalformedInputError, ValidationError
from commatrix.export.formats import export_matrix
from commatrix.matrix.store import ComMatrix
from commatrix.sources import get_static_entries, load_custom_entries, load_matrix_file


class TestStaticEntries:
    def test_single_node_has_no_workers(self):
        entries = get_static_entries("baremetal", "sno")
        assert entries
        assert {r.node_role for r in entries} == {"master"}

    def test_multi_node_has_workers(self):
        entries = get_static_entries("baremetal", "mno")
        assert {r.node_role for r in entries} == {"master", "worker"}

    def test_cloud_differs_from_baremetal(self):
        cloud = ComMatrix(get_static_entries("cloud", "mno")).keys()
        bm = ComMatrix(get_static_entries("baremetal", "mno")).keys()
        assert cloud != bm

    def test_aws_alias(self):
        assert get_static_entries("aws", "sno") == get_static_entries("cloud", "sno")

    def test_api_server_always_present(self):
        for env in ("baremetal", "cloud"):
            m = ComMatrix(get_static_entries(env, "sno"))
            assert any(r.port == 6443 for r in m)

    def test_invalid_environment(self):
        with pytest.raises(ValidationError, match="cluster environment"):
            get_static_entries("azure", "sno")

    def test_invalid_deployment(self):
        with pytest.raises(ValidationError, match="deployment type"):
            get_static_entries("baremetal", "huge")


class TestCustomEntries:
    def test_load(self, entries_file):
        records = load_custom_entries(entries_file)
        assert len(records) == 2
        assert records[0].service == "my-svc"
        assert records[1].optional is True
        assert records[1].namespace == ""

    def test_missing_file(self, tmp_path):
        path = tmp_path / "nope.json"
        with pytest.raises(MalformedInputError) as exc:
            load_custom_entries(path)
        assert exc.value.path == path

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("[{not json")
        with pytest.raises(MalformedInputError, match="invalid JSON"):
            load_custom_entries(path)

    def test_not_a_list(self, tmp_path):
        path = tmp_path / "obj.json"
        path.write_text(json.dumps({"direction": "Ingress"}))
        with pytest.raises(MalformedInputError, match="list"):
            load_custom_entries(path)

    def test_schema_mismatch_names_file(self, tmp_path):
        path = tmp_path / "schema.json"
        path.write_text(json.dumps([{"direction": "Ingress", "proto": "TCP", "port": 1}]))
        with pytest.raises(MalformedInputError, match="schema.json"):
            load_custom_entries(path)


class TestLoadMatrixFile:
    def test_json(self, tmp_path, matrix_a):
        path = tmp_path / "m.json"
        path.write_bytes(export_matrix(matrix_a, "json"))
        assert load_matrix_file(path) == matrix_a

    def test_yaml(self, tmp_path, matrix_a):
        path = tmp_path / "m.yaml"
        path.write_bytes(export_matrix(matrix_a, "yaml"))
        assert load_matrix_file(path) == matrix_a

    def test_yaml_without_matrix_key(self, tmp_path):
        path = tmp_path / "m.yml"
        path.write_text("- port: 1\n")
        with pytest.raises(MalformedInputError, match="matrix"):
            load_matrix_file(path)
