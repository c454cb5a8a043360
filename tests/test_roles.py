"""Tests for role resolution and partitioning."""

import pytest

from commatrix.errors import RoleNotFoundError
from commatrix.matrix.roles import ROLE_LABEL_PREFIX, resolve_role, separate_by_role
from commatrix.matrix.store import ComMatrix


class TestResolveRole:
    def test_master(self):
        assert resolve_role({ROLE_LABEL_PREFIX + "master": ""}) == "master"

    def test_control_plane(self):
        assert resolve_role({ROLE_LABEL_PREFIX + "control-plane": ""}) == "master"

    def test_master_before_worker(self):
        labels = {ROLE_LABEL_PREFIX + "worker": "", ROLE_LABEL_PREFIX + "control-plane": ""}
        assert resolve_role(labels) == "master"

    def test_worker(self):
        labels = {"kubernetes.io/os": "linux", ROLE_LABEL_PREFIX + "worker": ""}
        assert resolve_role(labels) == "worker"

    def test_custom_role(self):
        assert resolve_role({ROLE_LABEL_PREFIX + "infra": ""}) == "infra"

    def test_custom_prefix(self):
        assert resolve_role({"example.com/role-edge": ""}, prefix="example.com/role-") == "edge"

    def test_not_found(self):
        with pytest.raises(RoleNotFoundError, match="node-7"):
            resolve_role({"kubernetes.io/os": "linux"}, name="node-7")


class TestSeparateByRole:
    def test_drops_other_roles(self, make_flow):
        m = ComMatrix([
            make_flow(22, role="master"),
            make_flow(22, role="worker"),
            make_flow(22, role="arbiter"),
        ])
        master, worker = separate_by_role(m)
        assert [r.node_role for r in master] == ["master"]
        assert [r.node_role for r in worker] == ["worker"]

    def test_preserves_order(self, mixed_matrix):
        master, _ = separate_by_role(mixed_matrix)
        assert [r.port for r in master] == [53, 6443, 53, 22]
