"""Shared test fixtures for commatrix."""

import json

import pytest

from commatrix.matrix.models import FlowRecord
from commatrix.matrix.store import ComMatrix


def flow(port, role="master", protocol="TCP", service="", direction="Ingress", **kwargs):
    return FlowRecord(
        direction=direction,
        protocol=protocol,
        port=port,
        service=service,
        node_role=role,
        **kwargs,
    )


@pytest.fixture
def matrix_a():
    return ComMatrix([flow(22, service="sshd"), flow(6443, service="kube-apiserver")])


@pytest.fixture
def matrix_b():
    return ComMatrix([flow(22, service="sshd"), flow(9999, service="unknown")])


@pytest.fixture
def mixed_matrix():
    return ComMatrix([
        flow(10250, role="worker", service="kubelet"),
        flow(53, protocol="UDP", service="dns-default"),
        flow(6443, service="kube-apiserver"),
        flow(53, service="dns-default"),
        flow(80, role="arbiter", service="http"),
        flow(22, service="sshd"),
        flow(53, role="worker", protocol="UDP", service="dns-default"),
    ])


@pytest.fixture
def entries_file(tmp_path):
    path = tmp_path / "custom.json"
    path.write_text(json.dumps([
        {
            "direction": "Ingress",
            "protocol": "TCP",
            "port": 8443,
            "namespace": "my-ns",
            "service": "my-svc",
            "pod": "my-pod",
            "container": "my-container",
            "nodeRole": "master",
            "optional": False,
        },
        {
            "direction": "Ingress",
            "protocol": "UDP",
            "port": 4789,
            "nodeRole": "worker",
            "optional": True,
        },
    ]))
    return path


@pytest.fixture
def make_flow():
    return flow
