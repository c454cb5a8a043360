"""
Well-known flows that cluster introspection cannot discover.

Host-level services (sshd, rpcbind, kubelet, etcd peers ...) listen on
node ports without any backing endpoint object, so they are listed here
per environment and node role.
"""

from __future__ import annotations

from ..config import Deployment, Environment, parse_deployment, parse_environment
from ..matrix.models import INGRESS, MASTER, TCP, UDP, WORKER, FlowRecord


def _entry(protocol, port, namespace, service, pod, container, role, optional=False):
    return FlowRecord(
        direction=INGRESS,
        protocol=protocol,
        port=port,
        namespace=namespace,
        service=service,
        pod=pod,
        container=container,
        node_role=role,
        optional=optional,
    )


def _host_services(role):
    return [
        _entry(TCP, 111, "", "rpcbind", "", "", role, optional=True),
        _entry(UDP, 111, "", "rpcbind", "", "", role, optional=True),
        _entry(TCP, 22, "", "sshd", "", "", role, optional=True),
    ]


BAREMETAL_MASTER = _host_services(MASTER) + [
    _entry(TCP, 53, "openshift-dns", "dns-default", "dns-default", "dns", MASTER),
    _entry(UDP, 53, "openshift-dns", "dns-default", "dns-default", "dns", MASTER),
    _entry(TCP, 9258, "openshift-cloud-controller-manager-operator", "machine-approver",
           "cluster-cloud-controller-manager", "cluster-cloud-controller-manager", MASTER),
    _entry(UDP, 6081, "", "ovn-kubernetes geneve", "", "", MASTER),
]

BAREMETAL_WORKER = _host_services(WORKER) + [
    _entry(TCP, 53, "openshift-dns", "dns-default", "dns-default", "dns", WORKER),
    _entry(UDP, 53, "openshift-dns", "dns-default", "dns-default", "dns", WORKER),
    _entry(UDP, 6081, "", "ovn-kubernetes geneve", "", "", WORKER),
]

CLOUD_MASTER = [
    _entry(TCP, 111, "", "rpcbind", "", "", MASTER, optional=True),
    _entry(UDP, 111, "", "rpcbind", "", "", MASTER, optional=True),
    _entry(TCP, 10258, "openshift-cloud-controller-manager", "cloud-controller",
           "cloud-controller-manager", "cloud-controller-manager", MASTER),
    _entry(TCP, 10260, "openshift-cloud-controller-manager", "cloud-controller",
           "cloud-controller-manager", "cloud-controller-manager", MASTER),
    _entry(UDP, 6081, "", "ovn-kubernetes geneve", "", "", MASTER),
]

CLOUD_WORKER = [
    _entry(TCP, 111, "", "rpcbind", "", "", WORKER, optional=True),
    _entry(UDP, 111, "", "rpcbind", "", "", WORKER, optional=True),
    _entry(UDP, 6081, "", "ovn-kubernetes geneve", "", "", WORKER),
]

GENERAL_MASTER = [
    _entry(TCP, 6443, "openshift-kube-apiserver", "kube-apiserver", "kube-apiserver",
           "kube-apiserver", MASTER),
    _entry(TCP, 2379, "openshift-etcd", "etcd", "etcd", "etcd", MASTER),
    _entry(TCP, 2380, "openshift-etcd", "healthz", "etcd", "etcd", MASTER),
    _entry(TCP, 10250, "", "kubelet", "", "", MASTER),
    _entry(TCP, 10256, "openshift-ovn-kubernetes", "ovnkube", "ovnkube", "ovnkube-controller",
           MASTER),
    _entry(TCP, 22623, "openshift-machine-config-operator", "machine-config-server",
           "machine-config-server", "machine-config-server", MASTER),
    _entry(TCP, 9637, "openshift-machine-config-operator", "kube-rbac-proxy-crio",
           "kube-rbac-proxy-crio", "kube-rbac-proxy-crio", MASTER),
    _entry(TCP, 9107, "openshift-ovn-kubernetes", "egressip-node-healthcheck", "ovnkube-node",
           "ovnkube-controller", MASTER),
]

GENERAL_WORKER = [
    _entry(TCP, 10250, "", "kubelet", "", "", WORKER),
    _entry(TCP, 10256, "openshift-ovn-kubernetes", "ovnkube", "ovnkube", "ovnkube-controller",
           WORKER),
    _entry(TCP, 9637, "openshift-machine-config-operator", "kube-rbac-proxy-crio",
           "kube-rbac-proxy-crio", "kube-rbac-proxy-crio", WORKER),
    _entry(TCP, 9107, "openshift-ovn-kubernetes", "egressip-node-healthcheck", "ovnkube-node",
           "ovnkube-controller", WORKER),
]

ENVIRONMENT_ENTRIES = {
    Environment.BAREMETAL: (BAREMETAL_MASTER, BAREMETAL_WORKER),
    Environment.CLOUD: (CLOUD_MASTER, CLOUD_WORKER),
}


def get_static_entries(
    env: str | Environment, deployment: str | Deployment
) -> list[FlowRecord]:
    """
    Return the static flows for an environment and deployment type.

    Worker tables are only included for multi-node deployments.
    """
    env = parse_environment(env)
    deployment = parse_deployment(deployment)
    multi_node = deployment == Deployment.MNO

    env_master, env_worker = ENVIRONMENT_ENTRIES[env]
    entries = list(env_master)
    if multi_node:
        entries += env_worker

    entries += GENERAL_MASTER
    if multi_node:
        entries += GENERAL_WORKER
    return entries
