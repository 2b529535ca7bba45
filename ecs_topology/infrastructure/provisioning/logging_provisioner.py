"""Dry-run Provisioner"""
from __future__ import annotations

import structlog

from ecs_topology.application.ports.provisioner import ITopologyProvisioner
from ecs_topology.domain.topology.entities import ClusterTopology

logger = structlog.get_logger()


class LoggingTopologyProvisioner(ITopologyProvisioner):
    """
    ログ出力のみの Provisioner（ドライラン用）

    リソースは作成せず、作成予定のリソースを1件ずつログに出す。
    """

    def __init__(self) -> None:
        self.resources: list[tuple[str, str]] = []

    def provision(self, topology: ClusterTopology) -> None:
        """リソースをログ出力のみ"""
        self._record("security_group", topology.security_group.name)
        self._record("cluster", topology.cluster.name)
        self._record("iam_role", topology.instance_role.name)
        self._record("instance_profile", topology.instance_profile.name)
        self._record("launch_configuration", topology.launch_configuration.name)
        self._record("autoscaling_group", topology.autoscaling_group.name)

        for descriptor in topology.services:
            self._record("security_group", descriptor.security_group.name)
            self._record("load_balancer", descriptor.load_balancer.name)
            self._record("task_definition", descriptor.task_definition.family)
            self._record("iam_role", descriptor.service_role.name)
            self._record("ecs_service", descriptor.service.name)

    def _record(self, kind: str, name: str) -> None:
        self.resources.append((kind, name))
        logger.info("resource_planned", kind=kind, name=name)
