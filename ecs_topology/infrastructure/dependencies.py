"""Use Case Wiring"""
from __future__ import annotations

from ecs_topology.application.ports.provisioner import ITopologyProvisioner
from ecs_topology.application.use_cases.topology import BuildClusterTopologyUseCase

from .config import Settings, get_settings


def build_cluster_topology_use_case(
    provisioner: ITopologyProvisioner | None = None,
    settings: Settings | None = None,
) -> BuildClusterTopologyUseCase:
    """設定からトポロジー構築ユースケースを生成"""
    settings = settings or get_settings()
    return BuildClusterTopologyUseCase(
        provisioner=provisioner,
        instance_type=settings.instance_type,
        reject_duplicate_app_names=settings.reject_duplicate_app_names,
        max_workers=settings.max_workers,
    )
