"""Provisioner Interface (Port)"""
from __future__ import annotations

from abc import ABC, abstractmethod

from ecs_topology.domain.topology.entities import ClusterTopology


class ITopologyProvisioner(ABC):
    """
    Topology Provisioner Interface

    宣言的なトポロジーを実際のクラウドリソースとして作成する。
    トポロジー構築側はこのインターフェースだけに依存する。
    """

    @abstractmethod
    def provision(self, topology: ClusterTopology) -> None:
        """トポロジーをプロビジョニング"""
        pass
