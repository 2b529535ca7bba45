"""ClusterTopology Aggregate"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from ..resources import (
    AutoscalingGroupSpec,
    ClusterSpec,
    ContainerDefinition,
    InstanceProfileSpec,
    LaunchConfigurationSpec,
    LoadBalancerSpec,
    RoleSpec,
    SecurityGroupSpec,
    ServiceSpec,
    TaskDefinitionSpec,
)


@dataclass(frozen=True)
class ServiceDescriptor:
    """
    アプリケーション1つ分のサブトポロジー

    セキュリティグループ、ロードバランサー、タスク定義、
    サービスロール、ECS サービスをまとめる。
    """

    cluster: str
    security_group: SecurityGroupSpec
    load_balancer: LoadBalancerSpec
    task_definition: TaskDefinitionSpec
    service_role: RoleSpec
    service: ServiceSpec

    @property
    def container(self) -> ContainerDefinition:
        return self.task_definition.containers[0]


@dataclass(frozen=True)
class ClusterTopology:
    """
    クラスタトポロジー（集約ルート）

    services の順序は入力アプリケーションの順序と一致する。
    """

    cluster: ClusterSpec
    services: tuple[ServiceDescriptor, ...]
    autoscaling_group: AutoscalingGroupSpec
    security_group: SecurityGroupSpec
    instance_role: RoleSpec
    instance_profile: InstanceProfileSpec
    launch_configuration: LaunchConfigurationSpec

    @property
    def image_id(self) -> str:
        return self.launch_configuration.image_id

    def to_dict(self) -> dict[str, Any]:
        """辞書に変換"""
        return asdict(self)
