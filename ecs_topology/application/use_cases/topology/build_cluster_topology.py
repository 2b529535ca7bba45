"""Build Cluster Topology Use Case"""
from __future__ import annotations

from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from itertools import chain
from typing import Sequence

import structlog

from ecs_topology.application.ports.provisioner import ITopologyProvisioner
from ecs_topology.domain.topology import naming
from ecs_topology.domain.topology.entities import ClusterTopology, ServiceDescriptor
from ecs_topology.domain.topology.errors import (
    DuplicateApplicationNameError,
    ResourceNameCollisionError,
)
from ecs_topology.domain.topology.resources import (
    DEFAULT_INSTANCE_TYPE,
    EC2_TRUST_POLICY,
    ECS_FOR_EC2_POLICY_ARN,
    AutoscalingGroupSpec,
    ClusterSpec,
    InstanceProfileSpec,
    LaunchConfigurationSpec,
    RoleSpec,
    SecurityGroupSpec,
    render_bootstrap_script,
)
from ecs_topology.domain.topology.security_groups import cluster_ingress
from ecs_topology.domain.topology.value_objects import (
    Application,
    ApplicationInput,
    Network,
    normalize_application,
    resolve_image,
)

from .create_service import create_service

logger = structlog.get_logger()


@dataclass
class BuildClusterTopologyInput:
    """トポロジー構築入力DTO"""

    name: str
    network: Network
    apps: Sequence[Application | ApplicationInput] = field(default_factory=list)
    size: int | None = None


class BuildClusterTopologyUseCase:
    """
    クラスタトポロジー構築 ユースケース

    1. アプリケーション宣言を正規化
    2. クラスタ共通リソースを構築 (SG, クラスタ, インスタンスロール, 起動設定, ASG)
    3. アプリケーションごとにサービスを構築 (入力順を保持)
    4. プロビジョナーが注入されていれば引き渡す

    失敗するのはリージョンのイメージ解決のみ。失敗時は何も返さない。
    """

    def __init__(
        self,
        provisioner: ITopologyProvisioner | None = None,
        instance_type: str = DEFAULT_INSTANCE_TYPE,
        reject_duplicate_app_names: bool = True,
        max_workers: int = 1,
    ):
        self._provisioner = provisioner
        self._instance_type = instance_type
        self._reject_duplicate_app_names = reject_duplicate_app_names
        self._max_workers = max_workers

    def execute(self, input_data: BuildClusterTopologyInput) -> ClusterTopology:
        """ユースケースを実行"""
        log = logger.bind(
            cluster=input_data.name,
            region=str(input_data.network.region),
            app_count=len(input_data.apps),
        )
        log.info("build_cluster_topology_started")

        try:
            topology = self._build(input_data)
        except Exception as e:
            log.error("build_cluster_topology_failed", error=str(e))
            raise

        log.info(
            "build_cluster_topology_completed",
            image_id=topology.image_id,
            size=topology.autoscaling_group.max_size,
        )

        if self._provisioner is not None:
            self._provisioner.provision(topology)
            log.info("topology_provisioned")

        return topology

    def _build(self, input_data: BuildClusterTopologyInput) -> ClusterTopology:
        name = input_data.name
        network = input_data.network
        apps = [self._normalize(app) for app in input_data.apps]

        if self._reject_duplicate_app_names:
            self._check_unique_names(apps)
            self._check_name_collisions(name, apps)

        # 1. サイズ
        size = input_data.size if input_data.size is not None else len(apps) + 1

        # 2. クラスタ用セキュリティグループ
        security_group = SecurityGroupSpec(
            name=naming.cluster_security_group_name(name),
            vpc=network.vpc,
            ingress=cluster_ingress(app.port for app in apps),
            description=f"Security group for {name} cluster instances",
        )

        # 3. クラスタ
        cluster = ClusterSpec(name=naming.cluster_name(name), region=network.region)

        # 4. インスタンスロール (ベースポリシー + 各アプリのポリシーを連結)
        instance_role = RoleSpec(
            name=naming.instance_role_name(name),
            assume_role_policy=EC2_TRUST_POLICY,
            managed_policy_arns=(
                ECS_FOR_EC2_POLICY_ARN,
                *(policy.arn for policy in chain.from_iterable(a.managed_policies for a in apps)),
            ),
        )
        instance_profile = InstanceProfileSpec(
            name=naming.instance_profile_name(name),
            role=instance_role.name,
        )

        # 5. 起動設定
        launch_configuration = LaunchConfigurationSpec(
            name=naming.launch_configuration_name(name),
            image_id=resolve_image(network.region),
            instance_type=self._instance_type,
            security_groups=(security_group.name,),
            instance_profile=instance_profile.name,
            user_data=render_bootstrap_script(cluster.name),
        )

        # 6. Auto Scaling グループ
        autoscaling_group = AutoscalingGroupSpec(
            name=naming.autoscaling_group_name(name),
            launch_configuration=launch_configuration.name,
            min_size=size,
            max_size=size,
            subnets=tuple(network.private_subnets),
            cooldown=300,
            health_check_type="EC2",
        )

        # 7. サービス
        services = self._create_services(network, cluster, apps)

        return ClusterTopology(
            cluster=cluster,
            services=services,
            autoscaling_group=autoscaling_group,
            security_group=security_group,
            instance_role=instance_role,
            instance_profile=instance_profile,
            launch_configuration=launch_configuration,
        )

    def _create_services(
        self,
        network: Network,
        cluster: ClusterSpec,
        apps: list[Application],
    ) -> tuple[ServiceDescriptor, ...]:
        """アプリケーションごとのサービスを構築 (結果は入力順)"""
        if self._max_workers <= 1 or len(apps) <= 1:
            return tuple(create_service(network, cluster, app) for app in apps)

        with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
            return tuple(executor.map(lambda app: create_service(network, cluster, app), apps))

    @staticmethod
    def _normalize(app: Application | ApplicationInput) -> Application:
        if isinstance(app, Application):
            return app
        return normalize_application(app)

    @staticmethod
    def _check_unique_names(apps: list[Application]) -> None:
        counts = Counter(app.name for app in apps)
        duplicates = [name for name, count in counts.items() if count > 1]
        if duplicates:
            raise DuplicateApplicationNameError(duplicates)

    @staticmethod
    def _check_name_collisions(name: str, apps: list[Application]) -> None:
        cluster_sg = naming.cluster_security_group_name(name)
        # アプリ名が "<name>-cluster" のときだけ衝突する
        if any(naming.service_security_group_name(app.name) == cluster_sg for app in apps):
            raise ResourceNameCollisionError([cluster_sg])
