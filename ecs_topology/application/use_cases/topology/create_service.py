"""Create Service Use Case"""
from __future__ import annotations

from ecs_topology.domain.topology import naming
from ecs_topology.domain.topology.entities import ServiceDescriptor
from ecs_topology.domain.topology.resources import (
    DESCRIBE_INSTANCE_HEALTH_POLICY,
    ECS_SERVICE_POLICY_ARN,
    ECS_TRUST_POLICY,
    ClusterSpec,
    ContainerDefinition,
    DeploymentConfiguration,
    HealthCheck,
    InlinePolicySpec,
    Listener,
    LoadBalancerBinding,
    LoadBalancerSpec,
    LogConfiguration,
    PortMapping,
    RoleSpec,
    SecurityGroupSpec,
    ServiceSpec,
    TaskDefinitionSpec,
)
from ecs_topology.domain.topology.security_groups import HTTP_PORT, application_ingress
from ecs_topology.domain.topology.value_objects import Application, Network


def create_service(network: Network, cluster: ClusterSpec, app: Application) -> ServiceDescriptor:
    """
    アプリケーション1つ分のサブトポロジーを構築

    1. セキュリティグループ (HTTP + アプリのポート)
    2. インターネット向けロードバランサー
    3. コンテナ定義 / タスク定義
    4. サービスロール (ECS 信頼ポリシー + DescribeInstanceHealth)
    5. ECS サービス

    他のアプリケーションとは独立しており、失敗しない。
    """
    security_group = SecurityGroupSpec(
        name=naming.service_security_group_name(app.name),
        vpc=network.vpc,
        ingress=application_ingress(app.port),
        description=f"Security group for {app.name}",
    )

    load_balancer = LoadBalancerSpec(
        name=naming.load_balancer_name(app.name),
        subnets=tuple(network.public_subnets),
        security_groups=(security_group.name,),
        health_check=HealthCheck.tcp(app.port),
        listeners=(Listener(instance_port=app.port, load_balancer_port=HTTP_PORT),),
    )

    container = ContainerDefinition(
        name=naming.container_name(app.name),
        image=app.image,
        memory=app.memory,
        port_mappings=(PortMapping(container_port=app.port, host_port=app.port),),
        log_configuration=LogConfiguration(
            group=app.log_group_name,
            region=str(network.region),
        ),
    )

    task_definition = TaskDefinitionSpec(
        family=naming.task_family(app.name),
        region=network.region,
        containers=(container,),
    )

    service_role = RoleSpec(
        name=naming.service_role_name(app.name),
        assume_role_policy=ECS_TRUST_POLICY,
        managed_policy_arns=(ECS_SERVICE_POLICY_ARN,),
        inline_policies=(
            InlinePolicySpec(
                name=naming.describe_instance_health_policy_name(app.name),
                document=DESCRIBE_INSTANCE_HEALTH_POLICY,
            ),
        ),
    )

    service = ServiceSpec(
        name=naming.service_name(app.name),
        cluster=cluster.name,
        task_definition=task_definition.family,
        role=service_role.name,
        load_balancers=(
            LoadBalancerBinding(
                load_balancer=load_balancer.name,
                container_name=container.name,
                container_port=app.port,
            ),
        ),
        desired_count=1,
        deployment_configuration=DeploymentConfiguration(
            minimum_healthy_percent=60,
            maximum_percent=150,
        ),
    )

    return ServiceDescriptor(
        cluster=cluster.name,
        security_group=security_group,
        load_balancer=load_balancer,
        task_definition=task_definition,
        service_role=service_role,
        service=service,
    )
