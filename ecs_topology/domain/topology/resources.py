"""Declarative Resource Specifications

プロビジョニング層が実体化する宣言的なリソース定義。
ここに定義された値はすべて不変で、実際の API 呼び出しは行わない。
"""
from __future__ import annotations

import json
from dataclasses import dataclass

from .security_groups import ALLOW_ALL_EGRESS, EgressRule, IngressRule
from .value_objects.region import Region

ECS_FOR_EC2_POLICY_ARN = "arn:aws:iam::aws:policy/service-role/AmazonEC2ContainerServiceforEC2Role"
ECS_SERVICE_POLICY_ARN = "arn:aws:iam::aws:policy/service-role/AmazonEC2ContainerServiceRole"

DEFAULT_INSTANCE_TYPE = "t2.micro"

BOOTSTRAP_SCRIPT_TEMPLATE = """#!/bin/bash
echo ECS_CLUSTER={{cluster}} >> /etc/ecs/ecs.config
"""

ECS_TRUST_POLICY = json.dumps(
    {
        "Version": "2008-10-17",
        "Statement": [
            {
                "Sid": "",
                "Effect": "Allow",
                "Principal": {"Service": "ecs.amazonaws.com"},
                "Action": "sts:AssumeRole",
            }
        ],
    }
)

EC2_TRUST_POLICY = json.dumps(
    {
        "Version": "2008-10-17",
        "Statement": [
            {
                "Sid": "",
                "Effect": "Allow",
                "Principal": {"Service": "ec2.amazonaws.com"},
                "Action": "sts:AssumeRole",
            }
        ],
    }
)

DESCRIBE_INSTANCE_HEALTH_POLICY = json.dumps(
    {
        "Version": "2012-10-17",
        "Statement": [
            {
                "Action": ["elasticloadbalancing:DescribeInstanceHealth"],
                "Effect": "Allow",
                "Resource": "*",
            }
        ],
    }
)


def render_bootstrap_script(cluster_name: str) -> str:
    """起動スクリプトにクラスタ名を埋め込む"""
    return BOOTSTRAP_SCRIPT_TEMPLATE.replace("{{cluster}}", cluster_name)


# =================================================================
# Network / IAM
# =================================================================


@dataclass(frozen=True)
class SecurityGroupSpec:
    name: str
    vpc: str
    ingress: tuple[IngressRule, ...]
    egress: tuple[EgressRule, ...] = (ALLOW_ALL_EGRESS,)
    description: str = ""


@dataclass(frozen=True)
class InlinePolicySpec:
    """インラインポリシー。document は JSON 文字列。"""

    name: str
    document: str

    @property
    def policy_document(self) -> dict:
        return json.loads(self.document)


@dataclass(frozen=True)
class RoleSpec:
    name: str
    assume_role_policy: str
    managed_policy_arns: tuple[str, ...] = ()
    inline_policies: tuple[InlinePolicySpec, ...] = ()

    @property
    def assume_role_policy_document(self) -> dict:
        return json.loads(self.assume_role_policy)


@dataclass(frozen=True)
class InstanceProfileSpec:
    name: str
    role: str


# =================================================================
# Cluster / Autoscaling
# =================================================================


@dataclass(frozen=True)
class ClusterSpec:
    name: str
    region: Region


@dataclass(frozen=True)
class LaunchConfigurationSpec:
    name: str
    image_id: str
    instance_type: str
    security_groups: tuple[str, ...]
    instance_profile: str
    user_data: str


@dataclass(frozen=True)
class AutoscalingGroupSpec:
    """
    Auto Scaling グループ

    min_size と max_size は常に同じ値。ロードバランサーは付けない。
    """

    name: str
    launch_configuration: str
    min_size: int
    max_size: int
    subnets: tuple[str, ...]
    cooldown: int = 300
    health_check_type: str = "EC2"
    load_balancers: tuple[str, ...] = ()


# =================================================================
# Load Balancer
# =================================================================


@dataclass(frozen=True)
class HealthCheck:
    target: str
    interval: int = 15
    timeout: int = 3
    healthy_threshold: int = 3
    unhealthy_threshold: int = 3

    @classmethod
    def tcp(cls, port: int) -> HealthCheck:
        return cls(target=f"TCP:{port}")


@dataclass(frozen=True)
class Listener:
    instance_port: int
    load_balancer_port: int = 80
    protocol: str = "HTTP"
    instance_protocol: str = "HTTP"


@dataclass(frozen=True)
class LoadBalancerSpec:
    name: str
    subnets: tuple[str, ...]
    security_groups: tuple[str, ...]
    health_check: HealthCheck
    listeners: tuple[Listener, ...]
    scheme: str = "internet-facing"


# =================================================================
# Container / Task / Service
# =================================================================


@dataclass(frozen=True)
class PortMapping:
    container_port: int
    host_port: int
    protocol: str = "tcp"


@dataclass(frozen=True)
class LogConfiguration:
    group: str
    region: str
    log_driver: str = "awslogs"

    @property
    def options(self) -> dict[str, str]:
        return {"awslogs-group": self.group, "awslogs-region": self.region}


@dataclass(frozen=True)
class ContainerDefinition:
    name: str
    image: str
    memory: int
    port_mappings: tuple[PortMapping, ...]
    log_configuration: LogConfiguration
    essential: bool = True


@dataclass(frozen=True)
class TaskDefinitionSpec:
    family: str
    region: Region
    containers: tuple[ContainerDefinition, ...] = ()


@dataclass(frozen=True)
class LoadBalancerBinding:
    load_balancer: str
    container_name: str
    container_port: int


@dataclass(frozen=True)
class DeploymentConfiguration:
    minimum_healthy_percent: int = 60
    maximum_percent: int = 150


@dataclass(frozen=True)
class ServiceSpec:
    name: str
    cluster: str
    task_definition: str
    role: str
    load_balancers: tuple[LoadBalancerBinding, ...]
    desired_count: int = 1
    deployment_configuration: DeploymentConfiguration = DeploymentConfiguration()
