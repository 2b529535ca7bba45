"""
Cluster Stack

ECS クラスタ (EC2) とアプリケーションごとのサービス:
- Cluster / Instance Role / Launch Configuration / Auto Scaling Group
- Classic Load Balancer
- Task Definition / Service / Service Role
"""
from typing import Any, Sequence

from aws_cdk import (
    NestedStack,
    CfnOutput,
    aws_ec2 as ec2,
)
from constructs import Construct

from ecs_topology.application.use_cases.topology import BuildClusterTopologyInput
from ecs_topology.domain.topology import ApplicationInput, Network, Region
from ecs_topology.infrastructure.dependencies import build_cluster_topology_use_case
from ecs_topology.infrastructure.provisioning.cdk_provisioner import CdkTopologyProvisioner


class ClusterStack(NestedStack):
    """ECS クラスタとサービスを管理するスタック。"""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        vpc: ec2.IVpc,
        region: Region,
        cluster_name: str,
        apps: Sequence[dict[str, Any]],
        size: int | None = None,
        **kwargs
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        network = Network(
            vpc=vpc.vpc_id,
            region=region,
            public_subnets=tuple(subnet.subnet_id for subnet in vpc.public_subnets),
            private_subnets=tuple(subnet.subnet_id for subnet in vpc.private_subnets),
        )

        self.provisioner = CdkTopologyProvisioner(self)
        use_case = build_cluster_topology_use_case(provisioner=self.provisioner)

        self.topology = use_case.execute(
            BuildClusterTopologyInput(
                name=cluster_name,
                network=network,
                apps=[ApplicationInput.from_dict(app) for app in apps],
                size=size,
            )
        )

        CfnOutput(self, 'ClusterName', value=self.topology.cluster.name)
        CfnOutput(self, 'ImageId', value=self.topology.image_id)
