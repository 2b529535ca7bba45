"""
ECS Platform Main Stack

VPC + ECS (EC2) クラスタのメインスタック。
"""
from typing import Any, Sequence

from aws_cdk import (
    Stack,
    CfnOutput,
)
from constructs import Construct

from ecs_topology.domain.topology import Region
from infra.stacks.cluster_stack import ClusterStack
from infra.stacks.network_stack import NetworkStack


class EcsPlatformStack(Stack):
    """ECS Platform のメインスタック。"""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        region: Region,
        cluster_name: str,
        apps: Sequence[dict[str, Any]],
        size: int | None = None,
        **kwargs
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # Network Stack (VPC, Subnets)
        network_stack = NetworkStack(self, 'Network')

        # Cluster Stack (ECS, ASG, ELB)
        cluster_stack = ClusterStack(
            self, 'Cluster',
            vpc=network_stack.vpc,
            region=region,
            cluster_name=cluster_name,
            apps=apps,
            size=size,
        )

        # Outputs
        CfnOutput(self, 'VpcId', value=network_stack.vpc.vpc_id)
        for descriptor in cluster_stack.topology.services:
            CfnOutput(
                self, f'{descriptor.service.name}-lb',
                value=descriptor.load_balancer.name,
            )
