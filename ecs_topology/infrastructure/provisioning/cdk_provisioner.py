"""
CDK Provisioner

ClusterTopology を CloudFormation (L1) コンストラクトとして実体化する。
Construct ID にはリソース名をそのまま使う。
"""
from __future__ import annotations

import structlog
from aws_cdk import (
    Fn,
    aws_autoscaling as autoscaling,
    aws_ec2 as ec2,
    aws_ecs as ecs,
    aws_elasticloadbalancing as elb,
    aws_iam as iam,
)
from constructs import Construct

from ecs_topology.application.ports.provisioner import ITopologyProvisioner
from ecs_topology.domain.topology.entities import ClusterTopology, ServiceDescriptor
from ecs_topology.domain.topology.resources import (
    AutoscalingGroupSpec,
    LaunchConfigurationSpec,
    LoadBalancerSpec,
    RoleSpec,
    SecurityGroupSpec,
    TaskDefinitionSpec,
)

logger = structlog.get_logger()


class CdkTopologyProvisioner(ITopologyProvisioner):
    """CDK コンストラクトを生成する Provisioner"""

    def __init__(self, scope: Construct):
        self._scope = scope
        self.security_groups: dict[str, ec2.CfnSecurityGroup] = {}
        self.roles: dict[str, iam.CfnRole] = {}
        self.clusters: dict[str, ecs.CfnCluster] = {}
        self.services: dict[str, ecs.CfnService] = {}

    def provision(self, topology: ClusterTopology) -> None:
        log = logger.bind(cluster=topology.cluster.name)

        # =================================================================
        # Cluster-level resources
        # =================================================================

        cluster_sg = self._security_group(topology.security_group)

        cluster = ecs.CfnCluster(
            self._scope, topology.cluster.name,
            cluster_name=topology.cluster.name,
        )
        self.clusters[topology.cluster.name] = cluster

        instance_role = self._role(topology.instance_role)

        instance_profile = iam.CfnInstanceProfile(
            self._scope, topology.instance_profile.name,
            instance_profile_name=topology.instance_profile.name,
            roles=[instance_role.ref],
        )

        launch_configuration = self._launch_configuration(
            topology.launch_configuration,
            security_group=cluster_sg,
            instance_profile=instance_profile,
        )

        self._autoscaling_group(topology.autoscaling_group, launch_configuration)

        # =================================================================
        # Per-application resources
        # =================================================================

        for descriptor in topology.services:
            self._service(descriptor, cluster)

        log.info("cdk_constructs_created", services=len(topology.services))

    def _security_group(self, spec: SecurityGroupSpec) -> ec2.CfnSecurityGroup:
        sg = ec2.CfnSecurityGroup(
            self._scope, spec.name,
            group_name=spec.name,
            group_description=spec.description or spec.name,
            vpc_id=spec.vpc,
            security_group_ingress=[
                ec2.CfnSecurityGroup.IngressProperty(
                    ip_protocol=rule.protocol,
                    from_port=rule.from_port,
                    to_port=rule.to_port,
                    cidr_ip=cidr,
                )
                for rule in spec.ingress
                for cidr in rule.cidr_blocks
            ],
            security_group_egress=[
                ec2.CfnSecurityGroup.EgressProperty(
                    ip_protocol=rule.protocol,
                    from_port=rule.from_port,
                    to_port=rule.to_port,
                    cidr_ip=cidr,
                )
                for rule in spec.egress
                for cidr in rule.cidr_blocks
            ],
        )
        self.security_groups[spec.name] = sg
        return sg

    def _role(self, spec: RoleSpec) -> iam.CfnRole:
        role = iam.CfnRole(
            self._scope, spec.name,
            role_name=spec.name,
            assume_role_policy_document=spec.assume_role_policy_document,
            managed_policy_arns=list(spec.managed_policy_arns),
            policies=[
                iam.CfnRole.PolicyProperty(
                    policy_name=policy.name,
                    policy_document=policy.policy_document,
                )
                for policy in spec.inline_policies
            ] or None,
        )
        self.roles[spec.name] = role
        return role

    def _launch_configuration(
        self,
        spec: LaunchConfigurationSpec,
        security_group: ec2.CfnSecurityGroup,
        instance_profile: iam.CfnInstanceProfile,
    ) -> autoscaling.CfnLaunchConfiguration:
        return autoscaling.CfnLaunchConfiguration(
            self._scope, spec.name,
            launch_configuration_name=spec.name,
            image_id=spec.image_id,
            instance_type=spec.instance_type,
            security_groups=[security_group.attr_group_id],
            iam_instance_profile=instance_profile.ref,
            user_data=Fn.base64(spec.user_data),
        )

    def _autoscaling_group(
        self,
        spec: AutoscalingGroupSpec,
        launch_configuration: autoscaling.CfnLaunchConfiguration,
    ) -> autoscaling.CfnAutoScalingGroup:
        return autoscaling.CfnAutoScalingGroup(
            self._scope, spec.name,
            auto_scaling_group_name=spec.name,
            launch_configuration_name=launch_configuration.ref,
            min_size=str(spec.min_size),
            max_size=str(spec.max_size),
            vpc_zone_identifier=list(spec.subnets),
            cooldown=str(spec.cooldown),
            health_check_type=spec.health_check_type,
            load_balancer_names=list(spec.load_balancers) or None,
        )

    def _load_balancer(
        self,
        spec: LoadBalancerSpec,
        security_group: ec2.CfnSecurityGroup,
    ) -> elb.CfnLoadBalancer:
        health_check = spec.health_check
        return elb.CfnLoadBalancer(
            self._scope, spec.name,
            load_balancer_name=spec.name,
            scheme=spec.scheme,
            subnets=list(spec.subnets),
            security_groups=[security_group.attr_group_id],
            health_check=elb.CfnLoadBalancer.HealthCheckProperty(
                target=health_check.target,
                interval=str(health_check.interval),
                timeout=str(health_check.timeout),
                healthy_threshold=str(health_check.healthy_threshold),
                unhealthy_threshold=str(health_check.unhealthy_threshold),
            ),
            listeners=[
                elb.CfnLoadBalancer.ListenersProperty(
                    load_balancer_port=str(listener.load_balancer_port),
                    instance_port=str(listener.instance_port),
                    protocol=listener.protocol,
                    instance_protocol=listener.instance_protocol,
                )
                for listener in spec.listeners
            ],
        )

    def _task_definition(self, spec: TaskDefinitionSpec) -> ecs.CfnTaskDefinition:
        return ecs.CfnTaskDefinition(
            self._scope, spec.family,
            family=spec.family,
            container_definitions=[
                ecs.CfnTaskDefinition.ContainerDefinitionProperty(
                    name=container.name,
                    image=container.image,
                    memory=container.memory,
                    essential=container.essential,
                    port_mappings=[
                        ecs.CfnTaskDefinition.PortMappingProperty(
                            container_port=mapping.container_port,
                            host_port=mapping.host_port,
                            protocol=mapping.protocol,
                        )
                        for mapping in container.port_mappings
                    ],
                    log_configuration=ecs.CfnTaskDefinition.LogConfigurationProperty(
                        log_driver=container.log_configuration.log_driver,
                        options=container.log_configuration.options,
                    ),
                )
                for container in spec.containers
            ],
        )

    def _service(self, descriptor: ServiceDescriptor, cluster: ecs.CfnCluster) -> ecs.CfnService:
        security_group = self._security_group(descriptor.security_group)
        load_balancer = self._load_balancer(descriptor.load_balancer, security_group)
        task_definition = self._task_definition(descriptor.task_definition)
        service_role = self._role(descriptor.service_role)

        spec = descriptor.service
        deployment = spec.deployment_configuration
        service = ecs.CfnService(
            self._scope, spec.name,
            service_name=spec.name,
            cluster=cluster.ref,
            task_definition=task_definition.ref,
            desired_count=spec.desired_count,
            role=service_role.ref,
            load_balancers=[
                ecs.CfnService.LoadBalancerProperty(
                    load_balancer_name=load_balancer.ref,
                    container_name=binding.container_name,
                    container_port=binding.container_port,
                )
                for binding in spec.load_balancers
            ],
            deployment_configuration=ecs.CfnService.DeploymentConfigurationProperty(
                minimum_healthy_percent=deployment.minimum_healthy_percent,
                maximum_percent=deployment.maximum_percent,
            ),
        )
        # IAM ポリシーがアタッチされるまでサービス作成を待つ
        service.add_dependency(service_role)
        self.services[spec.name] = service
        return service
