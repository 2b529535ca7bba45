"""Resource Naming Convention

すべてのリソース名は `<base>-<suffix>` で決まる。
カウンタ・時刻・乱数は使わない。
"""
from __future__ import annotations


def resource_name(base: str, suffix: str) -> str:
    return f"{base}-{suffix}"


# Cluster-level

def cluster_name(base: str) -> str:
    return resource_name(base, "cluster")


def cluster_security_group_name(base: str) -> str:
    return resource_name(base, "cluster-sg")


def instance_role_name(base: str) -> str:
    return resource_name(base, "instance-role")


def instance_profile_name(base: str) -> str:
    return resource_name(base, "instance-profile")


def launch_configuration_name(base: str) -> str:
    return resource_name(base, "launch-config")


def autoscaling_group_name(base: str) -> str:
    return resource_name(base, "asg")


# Application-level

def service_security_group_name(app_name: str) -> str:
    return resource_name(app_name, "sg")


def load_balancer_name(app_name: str) -> str:
    return resource_name(app_name, "elb")


def container_name(app_name: str) -> str:
    return resource_name(app_name, "container")


def task_family(app_name: str) -> str:
    return resource_name(app_name, "task")


def service_name(app_name: str) -> str:
    return resource_name(app_name, "service")


def service_role_name(app_name: str) -> str:
    return resource_name(app_name, "service-role")


def describe_instance_health_policy_name(app_name: str) -> str:
    return resource_name(app_name, "describe-instance-health")
