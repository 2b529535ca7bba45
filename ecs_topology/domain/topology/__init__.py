"""Topology Domain Module"""
from .entities.cluster_topology import ClusterTopology, ServiceDescriptor
from .errors import (
    DuplicateApplicationNameError,
    ResourceNameCollisionError,
    TopologyError,
    UnsupportedRegionError,
)
from .value_objects.application import (
    Application,
    ApplicationInput,
    PolicyReference,
    normalize_application,
)
from .value_objects.network import Network
from .value_objects.region import Region, resolve_image

__all__ = [
    "ClusterTopology",
    "ServiceDescriptor",
    "DuplicateApplicationNameError",
    "ResourceNameCollisionError",
    "TopologyError",
    "UnsupportedRegionError",
    "Application",
    "ApplicationInput",
    "PolicyReference",
    "normalize_application",
    "Network",
    "Region",
    "resolve_image",
]
