"""Topology Entities"""
from .cluster_topology import ClusterTopology, ServiceDescriptor

__all__ = ["ClusterTopology", "ServiceDescriptor"]
