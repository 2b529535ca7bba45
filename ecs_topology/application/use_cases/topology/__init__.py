"""Topology Use Cases"""
from .build_cluster_topology import BuildClusterTopologyInput, BuildClusterTopologyUseCase
from .create_service import create_service

__all__ = [
    "BuildClusterTopologyInput",
    "BuildClusterTopologyUseCase",
    "create_service",
]
