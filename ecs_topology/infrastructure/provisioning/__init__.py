"""Topology Provisioners"""
from .logging_provisioner import LoggingTopologyProvisioner

__all__ = ["LoggingTopologyProvisioner"]
