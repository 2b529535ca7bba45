"""Application Ports (Interfaces)"""
from .provisioner import ITopologyProvisioner

__all__ = ["ITopologyProvisioner"]
