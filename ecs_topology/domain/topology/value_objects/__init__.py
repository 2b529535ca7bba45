"""Topology Value Objects"""
from .application import (
    DEFAULT_MEMORY,
    DEFAULT_PORT,
    Application,
    ApplicationInput,
    PolicyReference,
    normalize_application,
)
from .network import Network
from .region import Region, resolve_image, supported_regions

__all__ = [
    "DEFAULT_MEMORY",
    "DEFAULT_PORT",
    "Application",
    "ApplicationInput",
    "PolicyReference",
    "normalize_application",
    "Network",
    "Region",
    "resolve_image",
    "supported_regions",
]
