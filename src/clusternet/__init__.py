"""
Cluster Network Configuration Package

Defaulting, validation and address derivation for the network section of a
cluster control-plane configuration (pod/service CIDRs, dual-stack, DNS
domain, network provider).
"""

__version__ = "0.1.0"

# Import main components for easy access
from .core.errors import ErrorType, FieldError, AddressError, NetworkValidationError
from .core.models import NetworkConfig, NetworkDocument
from .loader import load_network, loads_network, load_network_file
from .network import (
    apply_defaults, default_network, validate_network, ensure_valid,
    dns_address, internal_api_addresses, build_service_cidr, build_pod_cidr,
)

__all__ = [
    "ErrorType",
    "FieldError",
    "AddressError",
    "NetworkValidationError",
    "NetworkConfig",
    "NetworkDocument",
    "load_network",
    "loads_network",
    "load_network_file",
    "apply_defaults",
    "default_network",
    "validate_network",
    "ensure_valid",
    "dns_address",
    "internal_api_addresses",
    "build_service_cidr",
    "build_pod_cidr",
]
