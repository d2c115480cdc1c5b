"""
网络配置流水线：默认化 -> 校验 -> 派生
"""

from .defaulting import apply_defaults, default_network
from .validation import validate_network, ensure_valid, is_dns_name
from .addressing import dns_address, internal_api_addresses
from .cidr import build_service_cidr, build_pod_cidr

__all__ = [
    # 默认化
    "apply_defaults",
    "default_network",
    # 校验
    "validate_network",
    "ensure_valid",
    "is_dns_name",
    # 派生
    "dns_address",
    "internal_api_addresses",
    "build_service_cidr",
    "build_pod_cidr",
]
