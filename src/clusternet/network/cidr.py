"""CIDR 参数构建"""

from __future__ import annotations

from ..core.models import NetworkConfig
from ..utils.ip import is_ipv6_string


def build_service_cidr(config: NetworkConfig, addr: str) -> str:
    """返回 API server 的 service CIDR 参数

    双栈模式下 API server 按 CIDR 顺序决定地址族优先级，
    与监听地址 addr 同族的 CIDR 必须排在前面。
    """
    if not config.dual_stack.enabled:
        return config.service_cidr
    if is_ipv6_string(addr):
        return f"{config.dual_stack.ipv6_service_cidr},{config.service_cidr}"
    return f"{config.service_cidr},{config.dual_stack.ipv6_service_cidr}"


def build_pod_cidr(config: NetworkConfig) -> str:
    """返回 pod CIDR 参数（双栈时 IPv6 总是在前）"""
    if config.dual_stack.enabled:
        return f"{config.dual_stack.ipv6_pod_cidr},{config.pod_cidr}"
    return config.pod_cidr


__all__ = ["build_service_cidr", "build_pod_cidr"]
