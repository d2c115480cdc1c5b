"""
类型定义模块
网络提供者、代理模式等枚举以及约束类型
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated

from pydantic import Field


class ProviderType(str, Enum):
    """网络提供者类型"""
    KUBEROUTER = "kuberouter"
    CALICO = "calico"
    CUSTOM = "custom"

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]


class CalicoMode(str, Enum):
    """Calico 网络模式"""
    VXLAN = "vxlan"
    IPIP = "ipip"
    BIRD = "bird"


class KubeProxyMode(str, Enum):
    """kube-proxy 代理模式"""
    IPTABLES = "iptables"
    IPVS = "ipvs"
    USERSPACE = "userspace"

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]


# 约束类型
CIDRString = Annotated[str, Field(description="CIDR 地址 (address/prefix)")]
Duration = Annotated[str, Field(description="时长，例如 0s、30s、1m")]
Port = Annotated[int, Field(ge=0, le=65535, description="端口")]


__all__ = [
    "ProviderType",
    "CalicoMode",
    "KubeProxyMode",
    "CIDRString",
    "Duration",
    "Port",
]
