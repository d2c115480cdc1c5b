"""
Models 包 - 网络配置数据模型

此包包含原始文档模型与规范网络配置模型。
"""

# 基础
from .base import BaseConfig

# 提供者与 kube-proxy
from .provider import CalicoConfig, KubeRouterConfig, CustomProvider, ProviderSettings
from .kube_proxy import KubeProxyConfig, KubeProxyIPTablesConfig, KubeProxyIPVSConfig

# 网络配置
from .network import DualStack, NetworkConfig
from .document import NetworkDocument, KubeProxyDocument

__all__ = [
    # 基础
    "BaseConfig",
    # 提供者
    "CalicoConfig",
    "KubeRouterConfig",
    "CustomProvider",
    "ProviderSettings",
    # kube-proxy
    "KubeProxyConfig",
    "KubeProxyIPTablesConfig",
    "KubeProxyIPVSConfig",
    # 网络配置
    "DualStack",
    "NetworkConfig",
    "NetworkDocument",
    "KubeProxyDocument",
]
