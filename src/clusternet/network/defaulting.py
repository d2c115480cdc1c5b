"""
默认化模块

把解析得到的原始文档补全为规范的 NetworkConfig。纯函数，不会失败。
"""

from __future__ import annotations

from typing import Optional

from ..config.defaults import (
    DEFAULT_CLUSTER_DOMAIN,
    DEFAULT_POD_CIDR,
    DEFAULT_PROVIDER,
    DEFAULT_SERVICE_CIDR,
    PROVIDER_CALICO,
    PROVIDER_KUBEROUTER,
)
from ..core.models import (
    CalicoConfig,
    CustomProvider,
    DualStack,
    KubeProxyConfig,
    KubeProxyIPTablesConfig,
    KubeProxyIPVSConfig,
    KubeRouterConfig,
    NetworkConfig,
    NetworkDocument,
    ProviderSettings,
)
from ..core.models.document import KubeProxyDocument
from ..utils.logging import get_logger

logger = get_logger(__name__)


def default_network() -> NetworkConfig:
    """创建带有默认值的全新网络配置"""
    return NetworkConfig(
        pod_cidr=DEFAULT_POD_CIDR,
        service_cidr=DEFAULT_SERVICE_CIDR,
        provider_settings=KubeRouterConfig(),
        dual_stack=DualStack(),
        kube_proxy=KubeProxyConfig(),
        cluster_domain=DEFAULT_CLUSTER_DOMAIN,
    )


def default_provider_settings(document: NetworkDocument) -> ProviderSettings:
    """根据 provider 选出唯一生效的提供者配置，其余段丢弃"""
    provider = DEFAULT_PROVIDER if document.provider is None else document.provider

    if provider == PROVIDER_CALICO:
        return document.calico or CalicoConfig()
    if provider == PROVIDER_KUBEROUTER:
        return document.kuberouter or KubeRouterConfig()
    return CustomProvider(name=provider)


def default_kube_proxy(document: Optional[KubeProxyDocument]) -> KubeProxyConfig:
    """补全 kube-proxy 配置，iptables 与 ipvs 各自独立补默认值"""
    if document is None:
        return KubeProxyConfig()

    # 只传入文档中给出的字段，其余取模型默认值
    fields = document.model_dump(exclude_none=True, exclude={"iptables", "ipvs"})
    return KubeProxyConfig(
        **fields,
        iptables=document.iptables or KubeProxyIPTablesConfig(),
        ipvs=document.ipvs or KubeProxyIPVSConfig(),
    )


def apply_defaults(document: NetworkDocument) -> NetworkConfig:
    """默认化：原始文档 -> 规范网络配置

    podCIDR / serviceCIDR / clusterDomain / dualStack 原样保留，
    只有 default_network() 才会为它们提供默认值。
    """
    provider_settings = default_provider_settings(document)
    if document.provider is None:
        logger.debug("provider_defaulted", provider=provider_settings.name)

    return NetworkConfig(
        pod_cidr=document.pod_cidr,
        service_cidr=document.service_cidr,
        cluster_domain=document.cluster_domain,
        dual_stack=document.dual_stack,
        provider_settings=provider_settings,
        kube_proxy=default_kube_proxy(document.kube_proxy),
    )


__all__ = ["default_network", "default_provider_settings", "default_kube_proxy", "apply_defaults"]
