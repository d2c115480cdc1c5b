"""网络配置模块"""
from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import Field, computed_field

from .base import BaseConfig
from .kube_proxy import KubeProxyConfig
from .provider import CalicoConfig, CustomProvider, KubeRouterConfig, ProviderSettings
from ..types import CIDRString


class DualStack(BaseConfig):
    """双栈配置"""
    enabled: bool = Field(default=False, description="启用 IPv4/IPv6 双栈")
    ipv6_pod_cidr: CIDRString = Field(default="", alias="IPv6podCIDR")
    ipv6_service_cidr: CIDRString = Field(default="", alias="IPv6serviceCIDR")


class NetworkConfig(BaseConfig):
    """网络配置（规范形态）

    由默认化步骤生成，之后只读。提供者配置是三选一的变体，
    calico / kuberouter 两个属性只会有一个非空。
    """
    pod_cidr: CIDRString = Field(default="", alias="podCIDR", description="Pod 网络 CIDR")
    service_cidr: CIDRString = Field(default="", alias="serviceCIDR", description="Service VIP 网络 CIDR")
    cluster_domain: str = Field(default="", alias="clusterDomain", description="集群 DNS 域")
    dual_stack: DualStack = Field(default_factory=DualStack, alias="dualStack")
    provider_settings: ProviderSettings = Field(
        default_factory=KubeRouterConfig, description="当前生效的网络提供者"
    )
    kube_proxy: KubeProxyConfig = Field(default_factory=KubeProxyConfig, alias="kubeProxy")

    @computed_field
    @property
    def provider(self) -> str:
        """网络提供者名称"""
        return self.provider_settings.name

    @property
    def calico(self) -> Optional[CalicoConfig]:
        if isinstance(self.provider_settings, CalicoConfig):
            return self.provider_settings
        return None

    @property
    def kuberouter(self) -> Optional[KubeRouterConfig]:
        if isinstance(self.provider_settings, KubeRouterConfig):
            return self.provider_settings
        return None

    @property
    def is_custom_provider(self) -> bool:
        return isinstance(self.provider_settings, CustomProvider)

    def to_document(self) -> Dict[str, Any]:
        """导出为配置文档（驼峰键，仅包含生效的提供者段）"""
        calico = self.calico
        kuberouter = self.kuberouter
        return {
            "calico": calico.to_document() if calico else None,
            "dualStack": self.dual_stack.to_document(),
            "kubeProxy": self.kube_proxy.to_document(),
            "kuberouter": kuberouter.to_document() if kuberouter else None,
            "podCIDR": self.pod_cidr,
            "provider": self.provider,
            "serviceCIDR": self.service_cidr,
            "clusterDomain": self.cluster_domain,
        }


__all__ = ["DualStack", "NetworkConfig"]
