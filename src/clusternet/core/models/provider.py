"""网络提供者配置模块

三种提供者互斥：网络配置只保存当前生效的那一个。
"""
from __future__ import annotations

from typing import Dict, Literal, Union

from pydantic import Field

from .base import BaseConfig
from ..types import CalicoMode, Port
from ...config.defaults import (
    CALICO_DEFAULT_FLEX_VOLUME_DRIVER_PATH,
    CALICO_DEFAULT_MODE,
    CALICO_DEFAULT_MTU,
    CALICO_DEFAULT_OVERLAY,
    CALICO_DEFAULT_VXLAN_PORT,
    CALICO_DEFAULT_VXLAN_VNI,
    KUBEROUTER_DEFAULT_AUTO_MTU,
    KUBEROUTER_DEFAULT_HAIRPIN,
    KUBEROUTER_DEFAULT_METRICS_PORT,
    KUBEROUTER_DEFAULT_MTU,
    PROVIDER_CUSTOM,
)


class CalicoConfig(BaseConfig):
    """Calico 配置"""
    name: Literal["calico"] = Field(default="calico", exclude=True)

    mode: CalicoMode = Field(default=CALICO_DEFAULT_MODE, description="网络模式 (vxlan/ipip/bird)")
    overlay: str = Field(default=CALICO_DEFAULT_OVERLAY, description="Overlay 模式 (Always/CrossSubnet/Never)")
    vxlan_port: Port = Field(default=CALICO_DEFAULT_VXLAN_PORT, alias="vxlanPort")
    vxlan_vni: int = Field(default=CALICO_DEFAULT_VXLAN_VNI, ge=0, alias="vxlanVNI")
    mtu: int = Field(default=CALICO_DEFAULT_MTU, ge=0, description="0 表示自动探测")
    wireguard: bool = Field(default=False, description="启用 WireGuard 加密")
    flex_volume_driver_path: str = Field(
        default=CALICO_DEFAULT_FLEX_VOLUME_DRIVER_PATH, alias="flexVolumeDriverPath"
    )
    ip_autodetection_method: str = Field(default="", alias="ipAutodetectionMethod")
    ipv6_autodetection_method: str = Field(default="", alias="ipV6AutodetectionMethod")
    env_vars: Dict[str, str] = Field(default_factory=dict, alias="envVars")


class KubeRouterConfig(BaseConfig):
    """KubeRouter 配置"""
    name: Literal["kuberouter"] = Field(default="kuberouter", exclude=True)

    mtu: int = Field(default=KUBEROUTER_DEFAULT_MTU, ge=0)
    auto_mtu: bool = Field(default=KUBEROUTER_DEFAULT_AUTO_MTU, alias="autoMTU")
    metrics_port: Port = Field(default=KUBEROUTER_DEFAULT_METRICS_PORT, alias="metricsPort")
    hairpin: str = Field(default=KUBEROUTER_DEFAULT_HAIRPIN, description="Hairpin 模式 (Enabled/Allowed/Disabled)")
    ip_masq: bool = Field(default=False, alias="ipMasq")
    peer_router_ips: str = Field(default="", alias="peerRouterIPs")
    peer_router_asns: str = Field(default="", alias="peerRouterASNs")


class CustomProvider(BaseConfig):
    """外部提供的网络插件，只记录名称"""
    name: str = Field(default=PROVIDER_CUSTOM)


ProviderSettings = Union[CalicoConfig, KubeRouterConfig, CustomProvider]


__all__ = ["CalicoConfig", "KubeRouterConfig", "CustomProvider", "ProviderSettings"]
