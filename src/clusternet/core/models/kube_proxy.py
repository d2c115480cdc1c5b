"""kube-proxy 配置模块"""
from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from .base import BaseConfig
from ..errors import ErrorList, FieldPath, not_supported
from ..types import Duration, KubeProxyMode
from ...config.defaults import (
    KUBEPROXY_DEFAULT_METRICS_BIND_ADDRESS,
    KUBEPROXY_DEFAULT_MODE,
    KUBEPROXY_DEFAULT_SYNC_PERIOD,
)


class KubeProxyIPTablesConfig(BaseConfig):
    """iptables 模式参数"""
    masquerade_all: bool = Field(default=False, alias="masqueradeAll")
    masquerade_bit: Optional[int] = Field(default=None, ge=0, le=31, alias="masqueradeBit")
    min_sync_period: Duration = Field(default=KUBEPROXY_DEFAULT_SYNC_PERIOD, alias="minSyncPeriod")
    sync_period: Duration = Field(default=KUBEPROXY_DEFAULT_SYNC_PERIOD, alias="syncPeriod")


class KubeProxyIPVSConfig(BaseConfig):
    """IPVS 模式参数"""
    exclude_cidrs: List[str] = Field(default_factory=list, alias="excludeCIDRs")
    min_sync_period: Duration = Field(default=KUBEPROXY_DEFAULT_SYNC_PERIOD, alias="minSyncPeriod")
    scheduler: str = Field(default="")
    strict_arp: bool = Field(default=False, alias="strictARP")
    sync_period: Duration = Field(default=KUBEPROXY_DEFAULT_SYNC_PERIOD, alias="syncPeriod")
    tcp_fin_timeout: Duration = Field(default=KUBEPROXY_DEFAULT_SYNC_PERIOD, alias="tcpFinTimeout")
    tcp_timeout: Duration = Field(default=KUBEPROXY_DEFAULT_SYNC_PERIOD, alias="tcpTimeout")
    udp_timeout: Duration = Field(default=KUBEPROXY_DEFAULT_SYNC_PERIOD, alias="udpTimeout")


class KubeProxyConfig(BaseConfig):
    """kube-proxy 配置（默认化之后 iptables/ipvs 均存在）"""
    disabled: bool = Field(default=False)
    mode: str = Field(default=KUBEPROXY_DEFAULT_MODE, description="代理模式 (iptables/ipvs/userspace)")
    metrics_bind_address: str = Field(
        default=KUBEPROXY_DEFAULT_METRICS_BIND_ADDRESS, alias="metricsBindAddress"
    )
    node_port_addresses: List[str] = Field(default_factory=list, alias="nodePortAddresses")
    iptables: KubeProxyIPTablesConfig = Field(default_factory=KubeProxyIPTablesConfig)
    ipvs: KubeProxyIPVSConfig = Field(default_factory=KubeProxyIPVSConfig)

    def validate_config(self, path: FieldPath | None = None) -> ErrorList:
        """校验代理模式；禁用时不做任何检查"""
        if self.disabled:
            return []
        path = path or FieldPath.of("kubeProxy")
        errors: ErrorList = []
        if self.mode not in KubeProxyMode.values():
            errors.append(not_supported(path.child("mode"), self.mode, KubeProxyMode.values()))
        return errors


__all__ = ["KubeProxyIPTablesConfig", "KubeProxyIPVSConfig", "KubeProxyConfig"]
