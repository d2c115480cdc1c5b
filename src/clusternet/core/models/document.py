"""原始配置文档模块

解析阶段只做结构解析，不填充默认值；默认化由 network.defaulting 负责。
"""
from __future__ import annotations

from typing import Any, List, Mapping, Optional

from pydantic import Field

from .base import BaseConfig
from .kube_proxy import KubeProxyIPTablesConfig, KubeProxyIPVSConfig
from .network import DualStack
from .provider import CalicoConfig, KubeRouterConfig


class KubeProxyDocument(BaseConfig):
    """kube-proxy 原始配置，iptables/ipvs 可缺省"""
    disabled: Optional[bool] = None
    mode: Optional[str] = None
    metrics_bind_address: Optional[str] = Field(default=None, alias="metricsBindAddress")
    node_port_addresses: Optional[List[str]] = Field(default=None, alias="nodePortAddresses")
    iptables: Optional[KubeProxyIPTablesConfig] = None
    ipvs: Optional[KubeProxyIPVSConfig] = None


class NetworkDocument(BaseConfig):
    """网络配置原始文档

    provider 缺省时为 None（默认化阶段补为 kuberouter）；
    显式给出的空字符串会原样保留，由校验阶段报告。
    """
    calico: Optional[CalicoConfig] = None
    dual_stack: DualStack = Field(default_factory=DualStack, alias="dualStack")
    kube_proxy: Optional[KubeProxyDocument] = Field(default=None, alias="kubeProxy")
    kuberouter: Optional[KubeRouterConfig] = None
    pod_cidr: str = Field(default="", alias="podCIDR")
    provider: Optional[str] = None
    service_cidr: str = Field(default="", alias="serviceCIDR")
    cluster_domain: str = Field(default="", alias="clusterDomain")

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> NetworkDocument:
        """从字典解析（None 视为空文档）"""
        return cls.model_validate(data or {})


__all__ = ["KubeProxyDocument", "NetworkDocument"]
