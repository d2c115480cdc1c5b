"""
校验模块

一次遍历收集全部问题，按检查顺序返回；任何一项失败都不影响后续检查。
"""

from __future__ import annotations

import re
from typing import Optional

from ..config.defaults import PROVIDER_CALICO
from ..core.errors import (
    ErrorList,
    FieldPath,
    NetworkValidationError,
    forbidden,
    invalid,
    not_supported,
    required,
)
from ..core.models import NetworkConfig
from ..core.types import CalicoMode, ProviderType
from ..utils.ip import is_cidr, is_ip
from ..utils.logging import get_logger

logger = get_logger(__name__)

_DNS_NAME = re.compile(
    r"^([a-zA-Z0-9_]{1}[a-zA-Z0-9_-]{0,62}){1}(\.[a-zA-Z0-9_]{1}[a-zA-Z0-9_-]{0,62})*[\._]?$"
)

INVALID_CIDR = "invalid CIDR address"
INVALID_DNS_NAME = "invalid DNS name"
CALICO_DUAL_STACK_MODE_ONLY = f"dual stack for calico is only supported for mode `{CalicoMode.BIRD.value}`"


def is_dns_name(value: str) -> bool:
    """语法上是否为合法 DNS 名称（IP 地址不算）"""
    if not value or len(value.replace(".", "")) > 255:
        return False
    return not is_ip(value) and _DNS_NAME.fullmatch(value) is not None


def validate_network(config: Optional[NetworkConfig]) -> ErrorList:
    """校验网络配置，返回全部字段错误（None 视为有效）"""
    if config is None:
        return []

    errors: ErrorList = []
    provider = config.provider

    if provider == "":
        errors.append(required(FieldPath.of("provider")))
    elif provider not in ProviderType.values():
        errors.append(not_supported(FieldPath.of("provider"), provider, ProviderType.values()))

    if not is_cidr(config.pod_cidr):
        errors.append(invalid(FieldPath.of("podCIDR"), config.pod_cidr, INVALID_CIDR))

    if not is_cidr(config.service_cidr):
        errors.append(invalid(FieldPath.of("serviceCIDR"), config.service_cidr, INVALID_CIDR))

    if not is_dns_name(config.cluster_domain):
        errors.append(invalid(FieldPath.of("clusterDomain"), config.cluster_domain, INVALID_DNS_NAME))

    dual_stack = config.dual_stack
    if dual_stack.enabled:
        if provider == PROVIDER_CALICO:
            calico = config.calico
            if calico is None or calico.mode != CalicoMode.BIRD.value:
                errors.append(forbidden(FieldPath.of("calico", "mode"), CALICO_DUAL_STACK_MODE_ONLY))
        if not is_cidr(dual_stack.ipv6_pod_cidr):
            errors.append(invalid(
                FieldPath.of("dualStack", "IPv6podCIDR"), dual_stack.ipv6_pod_cidr, INVALID_CIDR
            ))
        if not is_cidr(dual_stack.ipv6_service_cidr):
            errors.append(invalid(
                FieldPath.of("dualStack", "IPv6serviceCIDR"), dual_stack.ipv6_service_cidr, INVALID_CIDR
            ))

    errors.extend(config.kube_proxy.validate_config())

    logger.debug("network_validated", provider=provider, error_count=len(errors))
    return errors


def ensure_valid(config: Optional[NetworkConfig]) -> Optional[NetworkConfig]:
    """校验失败时抛出 NetworkValidationError，否则原样返回配置"""
    errors = validate_network(config)
    if errors:
        raise NetworkValidationError(errors)
    return config


__all__ = ["is_dns_name", "validate_network", "ensure_valid"]
