"""
派生地址计算

集群 DNS 服务地址与 API server 内部地址都从 service CIDR 推导，
失败时抛出 AddressError。
"""

from __future__ import annotations

import ipaddress
from typing import List

from ..config.defaults import (
    DNS_ADDRESS_OFFSET,
    DNS_ADDRESS_SMALL_BLOCK_OFFSET,
    DNS_ADDRESS_SMALL_BLOCK_PREFIX,
    INTERNAL_API_ADDRESS_INDEX,
)
from ..core.errors import AddressError
from ..core.models import NetworkConfig
from ..utils.ip import get_indexed_ip, is_ipv6_string, parse_cidr, parse_cidrs
from ..utils.logging import get_logger

logger = get_logger(__name__)


def dns_address(config: NetworkConfig) -> str:
    """计算集群 DNS 服务地址

    前缀短于 /29 时取网络地址最后一个字节 +10，否则 +2。
    字节加法按 256 回绕，结果落在网段之外即报错。
    """
    try:
        network = parse_cidr(config.service_cidr)
    except ValueError as e:
        raise AddressError(f"failed to parse service CIDR {config.service_cidr!r}: {e}") from e

    width = 16 if is_ipv6_string(str(network.network_address)) else 4
    packed = bytearray(network.network_address.packed[-width:])

    if network.prefixlen < DNS_ADDRESS_SMALL_BLOCK_PREFIX:
        offset = DNS_ADDRESS_OFFSET
    else:
        offset = DNS_ADDRESS_SMALL_BLOCK_OFFSET
    packed[-1] = (packed[-1] + offset) & 0xFF

    address = ipaddress.ip_address(bytes(packed))
    if address not in network:
        raise AddressError(f"failed to calculate a valid DNS address: {str(address)!r}")

    logger.debug("dns_address_calculated", service_cidr=config.service_cidr, address=str(address))
    return str(address)


def internal_api_addresses(config: NetworkConfig) -> List[str]:
    """计算 API server 内部地址：每个 service CIDR 的第 1 个地址

    顺序与 CIDR 顺序一致：先 serviceCIDR，双栈时再 IPv6serviceCIDR。
    """
    cidrs = [config.service_cidr]
    if config.dual_stack.enabled:
        cidrs.append(config.dual_stack.ipv6_service_cidr)

    try:
        networks = parse_cidrs(cidrs)
    except ValueError as e:
        raise AddressError(f"can't parse service CIDR to build internal API address: {e}") from e

    addresses: List[str] = []
    for network in networks:
        try:
            addresses.append(str(get_indexed_ip(network, INTERNAL_API_ADDRESS_INDEX)))
        except ValueError as e:
            raise AddressError(f"can't build internal API address: {e}") from e
    return addresses


__all__ = ["dns_address", "internal_api_addresses"]
