from __future__ import annotations

import ipaddress
from typing import Iterable, List, Union

IPNetwork = Union[ipaddress.IPv4Network, ipaddress.IPv6Network]
IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


def parse_cidr(value: str) -> IPNetwork:
    """解析 CIDR (address/prefix)

    主机位允许非零，返回掩码后的网络。缺少前缀长度时视为无效。

    Raises:
        ValueError: 无法解析
    """
    if not isinstance(value, str) or "/" not in value:
        raise ValueError(f"invalid CIDR address: {value!r}")
    address, _, prefix = value.partition("/")
    if not (prefix.isascii() and prefix.isdigit()):
        raise ValueError(f"invalid CIDR address: {value!r}")
    return ipaddress.ip_network(f"{address}/{int(prefix)}", strict=False)


def parse_cidrs(values: Iterable[str]) -> List[IPNetwork]:
    """按顺序解析多个 CIDR，遇到第一个错误即失败"""
    networks: List[IPNetwork] = []
    for value in values:
        try:
            networks.append(parse_cidr(value))
        except ValueError as e:
            raise ValueError(f"failed to parse cidr value: {value!r} with error: {e}") from e
    return networks


def is_cidr(value: str) -> bool:
    try:
        parse_cidr(value)
    except ValueError:
        return False
    return True


def is_ip(value: str) -> bool:
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return False
    return True


def is_ipv6_string(value: str) -> bool:
    """字符串是否为 IPv6 地址（IPv4 映射地址按 IPv4 处理）"""
    try:
        address = ipaddress.ip_address(value)
    except ValueError:
        return False
    return address.version == 6 and address.ipv4_mapped is None


def get_indexed_ip(network: IPNetwork, index: int) -> IPAddress:
    """返回网络中第 index 个地址（网络地址为第 0 个）"""
    try:
        address = network.network_address + index
    except ValueError:
        address = None
    if address is None or address not in network:
        raise ValueError(
            f"can't generate IP with index {index} from subnet. "
            f"subnet too small. subnet: {str(network)!r}"
        )
    return address


__all__ = [
    "IPNetwork",
    "IPAddress",
    "parse_cidr",
    "parse_cidrs",
    "is_cidr",
    "is_ip",
    "is_ipv6_string",
    "get_indexed_ip",
]
