"""
工具模块初始化
导出 IP 处理与日志工具
"""

from .ip import (
    parse_cidr, parse_cidrs, is_cidr, is_ip, is_ipv6_string, get_indexed_ip
)
from .logging import configure_logging, get_logger

__all__ = [
    # IP
    'parse_cidr', 'parse_cidrs', 'is_cidr', 'is_ip', 'is_ipv6_string', 'get_indexed_ip',

    # 日志
    'configure_logging', 'get_logger'
]
