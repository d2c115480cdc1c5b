"""
核心模块初始化
导出主要的类型、错误和模型
"""

from .types import ProviderType, CalicoMode, KubeProxyMode, CIDRString

from .errors import (
    ErrorType, FieldPath, FieldError, ErrorList,
    NetworkValidationError, AddressError, LoadError
)

from .models import (
    NetworkConfig, NetworkDocument, DualStack,
    CalicoConfig, KubeRouterConfig, CustomProvider,
    KubeProxyConfig, KubeProxyIPTablesConfig, KubeProxyIPVSConfig
)

__all__ = [
    # 类型
    'ProviderType', 'CalicoMode', 'KubeProxyMode', 'CIDRString',

    # 错误
    'ErrorType', 'FieldPath', 'FieldError', 'ErrorList',
    'NetworkValidationError', 'AddressError', 'LoadError',

    # 模型
    'NetworkConfig', 'NetworkDocument', 'DualStack',
    'CalicoConfig', 'KubeRouterConfig', 'CustomProvider',
    'KubeProxyConfig', 'KubeProxyIPTablesConfig', 'KubeProxyIPVSConfig'
]
