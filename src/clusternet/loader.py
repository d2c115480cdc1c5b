"""
配置加载

解析（YAML/JSON -> NetworkDocument）与默认化（NetworkDocument -> NetworkConfig）分两步进行。
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping, Optional, Union

import yaml

from .core.errors import LoadError
from .core.models import NetworkConfig, NetworkDocument
from .network.defaulting import apply_defaults
from .utils.logging import get_logger

logger = get_logger(__name__)


def parse_document(text: str) -> NetworkDocument:
    """解析 YAML/JSON 文本（JSON 是 YAML 的子集）"""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise LoadError(f"failed to parse network config: {e}") from e
    if data is not None and not isinstance(data, Mapping):
        raise LoadError(f"network config must be a mapping, got {type(data).__name__}")
    return NetworkDocument.from_mapping(data)


def load_network(data: Optional[Mapping[str, Any]]) -> NetworkConfig:
    """从字典加载并默认化"""
    return apply_defaults(NetworkDocument.from_mapping(data))


def loads_network(text: str) -> NetworkConfig:
    """从 YAML/JSON 文本加载并默认化"""
    return apply_defaults(parse_document(text))


def load_network_file(path: Union[str, Path]) -> NetworkConfig:
    """从文件加载并默认化"""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise LoadError(f"failed to read network config {str(path)!r}: {e}") from e

    config = loads_network(text)
    logger.info("network_loaded", path=str(path), provider=config.provider)
    return config


def dump_network(config: NetworkConfig, fmt: str = "yaml") -> str:
    """把网络配置序列化为 YAML 或 JSON 文本"""
    document = config.to_document()
    if fmt == "json":
        return json.dumps(document, indent=2)
    return yaml.safe_dump(document, sort_keys=False)


__all__ = ["parse_document", "load_network", "loads_network", "load_network_file", "dump_network"]
