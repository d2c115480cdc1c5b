"""
结构化错误定义

校验错误以 FieldError 列表的形式累积返回；派生地址计算与加载失败则抛出异常。
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field


class ErrorType(str, Enum):
    """字段错误类型"""
    REQUIRED = "Required value"
    INVALID = "Invalid value"
    NOT_SUPPORTED = "Unsupported value"
    FORBIDDEN = "Forbidden"


class FieldPath(BaseModel):
    """字段路径，例如 dualStack.IPv6podCIDR"""
    model_config = ConfigDict(frozen=True)

    segments: tuple[str, ...] = Field(description="路径片段")

    @classmethod
    def of(cls, *segments: str) -> FieldPath:
        return cls(segments=tuple(segments))

    def child(self, *segments: str) -> FieldPath:
        return FieldPath(segments=self.segments + tuple(segments))

    def __str__(self) -> str:
        return ".".join(self.segments)


class FieldError(BaseModel):
    """单个字段错误：路径、问题值、说明、类型"""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    path: str = Field(description="字段路径")
    type: ErrorType = Field(description="错误类型")
    value: Optional[Any] = Field(default=None, description="问题值")
    detail: str = Field(default="", description="错误说明")

    def __str__(self) -> str:
        parts = [self.path, self.type.value]
        if self.type in (ErrorType.INVALID, ErrorType.NOT_SUPPORTED):
            parts.append(_quote(self.value))
        message = ": ".join(parts)
        if self.detail:
            message = f"{message}: {self.detail}"
        return message


ErrorList = List[FieldError]


def _quote(value: Any) -> str:
    if isinstance(value, str):
        return f'"{value}"'
    return repr(value)


def _path(path: FieldPath | str) -> str:
    return str(path)


def required(path: FieldPath | str, detail: str = "") -> FieldError:
    return FieldError(path=_path(path), type=ErrorType.REQUIRED, detail=detail)


def invalid(path: FieldPath | str, value: Any, detail: str) -> FieldError:
    return FieldError(path=_path(path), type=ErrorType.INVALID, value=value, detail=detail)


def not_supported(path: FieldPath | str, value: Any, valid_values: Sequence[str]) -> FieldError:
    detail = ""
    if valid_values:
        detail = "supported values: " + ", ".join(f'"{v}"' for v in valid_values)
    return FieldError(path=_path(path), type=ErrorType.NOT_SUPPORTED, value=value, detail=detail)


def forbidden(path: FieldPath | str, detail: str) -> FieldError:
    return FieldError(path=_path(path), type=ErrorType.FORBIDDEN, detail=detail)


class NetworkValidationError(ValueError):
    """网络配置校验失败，携带全部字段错误"""

    def __init__(self, errors: Iterable[FieldError]):
        self.errors: ErrorList = list(errors)
        super().__init__("; ".join(str(e) for e in self.errors))


class AddressError(ValueError):
    """派生地址计算失败"""


class LoadError(ValueError):
    """网络配置文件读取或解析失败"""


__all__ = [
    "ErrorType",
    "FieldPath",
    "FieldError",
    "ErrorList",
    "required",
    "invalid",
    "not_supported",
    "forbidden",
    "NetworkValidationError",
    "AddressError",
    "LoadError",
]
