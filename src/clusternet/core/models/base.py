"""基础配置类"""
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, model_validator


class BaseConfig(BaseModel):
    """基础配置类 - 所有配置模型的基类"""

    model_config = ConfigDict(
        frozen=True,  # 不可变
        extra='forbid',  # 禁止额外字段
        validate_assignment=True,  # 赋值时验证
        use_enum_values=True,  # 使用枚举值
        str_strip_whitespace=True,  # 去除空白字符
        populate_by_name=True,  # 同时接受字段名与文档别名
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # 文档中显式的 null 与缺省等价
        if isinstance(data, Mapping):
            return {k: v for k, v in data.items() if v is not None}
        return data

    def to_document(self) -> dict:
        """按文档别名导出"""
        return self.model_dump(by_alias=True, mode="json")
