"""索引管理器数据模型定义模块."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class IndexTemplateInfo:
    """索引模板信息数据类.

    Attributes:
        name: 模板名称
        index_patterns: 索引匹配模式
        priority: 模板优先级
        version: 模板版本
        mappings: 映射配置
        settings: 设置配置
        aliases: 别名配置
    """

    name: str
    index_patterns: list[str] = field(default_factory=list)
    priority: int | None = None
    version: int | None = None
    mappings: dict[str, Any] = field(default_factory=dict)
    settings: dict[str, Any] = field(default_factory=dict)
    aliases: dict[str, Any] = field(default_factory=dict)
