"""索引管理器模块.

该模块负责物理索引的命名与索引模板的准备：
- 按天分区的索引名称计算
- 内置索引模板的加载与占位符替换
- 索引模板的安装

示例用法:
    >>> from zipkinflow.index_manager import IndexNameFormatter
    >>> formatter = IndexNameFormatter("zipkin")
    >>> list(formatter.index_names_for_range(start, end))
    ['zipkin-2016-03-14', 'zipkin-2016-03-15']
"""

from .exceptions import (
    IndexManagerError,
    InvalidTimeRangeError,
    TemplateLoadError,
)
from .models import IndexTemplateInfo
from .naming import IndexNameFormatter, IndexNameRange
from .template import (
    DEFAULT_TEMPLATE_NAME,
    DEFAULT_TEMPLATE_RESOURCE,
    INDEX_PLACEHOLDER,
    load_index_template,
    read_template_resource,
    render_index_template,
)
from .tool import IndexTemplateManager

__all__ = [
    # 核心类
    "IndexTemplateManager",
    "IndexNameFormatter",
    "IndexNameRange",
    # 数据模型
    "IndexTemplateInfo",
    # 模板
    "INDEX_PLACEHOLDER",
    "DEFAULT_TEMPLATE_NAME",
    "DEFAULT_TEMPLATE_RESOURCE",
    "read_template_resource",
    "render_index_template",
    "load_index_template",
    # 异常类
    "IndexManagerError",
    "TemplateLoadError",
    "InvalidTimeRangeError",
]
