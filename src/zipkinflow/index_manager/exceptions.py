"""索引管理器异常定义模块."""

from ..exceptions import ZipkinflowError


class IndexManagerError(ZipkinflowError):
    """索引管理器基础异常类."""

    pass


class TemplateLoadError(IndexManagerError):
    """内置索引模板读取失败异常."""

    pass


class InvalidTimeRangeError(IndexManagerError):
    """无效的时间范围异常（如 start > end）."""

    pass
