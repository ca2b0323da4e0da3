"""Zipkinflow 异常定义模块."""


class ZipkinflowError(Exception):
    """Zipkinflow 基础异常类."""

    pass
