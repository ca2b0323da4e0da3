"""连接引导异常定义模块."""

from ..exceptions import ZipkinflowError


class ConnectionBootstrapError(ZipkinflowError):
    """连接引导基础异常类.

    所有连接配置、主机解析相关异常的基类，继承自 ZipkinflowError。
    """

    pass


class ConnectionConfigError(ConnectionBootstrapError):
    """连接池配置校验异常.

    当连接池参数不合法时抛出，例如 max_connections 小于 1、request_timeout 为负数等。
    """

    pass


class InvalidConfigurationError(ConnectionBootstrapError):
    """存储配置无效异常.

    必需字段缺失或为空、hosts 为空、主机地址格式错误、内置索引模板无法读取时抛出。
    总是在构建配置时抛出，不会重试。
    """

    pass


class HostUnreachableError(ConnectionBootstrapError):
    """单个种子主机 DNS 解析失败.

    连接时仅记录日志并跳过该主机，不会由 connect() 抛出。
    """

    def __init__(self, host: str, reason: str) -> None:
        super().__init__(f"主机 '{host}' 无法解析: {reason}")
        self.host = host
        self.reason = reason


class NoReachableHostError(ConnectionBootstrapError):
    """没有任何可用的种子主机.

    当所有主机均解析失败，且首次使用连接句柄时抛出。
    """

    pass


class ClusterMismatchError(ConnectionBootstrapError):
    """集群名称不匹配异常.

    当连接到的集群名称与配置中的 cluster_name 不一致时抛出。
    """

    pass
