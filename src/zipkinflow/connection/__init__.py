"""连接引导模块 - 根据存储配置创建容错的 Elasticsearch 连接句柄.

主要组件:
    - ElasticsearchConfig: 不可变存储配置（集群名、种子主机、索引前缀、索引模板）
    - ElasticsearchConfigBuilder: 存储配置构建器
    - ConnectionBootstrapper: 连接引导器，跳过暂时无法解析的种子主机
    - ConnectionHandle: 连接句柄，首次使用时创建客户端并嗅探节点
    - ConnectionConfig: 连接池与嗅探配置

使用示例:
    from zipkinflow.connection import ElasticsearchConfig

    config = ElasticsearchConfig.builder().set_hosts(["es1:9200"]).build()
    handle = config.connect()
"""

from .exceptions import (
    ClusterMismatchError,
    ConnectionBootstrapError,
    ConnectionConfigError,
    HostUnreachableError,
    InvalidConfigurationError,
    NoReachableHostError,
)
from .models import (
    DEFAULT_CLUSTER,
    DEFAULT_HOSTS,
    DEFAULT_INDEX,
    ConnectionConfig,
    ElasticsearchConfig,
    ElasticsearchConfigBuilder,
    HostEndpoint,
    HostResolutionResult,
    ResolvedEndpoint,
    split_hosts,
)
from .tool import (
    ConnectionBootstrapper,
    ConnectionHandle,
    parse_hosts,
    resolve_hosts,
    resolve_with_dns,
)

__all__ = [
    # 引导器
    "ConnectionBootstrapper",
    "ConnectionHandle",
    "parse_hosts",
    "resolve_hosts",
    "resolve_with_dns",
    # 模型
    "ElasticsearchConfig",
    "ElasticsearchConfigBuilder",
    "ConnectionConfig",
    "HostEndpoint",
    "ResolvedEndpoint",
    "HostResolutionResult",
    "split_hosts",
    "DEFAULT_CLUSTER",
    "DEFAULT_HOSTS",
    "DEFAULT_INDEX",
    # 异常
    "ConnectionBootstrapError",
    "ConnectionConfigError",
    "InvalidConfigurationError",
    "HostUnreachableError",
    "NoReachableHostError",
    "ClusterMismatchError",
]
