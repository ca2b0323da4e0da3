"""Zipkinflow - Zipkin 追踪数据的 Elasticsearch 存储引导工具包.

负责将少量连接参数转换为可用的存储入口。

主要功能:
    - ElasticsearchConfig: 校验并固化连接配置，预先生成索引模板
    - ConnectionBootstrapper: 容忍部分种子主机不可用的连接引导
    - IndexNameFormatter: 按 UTC 天分区的物理索引命名
    - IndexTemplateManager: 将索引模板安装到集群

使用示例:
    from zipkinflow import ElasticsearchConfig, IndexTemplateManager

    config = ElasticsearchConfig(hosts=["es1:9200", "es2:9200"])
    handle = config.connect()
    IndexTemplateManager(handle.client).ensure_index_template(config.index_template)
    index = config.index_name_formatter.index_name_for(timestamp)
"""

__version__ = "0.1.0"

# 导出连接引导
from zipkinflow.connection import (
    ConnectionBootstrapper,
    ConnectionConfig,
    ConnectionHandle,
    ElasticsearchConfig,
    ElasticsearchConfigBuilder,
    HostEndpoint,
)

# 导出异常
from zipkinflow.connection.exceptions import (
    ClusterMismatchError,
    ConnectionBootstrapError,
    HostUnreachableError,
    InvalidConfigurationError,
    NoReachableHostError,
)
from zipkinflow.exceptions import ZipkinflowError

# 导出索引管理
from zipkinflow.index_manager import (
    IndexManagerError,
    IndexNameFormatter,
    IndexNameRange,
    IndexTemplateManager,
    InvalidTimeRangeError,
    TemplateLoadError,
)

__all__ = [
    # 版本
    "__version__",
    # 连接引导
    "ElasticsearchConfig",
    "ElasticsearchConfigBuilder",
    "ConnectionConfig",
    "ConnectionBootstrapper",
    "ConnectionHandle",
    "HostEndpoint",
    # 索引管理
    "IndexNameFormatter",
    "IndexNameRange",
    "IndexTemplateManager",
    # 异常
    "ZipkinflowError",
    "ConnectionBootstrapError",
    "InvalidConfigurationError",
    "HostUnreachableError",
    "NoReachableHostError",
    "ClusterMismatchError",
    "IndexManagerError",
    "TemplateLoadError",
    "InvalidTimeRangeError",
]
