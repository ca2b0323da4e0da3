"""存储引导使用示例.

本文件展示了如何构建存储配置、连接集群、安装索引模板并计算按天分区的索引名称。
"""

import logging
from datetime import UTC, datetime, timedelta

from zipkinflow import (
    ElasticsearchConfig,
    IndexTemplateManager,
    NoReachableHostError,
)

logging.basicConfig(level=logging.INFO)


# ==================== 示例1：构建配置 ====================
def example_build_config() -> ElasticsearchConfig:
    """通过构建器创建配置."""
    config = (
        ElasticsearchConfig.builder()
        .set_cluster("elasticsearch")
        .set_hosts(["localhost:9200", "es-unknown-host:9200"])
        .set_index_prefix("zipkin")
        .build()
    )
    print(f"索引模式: {config.index_name_formatter.index_pattern()}")
    return config


# ==================== 示例2：连接并安装模板 ====================
def example_connect(config: ElasticsearchConfig) -> None:
    """连接集群，无法解析的主机会被跳过."""
    with config.connect() as handle:
        print(f"可用主机: {[str(e.endpoint) for e in handle.endpoints]}")
        print(f"跳过主机: {[e.host for e in handle.unreachable]}")
        try:
            handle.verify_cluster()
            created = IndexTemplateManager(handle.client).ensure_index_template(
                config.index_template
            )
            print(f"索引模板新建: {created}")
        except NoReachableHostError as e:
            print(f"没有可用主机: {e}")


# ==================== 示例3：计算索引名称 ====================
def example_index_names(config: ElasticsearchConfig) -> None:
    """计算写入索引和查询需要覆盖的索引."""
    formatter = config.index_name_formatter
    now = datetime.now(tz=UTC)
    print(f"写入索引: {formatter.index_name_for(now)}")
    print(f"最近三天: {list(formatter.index_names_for_range(now - timedelta(days=2), now))}")


if __name__ == "__main__":
    cfg = example_build_config()
    example_index_names(cfg)
    example_connect(cfg)
