"""连接引导工具模块.

提供 ConnectionBootstrapper 和 ConnectionHandle：按配置逐个解析种子主机，
跳过暂时无法解析的主机，返回开启节点嗅探的连接句柄。

使用示例:
    from zipkinflow.connection import ConnectionBootstrapper, ElasticsearchConfig

    config = ElasticsearchConfig(hosts=["es1:9200", "es2:9200"])
    with ConnectionBootstrapper(config).connect() as handle:
        handle.client.info()
"""

from __future__ import annotations

import logging
import socket
from collections.abc import Callable, Iterable
from typing import Any

from elastic_transport import TransportError
from elasticsearch import Elasticsearch

from .exceptions import (
    ClusterMismatchError,
    HostUnreachableError,
    NoReachableHostError,
)
from .models import (
    ConnectionConfig,
    ElasticsearchConfig,
    HostEndpoint,
    HostResolutionResult,
    ResolvedEndpoint,
)

logger = logging.getLogger(__name__)

Resolver = Callable[[HostEndpoint], str]


def resolve_with_dns(endpoint: HostEndpoint) -> str:
    """通过 DNS 解析主机地址，返回第一个 IP.

    主机名无法通过 IDNA 编码（如空标签、标签超过 63 字符）同样视为无法解析。

    Raises:
        socket.gaierror: 主机名无法解析
    """
    try:
        infos = socket.getaddrinfo(
            endpoint.hostname, endpoint.port, type=socket.SOCK_STREAM
        )
    except UnicodeError as e:
        raise socket.gaierror(socket.EAI_NONAME, f"主机名编码失败: {e}") from e
    return infos[0][4][0]


def parse_hosts(hosts: Iterable[str]) -> list[HostEndpoint]:
    """按输入顺序解析所有主机地址.

    Raises:
        InvalidConfigurationError: 任一主机地址格式错误
    """
    return [HostEndpoint.parse(host) for host in hosts]


def resolve_hosts(
    endpoints: Iterable[HostEndpoint],
    resolver: Resolver = resolve_with_dns,
) -> HostResolutionResult:
    """逐个解析种子主机.

    每个主机独立解析，解析失败的主机记入 errors 并继续处理下一个，
    任何单个主机的失败都不会中断整个过程。

    Args:
        endpoints: 已解析格式的主机地址
        resolver: 主机名解析函数，默认使用 DNS

    Returns:
        HostResolutionResult，resolved 保持输入顺序
    """
    result = HostResolutionResult()
    for endpoint in endpoints:
        try:
            address = resolver(endpoint)
        except socket.gaierror as e:
            error = HostUnreachableError(str(endpoint), str(e))
            logger.warning(f"跳过无法解析的主机: {error}")
            result.errors.append(error)
            continue
        result.resolved.append(ResolvedEndpoint(endpoint=endpoint, address=address))
    return result


class ConnectionHandle:
    """集群连接句柄.

    绑定集群名称和解析成功的种子主机。底层 Elasticsearch 客户端在首次访问
    client 时才创建，节点嗅探与可达性校验都发生在首次使用时。

    Attributes:
        cluster_name: 配置的集群名称
        endpoints: 解析成功的种子主机
        unreachable: 解析失败的种子主机

    Examples:
        >>> with config.connect() as handle:
        ...     handle.verify_cluster()
        ...     handle.client.search(index="zipkin-*")
    """

    def __init__(
        self,
        cluster_name: str,
        resolution: HostResolutionResult,
        connection_config: ConnectionConfig | None = None,
    ) -> None:
        self.cluster_name = cluster_name
        self.endpoints: list[ResolvedEndpoint] = list(resolution.resolved)
        self.unreachable: list[HostUnreachableError] = list(resolution.errors)
        self._connection_config = connection_config or ConnectionConfig()
        self._client: Elasticsearch | None = None

    @property
    def all_unreachable(self) -> bool:
        """是否所有种子主机都解析失败."""
        return not self.endpoints

    def _create_client(self) -> Elasticsearch:
        """根据解析成功的主机和连接池配置创建客户端."""
        if self.all_unreachable:
            hosts = ", ".join(error.host for error in self.unreachable)
            raise NoReachableHostError(
                f"集群 '{self.cluster_name}' 没有可用的种子主机，"
                f"以下主机均无法解析: {hosts or '无'}"
            )

        config = self._connection_config
        kwargs: dict[str, Any] = {
            "hosts": [endpoint.to_node_config(config.scheme) for endpoint in self.endpoints],
            "connections_per_node": config.max_connections,
            "max_retries": config.max_retries,
            "retry_on_timeout": config.retry_on_timeout,
            "request_timeout": config.request_timeout,
            "http_compress": config.http_compress,
            "sniff_on_start": config.sniff_on_start,
            "sniff_on_node_failure": config.sniff_on_node_failure,
            "min_delay_between_sniffing": config.min_delay_between_sniffing,
        }
        try:
            return Elasticsearch(**kwargs)
        except TransportError as e:
            # sniff_on_start 会在构造时嗅探节点
            raise NoReachableHostError(
                f"集群 '{self.cluster_name}' 的种子主机均不可达: {str(e)}"
            ) from e

    @property
    def client(self) -> Elasticsearch:
        """获取底层客户端，首次访问时创建.

        Raises:
            NoReachableHostError: 没有任何解析成功的种子主机，或首次嗅探时节点均不可达
        """
        if self._client is None:
            self._client = self._create_client()
        return self._client

    def verify_cluster(self) -> Any:
        """校验连接到的集群名称与配置一致.

        Returns:
            集群 info 信息

        Raises:
            ClusterMismatchError: 集群名称不一致
            NoReachableHostError: 没有任何解析成功的种子主机
        """
        info = self.client.info()
        actual = info["cluster_name"]
        if actual != self.cluster_name:
            raise ClusterMismatchError(
                f"集群名称不匹配: 期望 '{self.cluster_name}'，实际 '{actual}'"
            )
        return info

    # ============================================================
    # 生命周期管理
    # ============================================================

    def __enter__(self) -> ConnectionHandle:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """关闭底层客户端（如已创建）."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __repr__(self) -> str:
        hosts = ", ".join(str(endpoint.endpoint) for endpoint in self.endpoints)
        return f"ConnectionHandle(cluster_name='{self.cluster_name}', hosts=[{hosts}])"


class ConnectionBootstrapper:
    """连接引导器.

    根据不可变的 ElasticsearchConfig 创建连接句柄：按顺序解析每个种子主机，
    主机格式错误立即抛出 InvalidConfigurationError；DNS 解析失败的主机仅记录日志并跳过。
    无论成功注册多少个主机（包括零个），都会返回句柄，不做健康检查，不做重试。

    Args:
        config: 存储配置
        resolver: 主机名解析函数，默认使用 DNS
    """

    def __init__(
        self,
        config: ElasticsearchConfig,
        resolver: Resolver | None = None,
    ) -> None:
        self._config = config
        self._resolver = resolver or resolve_with_dns

    def connect(self) -> ConnectionHandle:
        """创建新的连接句柄.

        Returns:
            ConnectionHandle 实例，由调用方负责关闭

        Raises:
            InvalidConfigurationError: 主机地址格式错误
        """
        endpoints = parse_hosts(self._config.hosts)
        resolution = resolve_hosts(endpoints, self._resolver)

        if resolution.all_unreachable:
            logger.warning(
                f"集群 '{self._config.cluster_name}' 的所有种子主机均无法解析，"
                f"将在首次使用时失败: {', '.join(self._config.hosts)}"
            )
        else:
            logger.info(
                f"连接集群 '{self._config.cluster_name}'，"
                f"可用种子主机 {len(resolution.resolved)}/{len(endpoints)}"
            )

        return ConnectionHandle(
            cluster_name=self._config.cluster_name,
            resolution=resolution,
            connection_config=self._config.connection,
        )
