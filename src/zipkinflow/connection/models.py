"""连接引导数据模型定义模块.

提供连接引导相关的数据模型，包括：
- ConnectionConfig: 客户端连接池与嗅探配置
- HostEndpoint: 解析后的 host:port
- ResolvedEndpoint: 完成 DNS 解析的主机
- HostResolutionResult: 逐个解析种子主机的结果
- ElasticsearchConfig: 不可变的存储配置
- ElasticsearchConfigBuilder: 存储配置构建器
"""

from __future__ import annotations

import json
import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from ..index_manager.exceptions import TemplateLoadError
from ..index_manager.naming import IndexNameFormatter
from ..index_manager.template import DEFAULT_TEMPLATE_RESOURCE, load_index_template
from .exceptions import (
    ConnectionConfigError,
    HostUnreachableError,
    InvalidConfigurationError,
)

if TYPE_CHECKING:
    from .tool import ConnectionHandle

DEFAULT_CLUSTER = "elasticsearch"
DEFAULT_HOSTS: tuple[str, ...] = ("localhost:9200",)
DEFAULT_INDEX = "zipkin"

# 环境变量名称
ENV_CLUSTER = "ES_CLUSTER"
ENV_HOSTS = "ES_HOSTS"
ENV_INDEX = "ES_INDEX"


def split_hosts(value: str) -> tuple[str, ...]:
    """将逗号分隔的主机列表拆分为元组，忽略空白项."""
    return tuple(part.strip() for part in value.split(",") if part.strip())


@dataclass(frozen=True)
class ConnectionConfig:
    """连接池配置模型.

    定义 ES 客户端的连接池参数、重试策略和节点嗅探策略。
    嗅探默认开启，客户端可在连接后发现种子列表之外的集群节点。

    Attributes:
        max_connections: 每个节点的最大连接数，默认 10，必须 >= 1
        max_retries: 最大重试次数，默认 3
        retry_on_timeout: 超时是否重试，默认 True
        request_timeout: 请求超时时间（秒），默认 30，必须 >= 0
        http_compress: 是否启用 HTTP 压缩，默认 True
        scheme: 节点协议，默认 "http"
        sniff_on_start: 首次使用时是否嗅探节点，默认 True
        sniff_on_node_failure: 节点失败时是否嗅探，默认 True
        min_delay_between_sniffing: 两次嗅探的最小间隔（秒），默认 60

    Raises:
        ConnectionConfigError: 当参数不合法时抛出
    """

    max_connections: int = 10
    max_retries: int = 3
    retry_on_timeout: bool = True
    request_timeout: int = 30
    http_compress: bool = True
    scheme: str = "http"
    sniff_on_start: bool = True
    sniff_on_node_failure: bool = True
    min_delay_between_sniffing: int = 60

    def __post_init__(self) -> None:
        """校验连接池配置参数合法性."""
        if self.max_connections < 1:
            raise ConnectionConfigError(
                f"max_connections 必须 >= 1，当前值: {self.max_connections}"
            )
        if self.request_timeout < 0:
            raise ConnectionConfigError(
                f"request_timeout 必须 >= 0，当前值: {self.request_timeout}"
            )
        if self.scheme not in ("http", "https"):
            raise ConnectionConfigError(
                f"scheme 必须为 http 或 https，当前值: {self.scheme}"
            )


@dataclass(frozen=True)
class HostEndpoint:
    """解析后的种子主机地址.

    每次连接时从 "host:port" 字符串临时构造，不做持久化。

    Attributes:
        hostname: 主机名或 IP
        port: 端口号
    """

    hostname: str
    port: int

    @classmethod
    def parse(cls, text: str) -> HostEndpoint:
        """解析 "host:port" 字符串.

        支持 ``host:port``、``ip:port`` 和 ``[ipv6]:port``。

        Args:
            text: 主机地址字符串

        Returns:
            HostEndpoint 实例

        Raises:
            InvalidConfigurationError: 缺少端口、主机为空或端口不合法
        """
        if not isinstance(text, str) or not text.strip():
            raise InvalidConfigurationError(f"主机地址不能为空: {text!r}")

        value = text.strip()
        if value.startswith("["):
            closing = value.find("]")
            if closing == -1 or not value[closing + 1 :].startswith(":"):
                raise InvalidConfigurationError(
                    f"主机地址 '{text}' 格式无效，应为 [ipv6]:port"
                )
            hostname = value[1:closing]
            port_text = value[closing + 2 :]
        else:
            if value.count(":") != 1:
                raise InvalidConfigurationError(
                    f"主机地址 '{text}' 格式无效，应为 host:port"
                )
            hostname, port_text = value.split(":")

        if not hostname:
            raise InvalidConfigurationError(f"主机地址 '{text}' 缺少主机名")
        if not port_text.isdigit():
            raise InvalidConfigurationError(f"主机地址 '{text}' 的端口无效: {port_text!r}")

        port = int(port_text)
        if not 0 < port <= 65535:
            raise InvalidConfigurationError(
                f"主机地址 '{text}' 的端口超出范围 (1-65535): {port}"
            )
        return cls(hostname=hostname, port=port)

    def __str__(self) -> str:
        if ":" in self.hostname:
            return f"[{self.hostname}]:{self.port}"
        return f"{self.hostname}:{self.port}"


@dataclass(frozen=True)
class ResolvedEndpoint:
    """完成 DNS 解析的种子主机.

    解析仅用于确认主机当前可用，注册到客户端的仍是原始主机名，
    以保证 TLS 证书校验和 Host 请求头使用主机名。

    Attributes:
        endpoint: 原始主机地址
        address: DNS 解析得到的 IP 地址
    """

    endpoint: HostEndpoint
    address: str

    def to_node_config(self, scheme: str = "http") -> dict[str, Any]:
        """转换为 Elasticsearch 客户端可接受的节点配置."""
        return {"scheme": scheme, "host": self.endpoint.hostname, "port": self.endpoint.port}


@dataclass
class HostResolutionResult:
    """逐个解析种子主机的结果.

    Attributes:
        resolved: 解析成功的主机，保持输入顺序
        errors: 解析失败的主机
    """

    resolved: list[ResolvedEndpoint] = field(default_factory=list)
    errors: list[HostUnreachableError] = field(default_factory=list)

    @property
    def all_unreachable(self) -> bool:
        """是否没有任何主机解析成功."""
        return not self.resolved


@dataclass(frozen=True)
class ElasticsearchConfig:
    """存储连接配置（不可变）.

    构造时完成全部校验：必需字段不能为空、每个主机地址都必须能解析为
    host:port；随后读取内置索引模板并将占位符替换为索引前缀，
    最后构造绑定到索引前缀的 IndexNameFormatter。
    任一步骤失败都会抛出 InvalidConfigurationError，不会暴露半初始化的对象。

    Attributes:
        cluster_name: 集群名称，默认 "elasticsearch"
        hosts: 种子主机列表（host:port），默认 ("localhost:9200",)
        index: 索引前缀，默认 "zipkin"
        connection: 客户端连接池配置
        template_resource: 内置索引模板资源名
        index_template: 已替换占位符的索引模板文本（构造时计算）
        index_name_formatter: 绑定到索引前缀的索引名称格式化器（构造时计算）

    Raises:
        InvalidConfigurationError: 配置无效时抛出

    Examples:
        >>> config = ElasticsearchConfig(hosts=["es1:9200", "es2:9200"], index="traces")
        >>> config.index_name_formatter.index_pattern()
        'traces-*'
    """

    cluster_name: str = DEFAULT_CLUSTER
    hosts: Sequence[str] = DEFAULT_HOSTS
    index: str = DEFAULT_INDEX
    connection: ConnectionConfig = field(default_factory=ConnectionConfig)
    template_resource: str = field(default=DEFAULT_TEMPLATE_RESOURCE, repr=False)
    index_template: str = field(init=False, repr=False)
    index_name_formatter: IndexNameFormatter = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """校验配置并计算索引模板与索引名称格式化器."""
        _require_text(self.cluster_name, "cluster_name")
        _require_text(self.index, "index")

        hosts = self.hosts
        if isinstance(hosts, str):
            hosts = split_hosts(hosts)
        if hosts is None or len(hosts) == 0:
            raise InvalidConfigurationError(
                "hosts 不能为空，请提供至少一个 host:port 格式的节点地址"
            )
        hosts = tuple(hosts)
        for host in hosts:
            HostEndpoint.parse(host)

        if self.connection is None:
            raise InvalidConfigurationError("connection 不能为 None")

        try:
            index_template = load_index_template(self.index, self.template_resource)
        except TemplateLoadError as e:
            raise InvalidConfigurationError(
                f"无法加载内置索引模板，构建产物可能已损坏: {str(e)}"
            ) from e

        object.__setattr__(self, "hosts", hosts)
        object.__setattr__(self, "index_template", index_template)
        object.__setattr__(self, "index_name_formatter", IndexNameFormatter(self.index))

    @classmethod
    def builder(cls) -> ElasticsearchConfigBuilder:
        """创建配置构建器."""
        return ElasticsearchConfigBuilder()

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ElasticsearchConfig:
        """从环境变量读取配置.

        读取 ES_CLUSTER、ES_HOSTS（逗号分隔）、ES_INDEX，未设置时使用默认值。

        Args:
            environ: 环境变量映射，默认为 os.environ

        Returns:
            ElasticsearchConfig 实例

        Raises:
            InvalidConfigurationError: 配置无效时抛出
        """
        if environ is None:
            environ = os.environ

        builder = cls.builder()
        if ENV_CLUSTER in environ:
            builder.set_cluster(environ[ENV_CLUSTER])
        if ENV_HOSTS in environ:
            builder.set_hosts(split_hosts(environ[ENV_HOSTS]))
        if ENV_INDEX in environ:
            builder.set_index_prefix(environ[ENV_INDEX])
        return builder.build()

    @property
    def index_template_body(self) -> dict[str, Any]:
        """以字典形式返回索引模板."""
        return json.loads(self.index_template)

    def connect(self) -> ConnectionHandle:
        """按当前配置创建新的连接句柄.

        每次调用都会创建新的句柄，句柄的生命周期由调用方管理。

        Returns:
            ConnectionHandle 实例
        """
        from .tool import ConnectionBootstrapper

        return ConnectionBootstrapper(self).connect()


def _require_text(value: Any, field_name: str) -> None:
    if value is None:
        raise InvalidConfigurationError(f"{field_name} 不能为 None")
    if not isinstance(value, str) or not value.strip():
        raise InvalidConfigurationError(f"{field_name} 必须为非空字符串，当前值: {value!r}")


class ElasticsearchConfigBuilder:
    """存储配置构建器.

    在默认值之上累积覆盖项，build() 时一次性构造不可变的 ElasticsearchConfig。
    所有 set_* 方法支持链式调用。

    Examples:
        >>> config = (
        ...     ElasticsearchConfig.builder()
        ...     .set_cluster("zipkin-cluster")
        ...     .set_hosts(["es1:9200", "es2:9200"])
        ...     .set_index_prefix("zipkin")
        ...     .build()
        ... )
    """

    def __init__(self) -> None:
        self._cluster: str | None = DEFAULT_CLUSTER
        self._hosts: Sequence[str] | None = DEFAULT_HOSTS
        self._index: str | None = DEFAULT_INDEX
        self._connection: ConnectionConfig = ConnectionConfig()

    def set_cluster(self, cluster: str | None) -> ElasticsearchConfigBuilder:
        """设置集群名称，默认 "elasticsearch"."""
        self._cluster = cluster
        return self

    def set_hosts(self, hosts: Sequence[str] | str | None) -> ElasticsearchConfigBuilder:
        """设置种子主机列表.

        host:port 格式，也可传入逗号分隔的字符串。默认 "localhost:9200"。
        """
        self._hosts = hosts
        return self

    def set_index_prefix(self, index: str | None) -> ElasticsearchConfigBuilder:
        """设置生成按天索引名称时使用的索引前缀，默认 "zipkin"."""
        self._index = index
        return self

    def set_connection_config(self, config: ConnectionConfig) -> ElasticsearchConfigBuilder:
        """设置客户端连接池配置."""
        self._connection = config
        return self

    def build(self) -> ElasticsearchConfig:
        """构建不可变的存储配置.

        Returns:
            ElasticsearchConfig 实例

        Raises:
            InvalidConfigurationError: 配置无效时抛出
        """
        return ElasticsearchConfig(
            cluster_name=self._cluster,
            hosts=self._hosts,
            index=self._index,
            connection=self._connection,
        )
