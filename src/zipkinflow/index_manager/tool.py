"""索引模板安装工具类."""

import json
import logging
from typing import Any

from elasticsearch import Elasticsearch
from elasticsearch.exceptions import NotFoundError

from .exceptions import IndexManagerError
from .models import IndexTemplateInfo
from .template import DEFAULT_TEMPLATE_NAME

logger = logging.getLogger(__name__)


class IndexTemplateManager:
    """索引模板管理器.

    负责将构建配置时生成的索引模板安装到集群中。模板使用
    Index Template V2 API（ES 7.8+），mappings 和 settings 位于 template 对象中。

    Args:
        es_client: Elasticsearch 客户端实例

    Examples:
        >>> handle = config.connect()
        >>> manager = IndexTemplateManager(handle.client)
        >>> manager.ensure_index_template(config.index_template)
    """

    def __init__(self, es_client: Elasticsearch):
        if es_client is None:
            raise ValueError("es_client 不能为 None")
        self.es_client = es_client

    @staticmethod
    def _parse_document(document: str | dict[str, Any]) -> dict[str, Any]:
        if isinstance(document, dict):
            return document
        try:
            return json.loads(document)
        except ValueError as e:
            raise IndexManagerError(f"索引模板不是合法的 JSON: {str(e)}") from e

    def index_template_exists(self, template_name: str = DEFAULT_TEMPLATE_NAME) -> bool:
        """检查索引模板是否存在.

        Args:
            template_name: 模板名称

        Returns:
            模板是否存在
        """
        try:
            return bool(self.es_client.indices.exists_index_template(name=template_name))
        except Exception as e:
            raise IndexManagerError(
                f"检查索引模板 '{template_name}' 失败: {str(e)}"
            ) from e

    def put_index_template(
        self,
        document: str | dict[str, Any],
        template_name: str = DEFAULT_TEMPLATE_NAME,
    ) -> bool:
        """创建或覆盖索引模板.

        Args:
            document: 模板文档（JSON 文本或字典）
            template_name: 模板名称

        Returns:
            是否成功创建模板
        """
        body = self._parse_document(document)
        try:
            response = self.es_client.indices.put_index_template(
                name=template_name,
                body=body,
            )
            acknowledged = response.get("acknowledged", False)
            if acknowledged:
                logger.info(f"索引模板 '{template_name}' 创建成功")
                return True
            return False

        except Exception as e:
            raise IndexManagerError(
                f"创建索引模板 '{template_name}' 失败: {str(e)}"
            ) from e

    def ensure_index_template(
        self,
        document: str | dict[str, Any],
        template_name: str = DEFAULT_TEMPLATE_NAME,
    ) -> bool:
        """确保索引模板已安装.

        仅在模板不存在时创建，已存在的模板不会被覆盖。
        首次使用连接时调用，集群不可达会在此处暴露。

        Args:
            document: 模板文档（JSON 文本或字典）
            template_name: 模板名称

        Returns:
            本次是否新建了模板
        """
        if self.index_template_exists(template_name):
            logger.debug(f"索引模板 '{template_name}' 已存在，跳过创建")
            return False
        return self.put_index_template(document, template_name)

    def get_index_template(
        self, template_name: str = DEFAULT_TEMPLATE_NAME
    ) -> IndexTemplateInfo | None:
        """获取索引模板信息.

        Args:
            template_name: 模板名称

        Returns:
            索引模板信息，如果模板不存在则返回 None
        """
        try:
            response = self.es_client.indices.get_index_template(name=template_name)

            for template_data in response.get("index_templates", []):
                if template_data.get("name") == template_name:
                    template_obj = template_data.get("index_template", {})
                    template_inner = template_obj.get("template", {})
                    return IndexTemplateInfo(
                        name=template_name,
                        index_patterns=template_obj.get("index_patterns", []),
                        priority=template_obj.get("priority"),
                        version=template_obj.get("version"),
                        mappings=template_inner.get("mappings", {}),
                        settings=template_inner.get("settings", {}),
                        aliases=template_inner.get("aliases", {}),
                    )

            return None

        except NotFoundError:
            return None
        except Exception as e:
            logger.error(f"获取索引模板 '{template_name}' 失败: {str(e)}")
            return None
