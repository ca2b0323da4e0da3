"""索引模板加载与占位符替换模块.

索引模板以 JSON 文本形式随包发布，其中的占位符 ``${__INDEX__}``
在构建配置时被逐字替换为索引前缀（纯字符串替换，不解析 JSON）。
"""

from importlib import resources

from .exceptions import TemplateLoadError

# 模板中的索引前缀占位符
INDEX_PLACEHOLDER = "${__INDEX__}"

# 内置模板所在的包及资源名
TEMPLATE_PACKAGE = "zipkinflow.index_manager.resources"
DEFAULT_TEMPLATE_RESOURCE = "zipkin_template.json"

# 安装到集群时使用的模板名称
DEFAULT_TEMPLATE_NAME = "zipkin_template"


def read_template_resource(resource: str = DEFAULT_TEMPLATE_RESOURCE) -> str:
    """读取内置索引模板原文.

    Args:
        resource: 资源文件名

    Returns:
        模板文本（UTF-8）

    Raises:
        TemplateLoadError: 资源不存在或无法读取
    """
    try:
        return (
            resources.files(TEMPLATE_PACKAGE)
            .joinpath(resource)
            .read_text(encoding="utf-8")
        )
    except (OSError, ModuleNotFoundError, UnicodeDecodeError) as e:
        raise TemplateLoadError(f"读取内置索引模板 '{resource}' 失败: {str(e)}") from e


def render_index_template(template_text: str, index: str) -> str:
    """将模板中所有占位符替换为索引前缀."""
    return template_text.replace(INDEX_PLACEHOLDER, index)


def load_index_template(index: str, resource: str = DEFAULT_TEMPLATE_RESOURCE) -> str:
    """读取内置模板并替换占位符.

    Args:
        index: 索引前缀
        resource: 资源文件名

    Returns:
        可直接安装到集群的模板文本

    Raises:
        TemplateLoadError: 资源不存在或无法读取
    """
    return render_index_template(read_template_resource(resource), index)
