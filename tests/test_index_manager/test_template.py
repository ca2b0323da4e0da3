"""索引模板加载与占位符替换单元测试."""

import json
import unittest

from zipkinflow.index_manager.exceptions import TemplateLoadError
from zipkinflow.index_manager.template import (
    DEFAULT_TEMPLATE_RESOURCE,
    INDEX_PLACEHOLDER,
    load_index_template,
    read_template_resource,
    render_index_template,
)


class TestRenderIndexTemplate(unittest.TestCase):
    """render_index_template 单元测试."""

    def test_replace_all_occurrences(self):
        """测试替换所有占位符."""
        text = '{"index_patterns": ["${__INDEX__}-*"], "aliases": {"${__INDEX__}": {}}}'
        rendered = render_index_template(text, "zipkin")
        self.assertEqual(
            rendered, '{"index_patterns": ["zipkin-*"], "aliases": {"zipkin": {}}}'
        )
        self.assertNotIn(INDEX_PLACEHOLDER, rendered)

    def test_literal_replacement(self):
        """测试逐字替换，不做任何模板引擎解析."""
        text = "${__INDEX__} $index {index} ${__OTHER__}"
        self.assertEqual(
            render_index_template(text, "a$b"), "a$b $index {index} ${__OTHER__}"
        )

    def test_without_placeholder(self):
        """测试没有占位符时原样返回."""
        self.assertEqual(render_index_template("{}", "zipkin"), "{}")


class TestLoadIndexTemplate(unittest.TestCase):
    """内置模板读取单元测试."""

    def test_read_bundled_template(self):
        """测试读取内置模板."""
        text = read_template_resource(DEFAULT_TEMPLATE_RESOURCE)
        self.assertIn(INDEX_PLACEHOLDER, text)

    def test_load_bundled_template(self):
        """测试读取并替换内置模板."""
        document = json.loads(load_index_template("traces"))
        self.assertEqual(document["index_patterns"], ["traces-*"])
        self.assertIn("traces", document["template"]["aliases"])
        properties = document["template"]["mappings"]["properties"]
        self.assertEqual(properties["annotations"]["type"], "nested")
        self.assertEqual(properties["binaryAnnotations"]["type"], "nested")

    def test_missing_resource_raises_error(self):
        """测试资源不存在时抛出异常."""
        with self.assertRaises(TemplateLoadError):
            read_template_resource("missing.json")


if __name__ == "__main__":
    unittest.main()
