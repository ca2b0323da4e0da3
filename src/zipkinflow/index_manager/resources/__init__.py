"""随包发布的索引模板资源."""
