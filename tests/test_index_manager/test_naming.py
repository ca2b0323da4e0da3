"""索引名称格式化器单元测试."""

import unittest
from datetime import UTC, date, datetime, timedelta, timezone

from zipkinflow.index_manager import IndexNameFormatter
from zipkinflow.index_manager.exceptions import InvalidTimeRangeError


class TestIndexNameFor(unittest.TestCase):
    """index_name_for 单元测试."""

    def setUp(self):
        self.formatter = IndexNameFormatter("zipkin")

    def test_end_of_day(self):
        """测试一天中最后一秒."""
        ts = datetime(2016, 3, 15, 23, 59, 59, tzinfo=UTC)
        self.assertEqual(self.formatter.index_name_for(ts), "zipkin-2016-03-15")

    def test_deterministic(self):
        """测试相同输入得到相同结果."""
        ts = datetime(2016, 3, 15, 12, 0, tzinfo=UTC)
        self.assertEqual(
            self.formatter.index_name_for(ts), self.formatter.index_name_for(ts)
        )

    def test_same_day_same_index(self):
        """测试同一 UTC 日映射到同一索引."""
        start = datetime(2016, 3, 15, 0, 0, 0, tzinfo=UTC)
        end = datetime(2016, 3, 15, 23, 59, 59, 999999, tzinfo=UTC)
        self.assertEqual(
            self.formatter.index_name_for(start), self.formatter.index_name_for(end)
        )

    def test_day_boundary_different_index(self):
        """测试跨越 UTC 日界时映射到不同索引."""
        before = datetime(2016, 3, 15, 23, 59, 59, tzinfo=UTC)
        after = before + timedelta(seconds=1)
        self.assertEqual(self.formatter.index_name_for(after), "zipkin-2016-03-16")
        self.assertNotEqual(
            self.formatter.index_name_for(before), self.formatter.index_name_for(after)
        )

    def test_aware_datetime_converted_to_utc(self):
        """测试带时区的时间转换为 UTC 日期."""
        ts = datetime(2016, 3, 16, 1, 0, tzinfo=timezone(timedelta(hours=8)))
        self.assertEqual(self.formatter.index_name_for(ts), "zipkin-2016-03-15")

    def test_naive_datetime_treated_as_utc(self):
        """测试 naive datetime 视为 UTC."""
        ts = datetime(2016, 3, 15, 23, 59, 59)
        self.assertEqual(self.formatter.index_name_for(ts), "zipkin-2016-03-15")

    def test_epoch_millis(self):
        """测试毫秒级时间戳."""
        millis = int(datetime(2016, 3, 15, 23, 59, 59, tzinfo=UTC).timestamp() * 1000)
        self.assertEqual(self.formatter.index_name_for(millis), "zipkin-2016-03-15")

    def test_date(self):
        """测试 date 对象."""
        self.assertEqual(
            self.formatter.index_name_for(date(2016, 1, 2)), "zipkin-2016-01-02"
        )

    def test_custom_prefix(self):
        """测试自定义前缀."""
        formatter = IndexNameFormatter("traces")
        self.assertEqual(formatter.index_name_for(date(2016, 1, 2)), "traces-2016-01-02")

    def test_index_pattern(self):
        """测试通配符索引模式."""
        self.assertEqual(self.formatter.index_pattern(), "zipkin-*")


class TestIndexNamesForRange(unittest.TestCase):
    """index_names_for_range 单元测试."""

    def setUp(self):
        self.formatter = IndexNameFormatter("zipkin")

    def test_three_days(self):
        """测试跨越三个 UTC 日的时间范围."""
        start = datetime(2016, 3, 14, 22, 0, tzinfo=UTC)
        end = datetime(2016, 3, 16, 1, 0, tzinfo=UTC)
        names = list(self.formatter.index_names_for_range(start, end))
        self.assertEqual(
            names,
            ["zipkin-2016-03-14", "zipkin-2016-03-15", "zipkin-2016-03-16"],
        )

    def test_single_day(self):
        """测试同一天内的时间范围."""
        start = datetime(2016, 3, 15, 1, 0, tzinfo=UTC)
        end = datetime(2016, 3, 15, 2, 0, tzinfo=UTC)
        names = self.formatter.index_names_for_range(start, end)
        self.assertEqual(list(names), ["zipkin-2016-03-15"])
        self.assertEqual(len(names), 1)

    def test_restartable(self):
        """测试序列可以重复迭代."""
        names = self.formatter.index_names_for_range(date(2016, 2, 28), date(2016, 3, 1))
        self.assertEqual(list(names), list(names))
        self.assertEqual(
            list(names),
            ["zipkin-2016-02-28", "zipkin-2016-02-29", "zipkin-2016-03-01"],
        )
        self.assertEqual(len(names), 3)

    def test_epoch_millis_range(self):
        """测试毫秒级时间戳范围."""
        day = 86400 * 1000
        names = list(self.formatter.index_names_for_range(0, 2 * day - 1))
        self.assertEqual(names, ["zipkin-1970-01-01", "zipkin-1970-01-02"])

    def test_start_after_end_raises_error(self):
        """测试开始时间晚于结束时间."""
        with self.assertRaises(InvalidTimeRangeError):
            self.formatter.index_names_for_range(date(2016, 3, 2), date(2016, 3, 1))


if __name__ == "__main__":
    unittest.main()
