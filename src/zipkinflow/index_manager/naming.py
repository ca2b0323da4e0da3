"""按天分区的索引命名模块."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta

from .exceptions import InvalidTimeRangeError

# 索引名称中的日期格式
DATE_FORMAT = "%Y-%m-%d"

Timestamp = datetime | date | int | float


def to_utc_date(timestamp: Timestamp) -> date:
    """将时间点规范化为 UTC 日历日.

    - naive datetime 视为 UTC
    - tz-aware datetime 转换为 UTC
    - date 原样返回
    - 数字视为毫秒级时间戳

    Args:
        timestamp: 时间点

    Returns:
        UTC 日历日
    """
    if isinstance(timestamp, datetime):
        if timestamp.tzinfo is None:
            return timestamp.date()
        return timestamp.astimezone(UTC).date()
    if isinstance(timestamp, date):
        return timestamp
    return datetime.fromtimestamp(timestamp / 1000, tz=UTC).date()


@dataclass(frozen=True)
class IndexNameRange:
    """时间范围覆盖的索引名称序列.

    惰性生成，每次迭代都从起止日期重新计算，可重复迭代。

    Attributes:
        formatter: 索引名称格式化器
        start_day: 起始 UTC 日期（包含）
        end_day: 结束 UTC 日期（包含）
    """

    formatter: IndexNameFormatter
    start_day: date
    end_day: date

    def __iter__(self) -> Iterator[str]:
        day = self.start_day
        while day <= self.end_day:
            yield self.formatter.index_name_for(day)
            day += timedelta(days=1)

    def __len__(self) -> int:
        return (self.end_day - self.start_day).days + 1


@dataclass(frozen=True)
class IndexNameFormatter:
    """索引名称格式化器.

    将逻辑索引前缀和时间点映射为按天分区的物理索引名称，
    格式为 ``<prefix>-YYYY-MM-DD``，日期取 UTC 日历日。
    无状态，可在多线程间共享。

    Attributes:
        prefix: 索引前缀

    Examples:
        >>> formatter = IndexNameFormatter("zipkin")
        >>> formatter.index_name_for(datetime(2016, 3, 15, 23, 59, 59, tzinfo=UTC))
        'zipkin-2016-03-15'
    """

    prefix: str

    def index_name_for(self, timestamp: Timestamp) -> str:
        """获取时间点所在的物理索引名称.

        Args:
            timestamp: datetime、date 或毫秒级时间戳

        Returns:
            物理索引名称
        """
        return f"{self.prefix}-{to_utc_date(timestamp).strftime(DATE_FORMAT)}"

    def index_names_for_range(self, start: Timestamp, end: Timestamp) -> IndexNameRange:
        """获取时间范围覆盖的所有物理索引名称.

        每个被覆盖的 UTC 日对应一个索引名称，按日期升序排列。

        Args:
            start: 开始时间
            end: 结束时间

        Returns:
            可重复迭代的索引名称序列

        Raises:
            InvalidTimeRangeError: 开始时间晚于结束时间
        """
        start_day = to_utc_date(start)
        end_day = to_utc_date(end)
        if start_day > end_day:
            raise InvalidTimeRangeError(
                f"开始时间不能晚于结束时间: start={start_day.isoformat()}, "
                f"end={end_day.isoformat()}"
            )
        return IndexNameRange(formatter=self, start_day=start_day, end_day=end_day)

    def index_pattern(self) -> str:
        """获取匹配所有分区的通配符索引模式."""
        return f"{self.prefix}-*"
