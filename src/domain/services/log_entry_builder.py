"""LogEntryBuilder - 日志条目的流式构建器

职责：
- 按字段逐步收集日志内容（链式调用）
- 收集自定义属性（attribute）与 Issue 标记
- build() 时绑定事务 ID 并生成 LogEntry 实体

用法：
    builder = (
        LogEntryBuilder()
        .category(LogCategory.FLOW)
        .area("Accounts")
        .summary("Record updated")
        .level(LogLevel.INFO)
    )
    entry = builder.build(transaction_id="tx_001")
"""

from __future__ import annotations

from typing import Any

from src.domain.entities.log_entry import LogEntry
from src.domain.value_objects.log_category import LogCategory
from src.domain.value_objects.log_level import LogLevel
from src.domain.value_objects.post_processing_options import PostProcessingOptions


class LogEntryBuilder:
    """LogEntry 构建器

    未显式设置的级别与分类分别默认为 INFO 与 Flow。
    """

    def __init__(self) -> None:
        self._level = LogLevel.INFO
        self._category = LogCategory.FLOW
        self._fields: dict[str, Any] = {}
        self._post_processing = PostProcessingOptions()
        self._attributes: dict[str, Any] = {}
        self._create_issue = False

    def category(self, value: LogCategory) -> LogEntryBuilder:
        self._category = value
        return self

    def type(self, value: str | None) -> LogEntryBuilder:
        self._fields["type"] = value
        return self

    def area(self, value: str | None) -> LogEntryBuilder:
        self._fields["area"] = value
        return self

    def summary(self, value: str | None) -> LogEntryBuilder:
        self._fields["summary"] = value
        return self

    def details(self, value: str | None) -> LogEntryBuilder:
        self._fields["details"] = value
        return self

    def interview_guid(self, value: str | None) -> LogEntryBuilder:
        self._fields["interview_guid"] = value
        return self

    def flow_api_name(self, value: str | None) -> LogEntryBuilder:
        self._fields["flow_api_name"] = value
        return self

    def operation(self, value: str | None) -> LogEntryBuilder:
        self._fields["operation"] = value
        return self

    def stacktrace(self, value: str | None) -> LogEntryBuilder:
        self._fields["stacktrace"] = value
        return self

    def post_processing(self, options: PostProcessingOptions) -> LogEntryBuilder:
        self._post_processing = options
        return self

    def level(self, value: LogLevel) -> LogEntryBuilder:
        self._level = value
        return self

    def attribute(self, key: str, value: Any) -> LogEntryBuilder:
        """设置一个自定义属性（同名键后写覆盖前写）"""
        self._attributes[key] = value
        return self

    def create_issue(self) -> LogEntryBuilder:
        self._create_issue = True
        return self

    # ==================== 只读访问 ====================

    @property
    def details_text(self) -> str | None:
        return self._fields.get("details")

    def build(self, transaction_id: str | None) -> LogEntry:
        """生成 LogEntry 实体

        参数：
            transaction_id: 当前日志事务 ID

        返回：
            新的 LogEntry（每次调用生成新的 id）
        """
        return LogEntry.create(
            transaction_id=transaction_id,
            level=self._level,
            category=self._category,
            post_processing=self._post_processing,
            attributes=dict(self._attributes),
            create_issue=self._create_issue,
            **self._fields,
        )
