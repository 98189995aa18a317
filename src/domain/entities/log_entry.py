"""LogEntry 实体 - 一条已组装的应用日志

业务定义：
- LogEntry 由 LogEntryBuilder 组装，经日志管道 flush 后持久化
- 同一逻辑事务（transaction_id）下的日志共享关联 ID
- interview_guid / flow_api_name 描述产生日志的工作流运行实例
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any
from uuid import uuid4

from src.domain.value_objects.log_category import LogCategory
from src.domain.value_objects.log_level import LogLevel
from src.domain.value_objects.post_processing_options import PostProcessingOptions


@dataclass
class LogEntry:
    """LogEntry 领域实体"""

    id: str
    transaction_id: str | None
    level: LogLevel
    category: LogCategory
    type: str | None = None
    area: str | None = None
    summary: str | None = None
    details: str | None = None
    interview_guid: str | None = None
    flow_api_name: str | None = None
    operation: str | None = None
    stacktrace: str | None = None
    post_processing: PostProcessingOptions = field(default_factory=PostProcessingOptions)
    attributes: dict[str, Any] = field(default_factory=dict)
    create_issue: bool = False
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @classmethod
    def create(
        cls,
        *,
        transaction_id: str | None,
        level: LogLevel,
        category: LogCategory,
        **fields: Any,
    ) -> LogEntry:
        return cls(
            id=f"log_{uuid4().hex[:12]}",
            transaction_id=transaction_id,
            level=level,
            category=category,
            created_at=datetime.now(UTC),
            **fields,
        )
