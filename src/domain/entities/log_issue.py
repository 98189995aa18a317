"""LogIssue 实体 - 由高严重级别日志派生的跟踪记录

业务定义：
- 当 LogEntry 被标记为 create_issue 时，日志管道在 flush 时创建一条 LogIssue
- LogIssue 与原日志一对一关联（log_entry_id）
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import uuid4

from src.domain.entities.log_entry import LogEntry


@dataclass
class LogIssue:
    """LogIssue 领域实体"""

    id: str
    log_entry_id: str
    transaction_id: str | None
    summary: str | None
    category: str
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @classmethod
    def from_entry(cls, entry: LogEntry) -> LogIssue:
        return cls(
            id=f"issue_{uuid4().hex[:12]}",
            log_entry_id=entry.id,
            transaction_id=entry.transaction_id,
            summary=entry.summary,
            category=entry.category.value,
            created_at=datetime.now(UTC),
        )
