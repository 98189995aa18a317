"""LogEntry DTO

定义日志条目与 Issue 的查询响应模型。
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict

from src.domain.entities.log_entry import LogEntry
from src.domain.entities.log_issue import LogIssue


class LogEntryResponse(BaseModel):
    """LogEntry 响应 DTO

    注意：
    - level / category 从枚举转换为字符串
    - post_processing 展开为 {选项: bool}
    """

    id: str
    transaction_id: str | None = None
    level: str
    category: str
    type: str | None = None
    area: str | None = None
    summary: str | None = None
    details: str | None = None
    interview_guid: str | None = None
    flow_api_name: str | None = None
    operation: str | None = None
    stacktrace: str | None = None
    post_processing: dict[str, bool]
    attributes: dict[str, Any]
    create_issue: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_entity(cls, entry: LogEntry) -> "LogEntryResponse":
        return cls(
            id=entry.id,
            transaction_id=entry.transaction_id,
            level=entry.level.value,
            category=entry.category.value,
            type=entry.type,
            area=entry.area,
            summary=entry.summary,
            details=entry.details,
            interview_guid=entry.interview_guid,
            flow_api_name=entry.flow_api_name,
            operation=entry.operation,
            stacktrace=entry.stacktrace,
            post_processing=entry.post_processing.to_dict(),
            attributes=dict(entry.attributes),
            create_issue=entry.create_issue,
            created_at=entry.created_at,
        )


class LogEntryListResponse(BaseModel):
    """LogEntry 列表响应 DTO"""

    entries: list[LogEntryResponse]
    total: int

    @classmethod
    def from_entities(cls, entries: list[LogEntry]) -> "LogEntryListResponse":
        return cls(
            entries=[LogEntryResponse.from_entity(entry) for entry in entries],
            total=len(entries),
        )


class LogIssueResponse(BaseModel):
    """LogIssue 响应 DTO"""

    id: str
    log_entry_id: str
    transaction_id: str | None = None
    summary: str | None = None
    category: str
    created_at: datetime

    @classmethod
    def from_entity(cls, issue: LogIssue) -> "LogIssueResponse":
        return cls(
            id=issue.id,
            log_entry_id=issue.log_entry_id,
            transaction_id=issue.transaction_id,
            summary=issue.summary,
            category=issue.category,
            created_at=issue.created_at,
        )
