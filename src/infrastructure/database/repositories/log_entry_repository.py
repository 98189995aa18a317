"""SQLAlchemy LogEntry Repository 实现

职责：
- LogEntry / LogIssue 领域实体 <-> ORM 模型转换
- 批量写入（只 flush，不 commit；提交由 TransactionManager 负责）
- 按 ID、日志事务、工作流运行实例查询
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, datetime

from sqlalchemy import select
from sqlalchemy.orm import Session

from src.domain.entities.log_entry import LogEntry
from src.domain.entities.log_issue import LogIssue
from src.domain.exceptions import NotFoundError
from src.domain.value_objects.log_category import LogCategory
from src.domain.value_objects.log_level import LogLevel
from src.domain.value_objects.post_processing_options import PostProcessingOptions
from src.infrastructure.database.models import LogEntryModel, LogIssueModel


def _as_utc(value: datetime) -> datetime:
    return value.replace(tzinfo=UTC) if value.tzinfo is None else value


class SQLAlchemyLogEntryRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def _to_entity(self, model: LogEntryModel) -> LogEntry:
        return LogEntry(
            id=model.id,
            transaction_id=model.transaction_id,
            level=LogLevel(model.level),
            category=LogCategory(model.category),
            type=model.type,
            area=model.area,
            summary=model.summary,
            details=model.details,
            interview_guid=model.interview_guid,
            flow_api_name=model.flow_api_name,
            operation=model.operation,
            stacktrace=model.stacktrace,
            post_processing=PostProcessingOptions.from_dict(model.post_processing),
            attributes=dict(model.attributes or {}),
            create_issue=model.create_issue,
            created_at=_as_utc(model.created_at),
        )

    def _to_model(self, entity: LogEntry) -> LogEntryModel:
        return LogEntryModel(
            id=entity.id,
            transaction_id=entity.transaction_id,
            level=entity.level.value,
            category=entity.category.value,
            type=entity.type,
            area=entity.area,
            summary=entity.summary,
            details=entity.details,
            interview_guid=entity.interview_guid,
            flow_api_name=entity.flow_api_name,
            operation=entity.operation,
            stacktrace=entity.stacktrace,
            post_processing=entity.post_processing.to_dict(),
            attributes=dict(entity.attributes),
            create_issue=entity.create_issue,
            created_at=entity.created_at.replace(tzinfo=None),
        )

    def _issue_to_entity(self, model: LogIssueModel) -> LogIssue:
        return LogIssue(
            id=model.id,
            log_entry_id=model.log_entry_id,
            transaction_id=model.transaction_id,
            summary=model.summary,
            category=model.category,
            created_at=_as_utc(model.created_at),
        )

    def add_all(self, entries: Sequence[LogEntry]) -> None:
        self.session.add_all([self._to_model(entry) for entry in entries])
        # log_issues 通过外键引用 log_entries，先 flush 保证写入顺序
        self.session.flush()

    def add_issues(self, issues: Sequence[LogIssue]) -> None:
        self.session.add_all(
            [
                LogIssueModel(
                    id=issue.id,
                    log_entry_id=issue.log_entry_id,
                    transaction_id=issue.transaction_id,
                    summary=issue.summary,
                    category=issue.category,
                    created_at=issue.created_at.replace(tzinfo=None),
                )
                for issue in issues
            ]
        )
        self.session.flush()

    def get_by_id(self, entry_id: str) -> LogEntry:
        model = self.session.get(LogEntryModel, entry_id)
        if model is None:
            raise NotFoundError("LogEntry", entry_id)
        return self._to_entity(model)

    def list_by_transaction_id(self, transaction_id: str, limit: int = 100) -> list[LogEntry]:
        stmt = (
            select(LogEntryModel)
            .where(LogEntryModel.transaction_id == transaction_id)
            .order_by(LogEntryModel.created_at.asc())
            .limit(limit)
        )
        return [self._to_entity(model) for model in self.session.scalars(stmt).all()]

    def list_by_interview_guid(self, interview_guid: str, limit: int = 100) -> list[LogEntry]:
        stmt = (
            select(LogEntryModel)
            .where(LogEntryModel.interview_guid == interview_guid)
            .order_by(LogEntryModel.created_at.asc())
            .limit(limit)
        )
        return [self._to_entity(model) for model in self.session.scalars(stmt).all()]

    def list_issues_by_transaction_id(self, transaction_id: str) -> list[LogIssue]:
        stmt = (
            select(LogIssueModel)
            .where(LogIssueModel.transaction_id == transaction_id)
            .order_by(LogIssueModel.created_at.asc())
        )
        return [self._issue_to_entity(model) for model in self.session.scalars(stmt).all()]


__all__ = ["SQLAlchemyLogEntryRepository"]
