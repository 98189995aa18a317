"""LogEntryRepository Port（日志条目仓储端口）

Domain 层端口：定义日志条目与 Issue 的持久化契约。

约束：
- 只能依赖标准库与 Domain 层类型
- 事务提交由 Application 层的 TransactionManager 负责，仓储只负责写入/查询
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from src.domain.entities.log_entry import LogEntry
from src.domain.entities.log_issue import LogIssue


class LogEntryRepository(Protocol):
    """日志条目仓储端口。"""

    def add_all(self, entries: Sequence[LogEntry]) -> None:
        """批量写入日志条目（不提交）。"""
        ...

    def add_issues(self, issues: Sequence[LogIssue]) -> None:
        """批量写入 Issue（不提交）。"""
        ...

    def get_by_id(self, entry_id: str) -> LogEntry:
        """按 ID 获取日志条目。

        Raises:
            NotFoundError: 日志条目不存在时
        """
        ...

    def list_by_transaction_id(self, transaction_id: str, limit: int = 100) -> list[LogEntry]:
        """列出某个日志事务下的条目（按创建时间升序）。"""
        ...

    def list_by_interview_guid(self, interview_guid: str, limit: int = 100) -> list[LogEntry]:
        """列出某次工作流运行产生的条目（按创建时间升序）。"""
        ...

    def list_issues_by_transaction_id(self, transaction_id: str) -> list[LogIssue]:
        """列出某个日志事务下的 Issue。"""
        ...
