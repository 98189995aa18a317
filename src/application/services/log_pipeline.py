"""LogPipeline - 日志缓冲与批量提交

职责：
1. enqueue：缓存已组装的 LogEntryBuilder 及其所属日志事务 ID（不落库）
2. flush：批量生成 LogEntry 并写入仓储
3. 为标记了 create_issue 的条目生成 LogIssue
4. 管理事务边界（commit / best-effort rollback）

失败语义：
- flush 失败时回滚并保留缓冲，异常原样抛出
- 不保证批次原子性：已提交的 flush 不会因后续失败而撤销
"""

from __future__ import annotations

import logging

from src.application.ports.transaction_manager import TransactionManager
from src.domain.entities.log_entry import LogEntry
from src.domain.entities.log_issue import LogIssue
from src.domain.ports.log_entry_repository import LogEntryRepository
from src.domain.services.log_entry_builder import LogEntryBuilder
from src.domain.services.log_transaction_context import LogTransactionContext

logger = logging.getLogger(__name__)


class LogPipeline:
    """日志管道

    依赖:
        - LogEntryRepository: 写入日志与 Issue
        - TransactionManager: 事务控制
        - LogTransactionContext: 当前日志事务（可选注入，默认新建）
    """

    def __init__(
        self,
        repository: LogEntryRepository,
        transaction_manager: TransactionManager,
        transaction: LogTransactionContext | None = None,
    ) -> None:
        self.repository = repository
        self.transaction_manager = transaction_manager
        self._transaction = transaction or LogTransactionContext()
        self._pending: list[tuple[LogEntryBuilder, str | None]] = []

    @property
    def transaction(self) -> LogTransactionContext:
        return self._transaction

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def enqueue(self, builder: LogEntryBuilder, transaction_id: str | None = None) -> None:
        """缓存构建器，并记录其所属日志事务 ID

        未指定 transaction_id 时使用管道自身的事务上下文（没有活动事务时自动开启）。
        """
        if transaction_id is None:
            if not self._transaction.is_active:
                self._transaction.start()
            transaction_id = self._transaction.current_transaction_id
        self._pending.append((builder, transaction_id))

    def flush(self) -> list[LogEntry]:
        """提交缓冲中的全部日志

        Returns:
            已持久化的 LogEntry 列表（缓冲为空时返回空列表，不触发提交）
        """
        if not self._pending:
            return []

        entries = [builder.build(transaction_id) for builder, transaction_id in self._pending]
        issues = [LogIssue.from_entry(entry) for entry in entries if entry.create_issue]

        try:
            self.repository.add_all(entries)
            if issues:
                self.repository.add_issues(issues)
            self.transaction_manager.commit()
        except Exception:
            logger.exception("Flushing %d log entries failed, rolling back", len(entries))
            try:
                self.transaction_manager.rollback()
            except Exception:
                pass  # 忽略回滚失败，优先抛出原始异常
            raise

        self._pending.clear()
        logger.info("Flushed %d log entries (%d issues)", len(entries), len(issues))
        return entries
