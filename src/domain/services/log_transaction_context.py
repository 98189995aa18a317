"""LogTransactionContext - 日志事务上下文

业务定义：
- 日志事务是一组共享关联 ID 的日志条目
- 调用方可以恢复（resume）已有事务，或在没有活动事务时开启（start）新事务

设计说明：
- 以显式对象传入处理流程，而不是全局单例，方便测试时替换
- 仅维护当前事务 ID，不负责持久化
"""

from __future__ import annotations

import logging
from uuid import uuid4

logger = logging.getLogger(__name__)


class LogTransactionContext:
    def __init__(self, transaction_id: str | None = None) -> None:
        self._current: str | None = None
        if transaction_id is not None:
            self.resume(transaction_id)

    @property
    def current_transaction_id(self) -> str | None:
        return self._current

    @property
    def is_active(self) -> bool:
        return self._current is not None

    def start(self) -> str:
        """开启新事务并设为当前事务"""
        self._current = uuid4().hex
        logger.debug("Started log transaction %s", self._current)
        return self._current

    def resume(self, transaction_id: str) -> str:
        """恢复指定事务

        Raises:
            ValueError: transaction_id 为空白时
        """
        normalized = transaction_id.strip() if transaction_id else ""
        if not normalized:
            raise ValueError("transaction_id 不能为空")
        self._current = normalized
        return self._current
