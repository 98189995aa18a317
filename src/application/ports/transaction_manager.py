"""TransactionManager Port - 工作单元提交控制

目标：
- 日志管道 flush 时依赖抽象事务控制，避免直接耦合数据库实现（DIP）
- 基础设施层提供 SQLAlchemy 实现；测试中可直接替换为 Mock
"""

from __future__ import annotations

from typing import Protocol


class TransactionManager(Protocol):
    def commit(self) -> None: ...

    def rollback(self) -> None: ...
