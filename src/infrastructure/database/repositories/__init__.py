"""Repository 实现 - 数据访问层

实现 Domain 层定义的 Port 接口，负责 ORM 模型与领域实体之间的转换。
"""

from src.infrastructure.database.repositories.log_entry_repository import (
    SQLAlchemyLogEntryRepository,
)

__all__ = ["SQLAlchemyLogEntryRepository"]
