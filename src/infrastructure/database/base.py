"""数据库 Base 模型

为什么需要 Base？
- SQLAlchemy 的 DeclarativeBase 提供 ORM 模型基类
- 所有 ORM 模型都继承自 Base
- Base.metadata 包含所有表的元数据（用于 Alembic 迁移与 SQLite 建表）
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """ORM 模型基类

    所有 ORM 模型都继承自这个类：
    - class LogEntryModel(Base): ...
    - class LogIssueModel(Base): ...
    """

    pass
