"""ORM 模型 - 数据库表映射

ORM 模型 vs 领域实体：
- ORM 模型：数据库表映射，关注持久化（Infrastructure 层）
- 领域实体：业务逻辑，关注不变式（Domain 层）
- 通过 Repository 转换：ORM ⇄ Entity

设计原则：
- 使用 SQLAlchemy 2.0 风格（Mapped、mapped_column）
- 自定义属性与后处理选项以 JSON 存储
- 按 transaction_id、interview_guid、created_at 建索引
"""

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, Boolean, DateTime, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.database.base import Base


class LogEntryModel(Base):
    """LogEntry ORM 模型

    表名：log_entries

    字段说明：
    - id: 主键（log_ 前缀 + 12 位 hex）
    - transaction_id: 日志事务 ID（可选）
    - level / category: 级别与分类（枚举值字符串）
    - type / area / summary / details / operation: 日志内容
    - interview_guid / flow_api_name: 工作流运行实例与工作流名称
    - stacktrace: 合并后的堆栈
    - post_processing: 后处理选项（JSON）
    - attributes: 自定义属性（JSON）
    - create_issue: 是否需要创建 Issue
    - created_at: 创建时间
    """

    __tablename__ = "log_entries"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, comment="LogEntry ID")
    transaction_id: Mapped[str | None] = mapped_column(
        String(64), nullable=True, comment="日志事务 ID"
    )
    level: Mapped[str] = mapped_column(String(20), nullable=False, comment="日志级别")
    category: Mapped[str] = mapped_column(String(50), nullable=False, comment="日志分类")
    type: Mapped[str | None] = mapped_column(String(255), nullable=True, comment="类型")
    area: Mapped[str | None] = mapped_column(String(255), nullable=True, comment="业务领域")
    summary: Mapped[str | None] = mapped_column(Text, nullable=True, comment="摘要")
    details: Mapped[str | None] = mapped_column(Text, nullable=True, comment="详情")
    interview_guid: Mapped[str | None] = mapped_column(
        String(255), nullable=True, comment="工作流运行实例 ID"
    )
    flow_api_name: Mapped[str | None] = mapped_column(
        String(255), nullable=True, comment="工作流名称"
    )
    operation: Mapped[str | None] = mapped_column(String(255), nullable=True, comment="操作")
    stacktrace: Mapped[str | None] = mapped_column(Text, nullable=True, comment="堆栈")
    post_processing: Mapped[dict[str, bool]] = mapped_column(
        JSON, nullable=False, default=dict, comment="后处理选项"
    )
    attributes: Mapped[dict[str, Any]] = mapped_column(
        JSON, nullable=False, default=dict, comment="自定义属性"
    )
    create_issue: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, comment="是否创建 Issue"
    )
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, comment="创建时间")

    __table_args__ = (
        Index("idx_log_entries_transaction_id", "transaction_id"),
        Index("idx_log_entries_interview_guid", "interview_guid"),
        Index("idx_log_entries_created_at", "created_at"),
    )


class LogIssueModel(Base):
    """LogIssue ORM 模型

    表名：log_issues
    """

    __tablename__ = "log_issues"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, comment="Issue ID")
    log_entry_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("log_entries.id", ondelete="CASCADE"),
        nullable=False,
        comment="关联 LogEntry ID",
    )
    transaction_id: Mapped[str | None] = mapped_column(
        String(64), nullable=True, comment="日志事务 ID"
    )
    summary: Mapped[str | None] = mapped_column(Text, nullable=True, comment="摘要")
    category: Mapped[str] = mapped_column(String(50), nullable=False, comment="日志分类")
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, comment="创建时间")

    __table_args__ = (Index("idx_log_issues_transaction_id", "transaction_id"),)
