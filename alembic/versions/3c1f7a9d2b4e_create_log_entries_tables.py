"""Create log_entries and log_issues tables

Revision ID: 3c1f7a9d2b4e
Revises:
Create Date: 2026-10-18 10:00:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3c1f7a9d2b4e"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "log_entries",
        sa.Column("id", sa.String(length=36), primary_key=True, comment="LogEntry ID"),
        sa.Column("transaction_id", sa.String(length=64), nullable=True, comment="日志事务 ID"),
        sa.Column("level", sa.String(length=20), nullable=False, comment="日志级别"),
        sa.Column("category", sa.String(length=50), nullable=False, comment="日志分类"),
        sa.Column("type", sa.String(length=255), nullable=True, comment="类型"),
        sa.Column("area", sa.String(length=255), nullable=True, comment="业务领域"),
        sa.Column("summary", sa.Text(), nullable=True, comment="摘要"),
        sa.Column("details", sa.Text(), nullable=True, comment="详情"),
        sa.Column("interview_guid", sa.String(length=255), nullable=True, comment="工作流运行实例 ID"),
        sa.Column("flow_api_name", sa.String(length=255), nullable=True, comment="工作流名称"),
        sa.Column("operation", sa.String(length=255), nullable=True, comment="操作"),
        sa.Column("stacktrace", sa.Text(), nullable=True, comment="堆栈"),
        sa.Column("post_processing", sa.JSON(), nullable=False, comment="后处理选项"),
        sa.Column("attributes", sa.JSON(), nullable=False, comment="自定义属性"),
        sa.Column("create_issue", sa.Boolean(), nullable=False, comment="是否创建 Issue"),
        sa.Column("created_at", sa.DateTime(), nullable=False, comment="创建时间"),
    )
    op.create_index("idx_log_entries_transaction_id", "log_entries", ["transaction_id"])
    op.create_index("idx_log_entries_interview_guid", "log_entries", ["interview_guid"])
    op.create_index("idx_log_entries_created_at", "log_entries", ["created_at"])

    op.create_table(
        "log_issues",
        sa.Column("id", sa.String(length=36), primary_key=True, comment="Issue ID"),
        sa.Column(
            "log_entry_id",
            sa.String(length=36),
            sa.ForeignKey("log_entries.id", ondelete="CASCADE"),
            nullable=False,
            comment="关联 LogEntry ID",
        ),
        sa.Column("transaction_id", sa.String(length=64), nullable=True, comment="日志事务 ID"),
        sa.Column("summary", sa.Text(), nullable=True, comment="摘要"),
        sa.Column("category", sa.String(length=50), nullable=False, comment="日志分类"),
        sa.Column("created_at", sa.DateTime(), nullable=False, comment="创建时间"),
    )
    op.create_index("idx_log_issues_transaction_id", "log_issues", ["transaction_id"])


def downgrade() -> None:
    op.drop_index("idx_log_issues_transaction_id", table_name="log_issues")
    op.drop_table("log_issues")
    op.drop_index("idx_log_entries_created_at", table_name="log_entries")
    op.drop_index("idx_log_entries_interview_guid", table_name="log_entries")
    op.drop_index("idx_log_entries_transaction_id", table_name="log_entries")
    op.drop_table("log_entries")
