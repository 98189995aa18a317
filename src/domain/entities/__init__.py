"""Domain 实体

导出所有领域实体，方便其他模块导入
"""

from src.domain.entities.log_entry import LogEntry
from src.domain.entities.log_issue import LogIssue

__all__ = ["LogEntry", "LogIssue"]
