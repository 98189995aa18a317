"""API DTO（Data Transfer Objects）

DTO 职责：
1. 数据验证：使用 Pydantic 验证请求数据（如 area、summary 必填）
2. 数据序列化：将 Domain 实体转换为 JSON
"""

from src.interfaces.api.dto.flow_log_dto import FlowLogRequest, FlowLogResponse
from src.interfaces.api.dto.log_entry_dto import (
    LogEntryListResponse,
    LogEntryResponse,
    LogIssueResponse,
)

__all__ = [
    "FlowLogRequest",
    "FlowLogResponse",
    "LogEntryResponse",
    "LogEntryListResponse",
    "LogIssueResponse",
]
