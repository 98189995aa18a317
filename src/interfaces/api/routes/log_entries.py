"""LogEntry API 路由

端点:
    - GET /api/log-entries?transaction_id=...|interview_id=... - 列出日志
    - GET /api/log-entries/issues?transaction_id=... - 列出事务下的 Issue
    - GET /api/log-entries/{entry_id} - 获取单条日志
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from src.config import settings
from src.domain.exceptions import NotFoundError
from src.infrastructure.database.engine import get_db_session
from src.interfaces.api.container import ApiContainer
from src.interfaces.api.dependencies.container import get_container
from src.interfaces.api.dto.log_entry_dto import (
    LogEntryListResponse,
    LogEntryResponse,
    LogIssueResponse,
)

router = APIRouter(prefix="/log-entries", tags=["Log Entries"])


@router.get(
    "",
    response_model=LogEntryListResponse,
    summary="列出日志",
    description="按日志事务或工作流运行实例列出日志（二者至少提供一个）",
)
def list_log_entries(
    transaction_id: str | None = Query(default=None, description="日志事务 ID"),
    interview_id: str | None = Query(default=None, description="工作流运行实例 ID"),
    limit: int | None = Query(default=None, ge=1, le=1000, description="返回数量上限"),
    container: ApiContainer = Depends(get_container),
    db: Session = Depends(get_db_session),
) -> LogEntryListResponse:
    if not transaction_id and not interview_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="transaction_id 或 interview_id 至少提供一个",
        )

    effective_limit = limit or settings.log_entry_list_limit
    try:
        repo = container.log_entry_repository(db)
        if transaction_id:
            entries = repo.list_by_transaction_id(transaction_id, limit=effective_limit)
        else:
            entries = repo.list_by_interview_guid(interview_id or "", limit=effective_limit)
        return LogEntryListResponse.from_entities(entries)

    except Exception as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"列出日志失败: {exc}",
        ) from exc


@router.get(
    "/issues",
    response_model=list[LogIssueResponse],
    summary="列出 Issue",
    description="列出指定日志事务下由 ERROR 日志生成的 Issue",
)
def list_log_issues(
    transaction_id: str = Query(..., min_length=1, description="日志事务 ID"),
    container: ApiContainer = Depends(get_container),
    db: Session = Depends(get_db_session),
) -> list[LogIssueResponse]:
    try:
        repo = container.log_entry_repository(db)
        issues = repo.list_issues_by_transaction_id(transaction_id)
        return [LogIssueResponse.from_entity(issue) for issue in issues]

    except Exception as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"列出 Issue 失败: {exc}",
        ) from exc


@router.get(
    "/{entry_id}",
    response_model=LogEntryResponse,
    summary="获取日志",
    description="获取单条日志的详细信息",
)
def get_log_entry(
    entry_id: str,
    container: ApiContainer = Depends(get_container),
    db: Session = Depends(get_db_session),
) -> LogEntryResponse:
    """获取单条日志

    Raises:
        404: 日志不存在
        500: 内部错误
    """
    try:
        repo = container.log_entry_repository(db)
        return LogEntryResponse.from_entity(repo.get_by_id(entry_id))

    except NotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        ) from exc
    except Exception as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"获取日志失败: {exc}",
        ) from exc


__all__ = ["router"]
