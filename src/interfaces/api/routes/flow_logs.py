"""Flow Log API 路由

端点:
    - POST /api/flow-logs - 工作流引擎批量提交日志
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from src.application.services.log_pipeline import LogPipeline
from src.application.use_cases.submit_flow_logs import SubmitFlowLogsUseCase
from src.infrastructure.database.engine import get_db_session
from src.interfaces.api.container import ApiContainer
from src.interfaces.api.dependencies.container import get_container
from src.interfaces.api.dto.flow_log_dto import FlowLogRequest, FlowLogResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/flow-logs", tags=["Flow Logs"])


@router.post(
    "",
    response_model=list[FlowLogResponse],
    summary="提交工作流日志",
    description="批量提交工作流日志；每条请求对应一条响应，整批处理后统一提交",
)
def submit_flow_logs(
    requests: list[FlowLogRequest],
    container: ApiContainer = Depends(get_container),
    db: Session = Depends(get_db_session),
) -> list[FlowLogResponse]:
    """批量提交工作流日志

    Args:
        requests: 日志请求列表（area、summary 必填）
        db: 数据库 Session

    Returns:
        与请求一一对应的响应列表

    Raises:
        422: 请求体校验失败
        500: 日志持久化失败
    """
    pipeline = LogPipeline(
        repository=container.log_entry_repository(db),
        transaction_manager=container.transaction_manager(db),
    )
    use_case = SubmitFlowLogsUseCase(pipeline=pipeline)

    try:
        outputs = use_case.log([request.to_input() for request in requests])
    except Exception as exc:
        logger.exception("Submitting %d flow logs failed", len(requests))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"提交日志失败: {exc}",
        ) from exc

    return [FlowLogResponse.from_output(output) for output in outputs]


__all__ = ["router"]
