"""Application 层用例 - 业务逻辑编排

已实现的用例：
- SubmitFlowLogsUseCase: 接收工作流引擎提交的日志
"""

from src.application.use_cases.submit_flow_logs import (
    FlowLogInput,
    FlowLogOutput,
    SubmitFlowLogsUseCase,
)

__all__ = ["FlowLogInput", "FlowLogOutput", "SubmitFlowLogsUseCase"]
