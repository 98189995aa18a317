"""Flow Log DTO（Data Transfer Objects）

定义工作流引擎提交日志的请求和响应模型。

字段命名：
- 对外使用工作流引擎的 camelCase 字段名（interviewId、additionalFields 等）
- 同时接受 snake_case（populate_by_name）
- area 与 summary 为必填，校验在此层完成，用例本身不做强制
"""

from pydantic import BaseModel, ConfigDict, Field

from src.application.use_cases.submit_flow_logs import FlowLogInput, FlowLogOutput


class FlowLogRequest(BaseModel):
    """工作流日志请求 DTO

    示例：
    >>> request = FlowLogRequest(area="Accounts", summary="Record updated", level="WARNING")
    >>> request.to_input().level
    'WARNING'
    """

    area: str = Field(..., min_length=1, description="业务领域")
    summary: str = Field(..., min_length=1, description="摘要")
    details: str | None = Field(default=None, description="详情")
    type: str | None = Field(default=None, description="类型")
    operation: str | None = Field(default=None, description="操作")
    category: str | None = Field(default=None, description="分类（默认 Flow）")
    level: str | None = Field(default=None, description="级别（默认 INFO）")
    interview_id: str | None = Field(default=None, alias="interviewId", description="运行实例 ID")
    workflow_name: str | None = Field(default=None, alias="workflowName", description="工作流名称")
    transaction_id: str | None = Field(
        default=None, alias="transactionId", description="需要恢复的日志事务 ID"
    )
    additional_fields: str | None = Field(
        default=None, alias="additionalFields", description="JSON 对象字符串"
    )
    stacktrace: str | None = Field(default=None, description="堆栈")
    full_stacktrace: str | None = Field(
        default=None, alias="fullStacktrace", description="完整堆栈"
    )

    model_config = ConfigDict(populate_by_name=True)

    def to_input(self) -> FlowLogInput:
        return FlowLogInput(
            area=self.area,
            summary=self.summary,
            details=self.details,
            type=self.type,
            operation=self.operation,
            category=self.category,
            level=self.level,
            interview_id=self.interview_id,
            workflow_name=self.workflow_name,
            transaction_id=self.transaction_id,
            additional_fields=self.additional_fields,
            stacktrace=self.stacktrace,
            full_stacktrace=self.full_stacktrace,
        )


class FlowLogResponse(BaseModel):
    """工作流日志响应 DTO（回显合并后的堆栈）"""

    stacktrace: str | None = None
    full_stacktrace: str | None = Field(default=None, alias="fullStacktrace")
    transaction_id: str | None = Field(default=None, alias="transactionId")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_output(cls, output: FlowLogOutput) -> "FlowLogResponse":
        return cls(
            stacktrace=output.stacktrace,
            full_stacktrace=output.full_stacktrace,
            transaction_id=output.transaction_id,
        )
