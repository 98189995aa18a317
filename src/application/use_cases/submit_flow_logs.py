"""SubmitFlowLogsUseCase - 接收工作流引擎提交的日志

业务场景:
    - 低代码工作流在运行中批量提交日志请求
    - 请求字段为松散类型的字符串，需要规范化为日志条目

职责:
    1. 合并堆栈 (full_stacktrace + stacktrace)
    2. 解析级别与分类，无法识别时回退默认值并在 details 中注明原因
    3. 恢复或开启日志事务
    4. 组装 LogEntryBuilder（附带工作流上下文与自定义属性）
    5. 入队到 LogPipeline，整批处理完成后 flush 一次

失败策略:
    - 级别/分类/additional_fields 的解析失败不会中断批次，只追加注释
    - 仓储/提交失败原样抛给调用方
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from src.application.services.log_pipeline import LogPipeline
from src.domain.services.log_entry_builder import LogEntryBuilder
from src.domain.services.log_messages import (
    INVALID_ADDITIONAL_FIELDS_TEMPLATE,
    UNKNOWN_CATEGORY_TEMPLATE,
    UNKNOWN_LEVEL_TEMPLATE,
    append_note,
    format_message,
)
from src.domain.services.log_transaction_context import LogTransactionContext
from src.domain.value_objects.log_category import LogCategory
from src.domain.value_objects.log_level import LogLevel
from src.domain.value_objects.post_processing_options import PostProcessingOptions

logger = logging.getLogger(__name__)


@dataclass
class FlowLogInput:
    """工作流日志请求

    Attributes:
        area: 业务领域（调用方必填）
        summary: 摘要（调用方必填）
        category: 分类名称，默认 Flow
        level: 级别名称，默认 INFO
        transaction_id: 需要恢复的日志事务 ID
        additional_fields: JSON 对象字符串，合并为自定义属性
        stacktrace / full_stacktrace: 两者都存在时拼接为 full + partial
    """

    area: str | None = None
    summary: str | None = None
    details: str | None = None
    type: str | None = None
    operation: str | None = None
    category: str | None = None
    level: str | None = None
    interview_id: str | None = None
    workflow_name: str | None = None
    transaction_id: str | None = None
    additional_fields: str | None = None
    stacktrace: str | None = None
    full_stacktrace: str | None = None


@dataclass
class FlowLogOutput:
    """工作流日志响应（回显合并后的堆栈）"""

    stacktrace: str | None = None
    full_stacktrace: str | None = None
    transaction_id: str | None = None


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def combine_stacktraces(stacktrace: str | None, full_stacktrace: str | None) -> str | None:
    if _is_blank(full_stacktrace):
        return stacktrace
    return f"{full_stacktrace}{stacktrace or ''}"


def resolve_level(value: str | None) -> tuple[LogLevel, str | None]:
    """解析级别

    Returns:
        (级别, 注释)；解析失败时级别为 INFO，注释说明原因
    """
    level = LogLevel.parse(value)
    if level is not None:
        return level, None
    return LogLevel.INFO, format_message(UNKNOWN_LEVEL_TEMPLATE, value)


def resolve_category(value: str | None) -> tuple[LogCategory, str | None]:
    """解析分类

    空白输入静默回退为 Flow；非空但无法识别时附带注释。
    """
    category = LogCategory.parse(value)
    if category is not None:
        return category, None
    if _is_blank(value):
        return LogCategory.FLOW, None
    return LogCategory.FLOW, format_message(UNKNOWN_CATEGORY_TEMPLATE, value)


def _reject_constant(token: str) -> Any:
    raise ValueError(f"非标准 JSON 常量: {token}")


def parse_additional_fields(raw: str) -> dict[str, Any] | None:
    """将 JSON 字符串解析为扁平对象；不是合法 JSON 对象时返回 None

    NaN / Infinity 等非标准常量与嵌套过深的输入同样视为解析失败。
    """
    try:
        parsed = json.loads(raw, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        return None
    if not isinstance(parsed, dict):
        return None
    return parsed


class SubmitFlowLogsUseCase:
    """工作流日志提交用例

    依赖:
        - LogPipeline: 日志缓冲、事务上下文与批量提交
    """

    def __init__(self, pipeline: LogPipeline) -> None:
        self.pipeline = pipeline

    def log(self, requests: Sequence[FlowLogInput]) -> list[FlowLogOutput]:
        """逐条处理请求，最后 flush 一次

        Args:
            requests: 有序请求列表（可为空）

        Returns:
            与输入一一对应、顺序一致的响应列表
        """
        outputs = [
            self.process_flow_log(request, self.pipeline.transaction) for request in requests
        ]
        self.pipeline.flush()
        return outputs

    def process_flow_log(
        self,
        request: FlowLogInput,
        transaction: LogTransactionContext,
    ) -> FlowLogOutput:
        """处理单条请求并入队

        Args:
            request: 工作流日志请求
            transaction: 当前日志事务上下文

        Returns:
            回显合并堆栈的响应
        """
        combined_stacktrace = combine_stacktraces(request.stacktrace, request.full_stacktrace)
        details = request.details

        level, level_note = resolve_level(request.level)
        if level_note is not None:
            logger.warning("Unknown log level %r, falling back to INFO", request.level)
            details = append_note(details, level_note)

        category, category_note = resolve_category(request.category)
        if category_note is not None:
            logger.warning("Unknown log category %r, falling back to Flow", request.category)
            details = append_note(details, category_note)

        if not _is_blank(request.transaction_id):
            transaction.resume(request.transaction_id or "")
        elif not transaction.is_active:
            transaction.start()

        builder = (
            LogEntryBuilder()
            .category(category)
            .type(request.type)
            .area(request.area)
            .summary(request.summary)
            .details(details)
            .interview_guid(request.interview_id)
            .flow_api_name(request.workflow_name)
            .operation(request.operation)
            .stacktrace(combined_stacktrace)
            .post_processing(PostProcessingOptions.all_enabled())
            .level(level)
        )

        if level.creates_issue():
            builder.create_issue()

        if not _is_blank(request.additional_fields):
            raw = request.additional_fields or ""
            fields = parse_additional_fields(raw)
            if fields is None:
                logger.warning("additional_fields is not a JSON object, kept as details")
                builder.details(
                    append_note(
                        builder.details_text,
                        format_message(INVALID_ADDITIONAL_FIELDS_TEMPLATE, raw),
                    )
                )
            else:
                for key, value in fields.items():
                    builder.attribute(key, value)

        self.pipeline.enqueue(builder, transaction.current_transaction_id)

        return FlowLogOutput(
            stacktrace=combined_stacktrace,
            full_stacktrace=combined_stacktrace,
            transaction_id=transaction.current_transaction_id,
        )
