"""日志注释模板与格式化工具

当输入无法解析时，处理流程不会失败，而是把原因追加到日志 details 中。
模板使用位置占位符 {0}、{1} ...
"""

from __future__ import annotations

from typing import Any

UNKNOWN_LEVEL_TEMPLATE = "Unable to locate log level: {0}. Default INFO level will be used."
UNKNOWN_CATEGORY_TEMPLATE = "Unable to locate category: {0}. Default Flow category will be used."
INVALID_ADDITIONAL_FIELDS_TEMPLATE = (
    "Additional Information (failed to parse json input to invokable): {0}."
)


def format_message(template: str, *values: Any) -> str:
    """按位置占位符格式化消息（None 渲染为空字符串）"""
    return template.format(*("" if value is None else value for value in values))


def append_note(details: str | None, note: str) -> str:
    """将注释追加到 details 末尾（换行分隔；details 为空白时直接返回注释）"""
    if details is None or not details.strip():
        return note
    return f"{details}\n{note}"
