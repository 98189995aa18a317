"""LogCategory 枚举 - 日志分类

业务定义：
- LogCategory 标识日志来源的技术类别（Flow、Apex、Integration 等）
- 工作流引擎提交的日志默认归类为 Flow

设计原则：
- 继承 str 方便序列化和数据库存储
- 值为展示名称（如 "Flow"），解析时同时接受成员名与展示名
"""

from __future__ import annotations

from enum import Enum


class LogCategory(str, Enum):
    """日志分类枚举

    支持的分类：
    - APEX: 后端代码
    - FLOW: 低代码工作流
    - LWC / AURA: 前端组件
    - INTEGRATION: 外部系统集成
    - EVENT: 平台事件
    - DEBUG / WARNING: 调试与告警类日志
    """

    APEX = "Apex"
    FLOW = "Flow"
    LWC = "LWC"
    AURA = "Aura"
    INTEGRATION = "Integration"
    EVENT = "Event"
    DEBUG = "Debug"
    WARNING = "Warning"

    @classmethod
    def parse(cls, value: str | None) -> LogCategory | None:
        """将字符串解析为 LogCategory（大小写不敏感）

        空白或无法识别时返回 None，由调用方决定默认分类。
        """
        if value is None:
            return None
        normalized = value.strip().lower()
        if not normalized:
            return None
        for member in cls:
            if normalized in (member.name.lower(), member.value.lower()):
                return member
        return None
