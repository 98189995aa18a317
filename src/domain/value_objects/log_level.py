"""LogLevel 枚举 - 日志严重级别

业务定义：
- LogLevel 表示一条日志的严重级别
- 工作流引擎以字符串提交级别，由 parse() 转换为枚举
- ERROR 为最高级别，会额外触发 Issue 创建

设计原则：
- 继承 str：序列化/数据库存储友好
- parse() 不抛异常：无法识别时返回 None，由调用方决定默认值
"""

from __future__ import annotations

from enum import Enum


class LogLevel(str, Enum):
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"
    DEBUG = "DEBUG"
    FINE = "FINE"
    FINER = "FINER"
    FINEST = "FINEST"

    @classmethod
    def parse(cls, value: str | None) -> LogLevel | None:
        """将字符串解析为 LogLevel（大小写不敏感）

        参数：
            value: 原始级别字符串（可为空）

        返回：
            匹配的 LogLevel；空白或无法识别时返回 None
        """
        if value is None:
            return None
        normalized = value.strip().upper()
        if not normalized:
            return None
        for member in cls:
            if member.name == normalized:
                return member
        return None

    def creates_issue(self) -> bool:
        return self is LogLevel.ERROR
