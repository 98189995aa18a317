"""PostProcessingOptions 值对象 - 日志后处理选项

业务定义：
- 告诉日志管道在持久化一条日志时需要采集哪些上下文信息
- 工作流日志总是开启全部选项
"""

from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class PostProcessingOptions:
    """日志后处理选项（不可变）

    Attributes:
        stack_trace: 采集堆栈
        user_info: 采集当前用户信息
        related_objects: 采集关联记录
        installed_packages: 采集已安装包信息
        pending_jobs: 采集待处理作业信息
        total_active_sessions: 采集活跃会话数
    """

    stack_trace: bool = False
    user_info: bool = False
    related_objects: bool = False
    installed_packages: bool = False
    pending_jobs: bool = False
    total_active_sessions: bool = False

    @classmethod
    def all_enabled(cls) -> PostProcessingOptions:
        return cls(
            stack_trace=True,
            user_info=True,
            related_objects=True,
            installed_packages=True,
            pending_jobs=True,
            total_active_sessions=True,
        )

    def to_dict(self) -> dict[str, bool]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, bool] | None) -> PostProcessingOptions:
        if not data:
            return cls()
        known = {key: bool(value) for key, value in data.items() if key in cls.__dataclass_fields__}
        return cls(**known)
