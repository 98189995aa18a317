"""领域层 Ports - 定义领域层需要的外部依赖接口

为什么需要 Ports？
1. 依赖倒置（DIP）：让基础设施层依赖领域层，而不是反过来
2. 可测试性：Use Case 可以使用 Mock 或内存 Repository 进行测试
"""

from src.domain.ports.log_entry_repository import LogEntryRepository

__all__ = ["LogEntryRepository"]
