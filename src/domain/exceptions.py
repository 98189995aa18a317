"""领域层异常定义

异常分层：
- DomainError：业务规则违反（Domain 层）
- NotFoundError：查询的实体不存在，API 层统一转换为 404

说明：
- 级别/分类/additional_fields 的解析失败不属于异常，处理流程会回退默认值并写入 details
"""


class DomainError(Exception):
    """领域层异常基类

    示例：
        if not summary:
            raise DomainError("summary 不能为空")
    """

    pass


class NotFoundError(DomainError):
    """实体不存在异常

    用途：
    - Repository 的 get_by_id() 查询不到记录时抛出（如：LogEntry 不存在）

    参数：
        entity_type: 实体类型（如："LogEntry"）
        entity_id: 实体 ID
    """

    def __init__(self, entity_type: str, entity_id: str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} 不存在: {entity_id}")

