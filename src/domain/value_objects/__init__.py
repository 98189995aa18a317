"""Domain 值对象

导出所有领域值对象，方便其他模块导入
"""

from src.domain.value_objects.log_category import LogCategory
from src.domain.value_objects.log_level import LogLevel
from src.domain.value_objects.post_processing_options import PostProcessingOptions

__all__ = ["LogCategory", "LogLevel", "PostProcessingOptions"]
