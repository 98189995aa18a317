"""Infrastructure Adapters Package

提供 Domain Port 的 Infrastructure 层适配器实现。
遵循 Ports and Adapters 架构模式。
"""

from src.infrastructure.adapters.in_memory_log_entry_repository import (
    InMemoryLogEntryRepository,
)

__all__ = ["InMemoryLogEntryRepository"]
