"""API Container (composition root state holder).

This module only defines types/structure for objects created in the real
composition root (`src/interfaces/api/main.py`).
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from sqlalchemy.orm import Session

from src.application.ports.transaction_manager import TransactionManager
from src.domain.ports.log_entry_repository import LogEntryRepository


@dataclass(frozen=True, slots=True)
class ApiContainer:
    """Typed container attached to `app.state.container`."""

    log_entry_repository: Callable[[Session], LogEntryRepository]
    transaction_manager: Callable[[Session], TransactionManager]
