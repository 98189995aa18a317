"""In-memory LogEntryRepository adapter (Infrastructure)."""

from __future__ import annotations

import threading
from collections.abc import Sequence

from src.domain.entities.log_entry import LogEntry
from src.domain.entities.log_issue import LogIssue
from src.domain.exceptions import NotFoundError
from src.domain.ports.log_entry_repository import LogEntryRepository


class InMemoryLogEntryRepository(LogEntryRepository):
    def __init__(self) -> None:
        self._entries: dict[str, LogEntry] = {}
        self._issues: list[LogIssue] = []
        self._lock = threading.Lock()

    def add_all(self, entries: Sequence[LogEntry]) -> None:
        with self._lock:
            for entry in entries:
                self._entries[entry.id] = entry

    def add_issues(self, issues: Sequence[LogIssue]) -> None:
        with self._lock:
            self._issues.extend(issues)

    def get_by_id(self, entry_id: str) -> LogEntry:
        with self._lock:
            entry = self._entries.get(entry_id)
        if entry is None:
            raise NotFoundError("LogEntry", entry_id)
        return entry

    def list_by_transaction_id(self, transaction_id: str, limit: int = 100) -> list[LogEntry]:
        with self._lock:
            matched = [e for e in self._entries.values() if e.transaction_id == transaction_id]
        return sorted(matched, key=lambda e: e.created_at)[:limit]

    def list_by_interview_guid(self, interview_guid: str, limit: int = 100) -> list[LogEntry]:
        with self._lock:
            matched = [e for e in self._entries.values() if e.interview_guid == interview_guid]
        return sorted(matched, key=lambda e: e.created_at)[:limit]

    def list_issues_by_transaction_id(self, transaction_id: str) -> list[LogIssue]:
        with self._lock:
            return [i for i in self._issues if i.transaction_id == transaction_id]
