"""
app/services/ledger_service.py

Purpose: In-memory message history

- Append-only list of delivery attempts for the process lifetime
- Most-recent-first listing with sent/failed counts
- Appends and reads are serialized by a lock
"""

import threading
from dataclasses import dataclass
from typing import List

from app.schemas.message import MessageRecord, MessageStats, MessageStatus


@dataclass(frozen=True)
class LedgerSnapshot:
    records: List[MessageRecord]
    stats: MessageStats


class MessageLedger:
    """
    Process-lifetime record of every send attempt.
    Records are write-once; nothing is updated or removed.
    """

    def __init__(self):
        self._records: List[MessageRecord] = []
        self._lock = threading.Lock()

    def append(self, record: MessageRecord) -> None:
        with self._lock:
            self._records.append(record)

    def list_all(self) -> LedgerSnapshot:
        """
        Returns a copy of all records, newest first, with aggregate counts.
        """
        with self._lock:
            records = list(reversed(self._records))

        sent = sum(1 for r in records if r.status == MessageStatus.SENT)
        failed = sum(1 for r in records if r.status == MessageStatus.FAILED)

        return LedgerSnapshot(
            records=records,
            stats=MessageStats(total=len(records), sent=sent, failed=failed)
        )

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
