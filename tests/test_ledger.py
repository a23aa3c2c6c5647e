import threading
import uuid

from app.schemas.message import MessageRecord, MessageStatus
from app.services.ledger_service import MessageLedger
from utils.time_utils import utc_now


def make_record(status: MessageStatus = MessageStatus.SENT, content: str = "hello") -> MessageRecord:
    return MessageRecord(
        id=uuid.uuid4().hex,
        recipient="+15555550123",
        content=content,
        timestamp=utc_now(),
        status=status,
    )


def test_empty_ledger():
    snapshot = MessageLedger().list_all()

    assert snapshot.records == []
    assert snapshot.stats.total == 0
    assert snapshot.stats.sent == 0
    assert snapshot.stats.failed == 0


def test_list_is_most_recent_first():
    ledger = MessageLedger()
    first = make_record(content="first")
    second = make_record(content="second")

    ledger.append(first)
    ledger.append(second)

    assert [r.content for r in ledger.list_all().records] == ["second", "first"]


def test_stats_count_statuses():
    ledger = MessageLedger()
    for status in (MessageStatus.SENT, MessageStatus.FAILED, MessageStatus.SENT):
        ledger.append(make_record(status))

    stats = ledger.list_all().stats

    assert stats.total == 3
    assert stats.sent == 2
    assert stats.failed == 1
    assert stats.sent + stats.failed == stats.total


def test_snapshot_is_not_affected_by_later_appends():
    ledger = MessageLedger()
    ledger.append(make_record())

    snapshot = ledger.list_all()
    ledger.append(make_record())

    assert len(snapshot.records) == 1
    assert len(ledger) == 2


def test_concurrent_appends_are_not_lost():
    ledger = MessageLedger()

    def worker():
        for _ in range(250):
            ledger.append(make_record())

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    snapshot = ledger.list_all()
    assert snapshot.stats.total == 2000
    assert len({r.id for r in snapshot.records}) == 2000
