"""
Send one SMS through the full pipeline

Composes a message (OpenAI or template), delivers it via Twilio
(or demo mode) and prints the recorded outcome.

Usage: python scripts/send_test_sms.py +15555550123 "appointment at 2pm" --type reminder
"""

import argparse
import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

load_dotenv()

from app.core.config import Settings  # noqa: E402
from app.core.exceptions import SMSDeskError  # noqa: E402
from app.services.composer_service import MessageComposer  # noqa: E402
from app.services.ledger_service import MessageLedger  # noqa: E402
from app.services.messaging_service import MessagingService  # noqa: E402
from app.services.twilio_service import TwilioService  # noqa: E402
from utils.constants import MESSAGE_TYPE_LABELS  # noqa: E402
from utils.time_utils import format_timestamp  # noqa: E402


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Send a test SMS")
    parser.add_argument("phone", help="Recipient phone number with country code")
    parser.add_argument("context", help="What the message should be about")
    parser.add_argument(
        "--type",
        dest="message_type",
        default="followup",
        help=f"Message type ({', '.join(MESSAGE_TYPE_LABELS)})",
    )
    return parser.parse_args(argv)


async def run(args: argparse.Namespace) -> int:
    config = Settings()
    ledger = MessageLedger()
    service = MessagingService(
        composer=MessageComposer(config),
        gateway=TwilioService(config),
        ledger=ledger,
    )

    print(f"\n📤 Sending {args.message_type} message to {args.phone}...")
    if not config.gateway_available:
        print("⚠️  Twilio not configured, running in demo mode")

    exit_code = 0
    try:
        result = await service.send_message(args.phone, args.context, args.message_type)
        print(f"✅ Sent: {result.record.content}")
        if result.outcome.message_sid:
            print(f"   SID: {result.outcome.message_sid}")
    except SMSDeskError as e:
        print(f"❌ {e.message} ({e.code})")
        exit_code = 1

    snapshot = ledger.list_all()
    for record in snapshot.records:
        print(f"   [{format_timestamp(record.timestamp)}] {record.status.value}: {record.recipient}")
    print(f"\nRecorded: {snapshot.stats.total} (sent={snapshot.stats.sent}, failed={snapshot.stats.failed})")
    return exit_code


if __name__ == "__main__":
    sys.exit(asyncio.run(run(parse_args())))
