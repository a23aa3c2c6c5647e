"""
app/services/messaging_service.py

Purpose: Send workflow orchestration

- Validates required input
- Composes text, attempts delivery, records the attempt
- Every attempted send produces exactly one ledger entry,
  whether or not delivery succeeded
"""

import uuid
from dataclasses import dataclass
from typing import Optional

from app.core.exceptions import DeliveryError, MissingInputError
from app.core.logging import get_logger, LogContext
from app.schemas.message import (
    DEFAULT_MESSAGE_TYPE,
    MessageRecord,
    MessageStatus,
)
from app.services.composer_service import MessageComposer
from app.services.ledger_service import LedgerSnapshot, MessageLedger
from app.services.twilio_service import DeliveryOutcome, TwilioService
from utils.constants import MISSING_INPUT_ERROR, SEND_FAILED_ERROR
from utils.sms_utils import mask_phone, preview
from utils.time_utils import utc_now

logger = get_logger(__name__)


@dataclass(frozen=True)
class SendResult:
    record: MessageRecord
    outcome: DeliveryOutcome


class MessagingService:
    """Coordinates composer, gateway and ledger for one send."""

    def __init__(
        self,
        composer: MessageComposer,
        gateway: TwilioService,
        ledger: MessageLedger
    ):
        self.composer = composer
        self.gateway = gateway
        self.ledger = ledger

    async def send_message(
        self,
        destination: Optional[str],
        context: Optional[str],
        category: Optional[str] = None
    ) -> SendResult:
        """
        Composes and sends one SMS, then records the attempt.

        Args:
            destination: Recipient phone number
            context: Free-text context for the message
            category: Message category; defaults to followup

        Returns:
            SendResult with the stored record and delivery outcome

        Raises:
            MissingInputError: destination or context is missing or empty (nothing recorded)
            DeliveryError: gateway did not accept the message (attempt recorded as failed)
        """
        if not destination or not context:
            raise MissingInputError(MISSING_INPUT_ERROR)

        category = (category or "").strip() or DEFAULT_MESSAGE_TYPE.value
        message_id = uuid.uuid4().hex

        with LogContext(message_id=message_id, recipient=mask_phone(destination), category=category):
            text = await self.composer.compose(category, context)
            logger.info(f"Message composed: {preview(text)}")

            try:
                outcome = await self.gateway.deliver(destination, text)
            except Exception as e:
                logger.error(f"Unexpected delivery error: {e}", exc_info=True)
                outcome = DeliveryOutcome(delivered=False, error=SEND_FAILED_ERROR)

            record = MessageRecord(
                id=message_id,
                recipient=destination,
                content=text,
                timestamp=utc_now(),
                status=MessageStatus.SENT if outcome.delivered else MessageStatus.FAILED,
            )
            self.ledger.append(record)
            logger.info(f"Message recorded as {record.status.value}")

        if not outcome.delivered:
            raise DeliveryError(outcome.error or SEND_FAILED_ERROR)

        return SendResult(record=record, outcome=outcome)

    def list_messages(self) -> LedgerSnapshot:
        """Returns all recorded attempts, newest first, with counts."""
        return self.ledger.list_all()
