"""
app/services/twilio_service.py

Purpose: Twilio SMS delivery

- Sends one SMS per call via the Twilio REST API
- Simulates success (demo mode) when credentials are not configured
- Reports pass/fail; provider error bodies are logged, never returned
"""

import httpx
from dataclasses import dataclass
from typing import Optional

from app.core.config import Settings, settings as default_settings
from app.core.logging import get_logger
from utils.constants import GATEWAY_NETWORK_ERROR, GATEWAY_REJECTED_ERROR
from utils.sms_utils import build_twilio_sms_payload, mask_phone

logger = get_logger(__name__)


@dataclass(frozen=True)
class DeliveryOutcome:
    """Result of a single delivery attempt."""
    delivered: bool
    error: Optional[str] = None
    message_sid: Optional[str] = None
    simulated: bool = False


class TwilioService:
    """Service for sending SMS messages via Twilio"""

    def __init__(
        self,
        config: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.config = config or default_settings
        self._transport = transport

    @property
    def messages_url(self) -> str:
        return (
            f"{self.config.TWILIO_API_BASE_URL}/2010-04-01/Accounts/"
            f"{self.config.TWILIO_ACCOUNT_SID}/Messages.json"
        )

    def is_configured(self) -> bool:
        """Check if Twilio is properly configured"""
        return self.config.gateway_available

    async def deliver(self, to_phone: str, message: str) -> DeliveryOutcome:
        """
        Sends an SMS via Twilio. Exactly one attempt, no retries.

        Args:
            to_phone: Recipient phone (+15555550123)
            message: Message text

        Returns:
            DeliveryOutcome with delivered=True on success or in demo mode
        """
        if not self.is_configured():
            logger.info(f"Twilio not configured, running in demo mode (to {mask_phone(to_phone)})")
            return DeliveryOutcome(delivered=True, simulated=True)

        data = build_twilio_sms_payload(to_phone, self.config.TWILIO_PHONE_NUMBER, message)

        logger.info(f"Sending SMS to {mask_phone(to_phone)}")

        try:
            async with httpx.AsyncClient(
                transport=self._transport,
                timeout=self.config.TWILIO_TIMEOUT
            ) as client:
                response = await client.post(
                    self.messages_url,
                    data=data,
                    auth=(self.config.TWILIO_ACCOUNT_SID, self.config.TWILIO_AUTH_TOKEN)
                )
        except httpx.TimeoutException:
            logger.error("Twilio API timeout")
            return DeliveryOutcome(delivered=False, error=GATEWAY_NETWORK_ERROR)
        except httpx.RequestError as e:
            logger.error(f"SMS sending error: {e}")
            return DeliveryOutcome(delivered=False, error=GATEWAY_NETWORK_ERROR)

        if not response.is_success:
            logger.error(f"Twilio API error: {response.status_code} - {response.text[:300]}")
            return DeliveryOutcome(delivered=False, error=GATEWAY_REJECTED_ERROR)

        message_sid = None
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            message_sid = body.get("sid")
        else:
            logger.warning("Twilio accepted the message but returned no message object")

        logger.info(f"SMS sent: SID={message_sid}")
        return DeliveryOutcome(delivered=True, message_sid=message_sid)
