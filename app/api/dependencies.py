"""
app/api/dependencies.py

Purpose: FastAPI dependency providers

- Hands the application's ledger to request handlers
- Builds composer, gateway and messaging service per request
- Overridable in tests via app.dependency_overrides
"""

from fastapi import Depends, Request

from app.core.config import Settings, get_settings
from app.services.composer_service import MessageComposer
from app.services.ledger_service import MessageLedger
from app.services.messaging_service import MessagingService
from app.services.twilio_service import TwilioService


def get_ledger(request: Request) -> MessageLedger:
    """The ledger owned by the running application."""
    return request.app.state.ledger


def get_composer(config: Settings = Depends(get_settings)) -> MessageComposer:
    return MessageComposer(config)


def get_gateway(config: Settings = Depends(get_settings)) -> TwilioService:
    return TwilioService(config)


def get_messaging_service(
    composer: MessageComposer = Depends(get_composer),
    gateway: TwilioService = Depends(get_gateway),
    ledger: MessageLedger = Depends(get_ledger),
) -> MessagingService:
    return MessagingService(composer=composer, gateway=gateway, ledger=ledger)
