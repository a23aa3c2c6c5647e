"""
app/api/messages.py

Purpose: Message endpoints

- POST /send-message: compose, send and record one SMS
- GET /messages: history (newest first) with sent/failed counts
- GET /message-types: categories for the dashboard picker
"""

from fastapi import APIRouter, Depends

from app.api.dependencies import get_messaging_service
from app.core.logging import get_logger
from app.schemas.message import (
    DEFAULT_MESSAGE_TYPE,
    MessageListResponse,
    MessageType,
    MessageTypeListResponse,
    MessageTypeOption,
    SendMessageRequest,
    SendMessageResponse,
)
from app.schemas.response import ErrorResponse
from app.services.messaging_service import MessagingService
from utils.constants import MESSAGE_TYPE_LABELS, SEND_SUCCESS_MESSAGE

logger = get_logger(__name__)
router = APIRouter()


@router.post(
    "/send-message",
    response_model=SendMessageResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Phone number or context missing"},
        502: {"model": ErrorResponse, "description": "SMS gateway rejected the message"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
)
async def send_message(
    payload: SendMessageRequest,
    service: MessagingService = Depends(get_messaging_service),
):
    """
    Composes a message for the given context and sends it.

    Failed deliveries are still recorded in the message history.
    """
    result = await service.send_message(
        destination=payload.phone_number,
        context=payload.message_context,
        category=payload.message_type,
    )
    return SendMessageResponse(
        success=True,
        message=SEND_SUCCESS_MESSAGE.format(content=result.record.content),
    )


@router.get("/messages", response_model=MessageListResponse)
async def list_messages(service: MessagingService = Depends(get_messaging_service)):
    snapshot = service.list_messages()
    return MessageListResponse(messages=snapshot.records, stats=snapshot.stats)


@router.get("/message-types", response_model=MessageTypeListResponse)
async def list_message_types():
    return MessageTypeListResponse(
        types=[
            MessageTypeOption(value=t.value, label=MESSAGE_TYPE_LABELS[t.value])
            for t in MessageType
        ],
        default=DEFAULT_MESSAGE_TYPE.value,
    )
