"""
app/schemas/message.py

Purpose: Message request/response schemas and the ledger record model

- Fixed-shape MessageRecord with a closed status enum
- Send/list request and response payloads
- Wire names follow the dashboard client (phoneNumber, messageContext, messageType)
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from datetime import datetime
from enum import Enum


class MessageStatus(str, Enum):
    """Outcome of one delivery attempt. Set once, never changes."""
    SENT = "sent"
    FAILED = "failed"


class MessageType(str, Enum):
    """Message categories with a dedicated template."""
    FOLLOWUP = "followup"
    REMINDER = "reminder"
    GREETING = "greeting"
    THANKYOU = "thankyou"
    UPDATE = "update"
    CUSTOM = "custom"


DEFAULT_MESSAGE_TYPE = MessageType.FOLLOWUP


class MessageRecord(BaseModel):
    """
    One delivery attempt as stored in the ledger.
    Immutable once created.
    """
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unique record identifier")
    recipient: str = Field(..., description="Destination phone number")
    content: str = Field(..., description="Final composed message text")
    timestamp: datetime = Field(..., description="Creation time (UTC)")
    status: MessageStatus


class MessageStats(BaseModel):
    total: int = 0
    sent: int = 0
    failed: int = 0


class SendMessageRequest(BaseModel):
    """
    Inbound send request.

    Every field is optional here so that missing values are reported
    as a client-input error by the messaging service, not as a schema error.
    """
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "phoneNumber": "+15555550123",
                "messageContext": "appointment at 2pm",
                "messageType": "reminder"
            }
        }
    )

    phone_number: Optional[str] = Field(default=None, alias="phoneNumber")
    message_context: Optional[str] = Field(default=None, alias="messageContext")
    message_type: Optional[str] = Field(default=None, alias="messageType")


class SendMessageResponse(BaseModel):
    success: bool = True
    message: str


class MessageListResponse(BaseModel):
    messages: List[MessageRecord]
    stats: MessageStats


class MessageTypeOption(BaseModel):
    value: str
    label: str


class MessageTypeListResponse(BaseModel):
    types: List[MessageTypeOption]
    default: str
