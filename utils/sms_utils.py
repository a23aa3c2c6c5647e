"""
utils/sms_utils.py

Purpose: SMS helpers

- Masks phone numbers before they reach the logs
- Shortens message bodies for log previews
- Builds the Twilio form payload
"""

from typing import Dict


def mask_phone(phone: str, visible: int = 4) -> str:
    """
    Masks all but the last few digits of a phone number.

    Example:
        mask_phone("+15555550123") -> "********0123"
    """
    if not phone:
        return ""
    if len(phone) <= visible:
        return "*" * len(phone)
    return "*" * (len(phone) - visible) + phone[-visible:]


def preview(text: str, limit: int = 50) -> str:
    """
    Returns the first characters of a message for logging.
    """
    if text is None:
        return ""
    if len(text) <= limit:
        return text
    return text[:limit] + "..."


def build_twilio_sms_payload(to_phone: str, from_phone: str, body: str) -> Dict[str, str]:
    """
    Builds the form fields expected by Twilio's Messages endpoint.
    """
    return {
        "To": to_phone,
        "From": from_phone,
        "Body": body,
    }
