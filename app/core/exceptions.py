from typing import Optional, Any


class SMSDeskError(Exception):
    """
    Base exception for the SMS Desk application.
    """
    def __init__(self, message: str, code: str = "INTERNAL_ERROR", status_code: int = 500, details: Optional[Any] = None):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class MissingInputError(SMSDeskError):
    """
    Raised when a required request field is missing or blank.
    """
    def __init__(self, message: str = "Phone number and context are required", details: Optional[Any] = None):
        super().__init__(message, code="MISSING_INPUT", status_code=400, details=details)


class DeliveryError(SMSDeskError):
    """
    Raised when the SMS gateway did not accept a message.
    The failed attempt has already been recorded when this is raised.
    """
    def __init__(self, message: str = "Failed to send message", details: Optional[Any] = None):
        super().__init__(message, code="DELIVERY_FAILED", status_code=502, details=details)


class ExternalServiceError(SMSDeskError):
    """
    Raised when an external service (e.g., OpenAI) fails.
    """
    def __init__(self, message: str = "External service error", details: Optional[Any] = None):
        super().__init__(message, code="EXTERNAL_SERVICE_ERROR", status_code=502, details=details)
