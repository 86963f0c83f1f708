"""Custom exception hierarchy for the card parsing layer"""

from typing import Optional


class ServiceError(Exception):
    """Base exception for all service-related errors"""
    def __init__(self, message: str, error_code: Optional[str] = None):
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class CardError(ServiceError):
    """Base exception for Twitter Card parsing failures"""
    def __init__(self, message: str = "Error parsing Twitter Card", error_code: str = "CARD_ERROR"):
        super().__init__(message, error_code)


class MissingRequiredFieldError(CardError):
    """Raised when a required card tag is absent after all fallbacks"""
    def __init__(self, field: str, message: Optional[str] = None):
        if message is None:
            message = f"The required '{field}' tag does not exist"
        super().__init__(message, "MISSING_REQUIRED_FIELD")
        self.field = field


class UnsupportedCardTypeError(CardError):
    """Raised when the card discriminant is not a known card type"""
    def __init__(self, card_type: str):
        super().__init__(f"Unsupported card type '{card_type}'", "UNSUPPORTED_CARD_TYPE")
        self.card_type = card_type


class MalformedCardError(CardError):
    """Raised when a known card type could not be assembled from its tags"""
    def __init__(self, card_type: str, cause: Exception):
        reason = getattr(cause, "message", None) or str(cause) or type(cause).__name__
        super().__init__(f"Malformed card of type '{card_type}': {reason}", "MALFORMED_CARD")
        self.card_type = card_type
        self.cause = cause
