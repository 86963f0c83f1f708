from .base import AppException, ErrorCode
from twitter_cards.services.exceptions import CardError, MalformedCardError, UnsupportedCardTypeError


class PayloadTooLargeException(AppException):
    """Raised when the submitted HTML document exceeds the configured size"""
    
    def __init__(self, size: int, limit: int):
        super().__init__(
            code=ErrorCode.PAYLOAD_TOO_LARGE,
            message=f"HTML document of {size} bytes exceeds the limit of {limit} bytes",
            status_code=413,
            details={"size": size, "limit": limit}
        )


class InvalidCardException(AppException):
    """Raised when the submitted document declares a card that cannot be parsed"""
    
    def __init__(self, error: CardError, origin: str = ""):
        details = {"origin": origin} if origin else {}
        code = ErrorCode.MALFORMED_CARD
        if isinstance(error, UnsupportedCardTypeError):
            code = ErrorCode.UNSUPPORTED_CARD_TYPE
            details["card_type"] = error.card_type
        elif isinstance(error, MalformedCardError):
            details["card_type"] = error.card_type
            details["cause"] = getattr(error.cause, "error_code", None) or type(error.cause).__name__
            
        super().__init__(
            code=code,
            message=error.message,
            status_code=422,
            details=details
        )
