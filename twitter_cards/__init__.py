"""
Twitter Card metadata extraction.

Usage:
    from twitter_cards import parse

    card = parse(html, "https://example.com/article")
"""

from .models.card_model import (
    AmplifyCard,
    AppCard,
    AppStoreData,
    AudioCard,
    PlayerCard,
    SummaryCard,
    TwitterCard,
    UndocumentedCard,
    ValueOrId,
)
from .services.card_parser import CardParser, parse
from .services.exceptions import (
    CardError,
    MalformedCardError,
    MissingRequiredFieldError,
    UnsupportedCardTypeError,
)

__all__ = [
    "AmplifyCard",
    "AppCard",
    "AppStoreData",
    "AudioCard",
    "CardError",
    "CardParser",
    "MalformedCardError",
    "MissingRequiredFieldError",
    "PlayerCard",
    "SummaryCard",
    "TwitterCard",
    "UndocumentedCard",
    "UnsupportedCardTypeError",
    "ValueOrId",
    "parse",
]
