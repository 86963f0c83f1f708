import logging
from abc import ABC, abstractmethod
from typing import Callable, Dict, Optional, Union

from twitter_cards.models.card_model import TwitterCard
from . import card_builders
from .exceptions import MalformedCardError, UnsupportedCardTypeError
from .html_parser import HTMLParser
from .models import TagCollection
from .tag_resolver import resolve_scalar


logger = logging.getLogger(__name__)

CardBuilder = Callable[[TagCollection, str], TwitterCard]

LIVE_VIDEO_CARD_TYPE = "745291183405076480:live_video"
PERISCOPE_CARD_TYPE = "3691233323:periscope_broadcast"
DEPRECATED_CARD_TYPES = frozenset({"photo", "gallery", "product"})

CARD_BUILDERS: Dict[str, CardBuilder] = {
    "summary": lambda tags, origin: card_builders.build_summary(tags, "summary", origin),
    "summary_large_image": lambda tags, origin: card_builders.build_summary(tags, "summary_large_image", origin),
    # still used by flickr
    "photo": lambda tags, origin: card_builders.build_summary(tags, "summary_large_image", origin),
    "gallery": lambda tags, origin: card_builders.build_gallery(tags, origin),
    "app": lambda tags, origin: card_builders.build_app(tags),
    "player": lambda tags, origin: card_builders.build_player(tags),
    "audio": lambda tags, origin: card_builders.build_audio(tags),
    "product": lambda tags, origin: card_builders.build_summary(tags, "summary", origin),
    "amplify": lambda tags, origin: card_builders.build_amplify(tags),
    LIVE_VIDEO_CARD_TYPE: lambda tags, origin: card_builders.build_undocumented(tags, LIVE_VIDEO_CARD_TYPE),
    PERISCOPE_CARD_TYPE: lambda tags, origin: card_builders.build_undocumented(tags, PERISCOPE_CARD_TYPE),
}


def get_card_type(tags: TagCollection) -> Optional[str]:
    """Try twitter:card and then an og:type of "article" """
    card_type = resolve_scalar(tags, "card")
    if card_type is not None:
        return card_type

    og_type = tags.find("og:type")
    if og_type is not None and og_type.text == "article":
        return "summary"
    return None


def build_card(tags: TagCollection, card_type: str, origin: str) -> TwitterCard:
    """
    Dispatch to the shape builder registered for the card type.

    Raises:
        UnsupportedCardTypeError: If no builder handles the card type
        MalformedCardError: If the builder failed, the original error is the cause
    """
    builder = CARD_BUILDERS.get(card_type)
    if builder is None:
        raise UnsupportedCardTypeError(card_type)

    if card_type in DEPRECATED_CARD_TYPES:
        logger.warning(f"Deprecated '{card_type}' card type is detected")

    try:
        return builder(tags, origin)
    except Exception as e:
        raise MalformedCardError(card_type, e) from e


def parse(html: Union[str, bytes], origin: str) -> Optional[TwitterCard]:
    """
    Extract the Twitter Card of an HTML document.

    Args:
        html: HTML document as text or raw bytes
        origin: Canonical URL of the page, copied verbatim into summary cards

    Returns:
        The card record, or None when the page declares no card
    """
    tags = HTMLParser(html).get_meta_tags()
    card_type = get_card_type(tags)
    if card_type is None:
        logger.debug(f"No Twitter Card found for origin: {origin}")
        return None

    logger.info(f"Parsing Twitter Card of type '{card_type}' for origin: {origin}")
    return build_card(tags, card_type, origin)


class CardParserInterface(ABC):
    """Interface for card parsing following the Dependency Inversion Principle"""

    @abstractmethod
    def parse(self, html: Union[str, bytes], origin: str) -> Optional[TwitterCard]:
        pass


class CardParser(CardParserInterface):
    """Stateless card parser, safe to share between threads"""

    def parse(self, html: Union[str, bytes], origin: str) -> Optional[TwitterCard]:
        return parse(html, origin)
