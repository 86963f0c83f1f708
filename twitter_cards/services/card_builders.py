"""
Shape builders turning a document's meta tags into card records.

Each builder reads the tags through the tag resolver and returns one card
variant. Missing required tags raise MissingRequiredFieldError; the card
parser wraps those into MalformedCardError.
"""

import math
import re
from typing import Optional, Union

from twitter_cards.models.card_model import (
    AmplifyCard,
    AppCard,
    AudioCard,
    PlayerCard,
    SummaryCard,
    UndocumentedCard,
)
from .models import ResolveOptions, TagCollection
from .tag_resolver import (
    flatten_namespace,
    resolve_field,
    resolve_fixed_key_set,
    resolve_scalar,
)


DESCRIPTION_MAX_LENGTH = 200
APP_STORES = ("iphone", "ipad", "googleplay")

SITE = ResolveOptions(allow_identifier_form=True)
REQUIRED = ResolveOptions(required=True)
OG_OPTIONAL = ResolveOptions(fallback_namespace="og")
OG_REQUIRED = ResolveOptions(fallback_namespace="og", required=True)
GALLERY_IMAGE = ResolveOptions(fallback_namespace="og", fallback_field="image", required=True)

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")
_LEADING_FLOAT_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_int(text: Optional[str]) -> Optional[Union[int, float]]:
    """Parse leading base-10 digits, NaN when there are none, None when absent"""
    if text is None:
        return None
    match = _LEADING_INT_RE.match(text)
    return int(match.group(1)) if match else math.nan


def parse_float(text: Optional[str]) -> Optional[float]:
    """Parse a leading decimal number, NaN when there is none, None when absent"""
    if text is None:
        return None
    match = _LEADING_FLOAT_RE.match(text)
    return float(match.group(1)) if match else math.nan


def build_summary(tags: TagCollection, card_type: str, origin: str) -> SummaryCard:
    fields = {
        "card": card_type,
        "origin": origin,
        # twitter:site is not enforced by the Twitter server
        "site": resolve_field(tags, "site", SITE),
        "title": resolve_scalar(tags, "title", OG_REQUIRED),
        "description": resolve_scalar(tags, "description", OG_REQUIRED)[:DESCRIPTION_MAX_LENGTH],
    }

    image = resolve_field(tags, "image", OG_OPTIONAL)
    if image is not None:
        fields["image"] = image.value
        fields["image_alt"] = resolve_scalar(tags, "image:alt")

    return SummaryCard(**fields)


def build_gallery(tags: TagCollection, origin: str) -> SummaryCard:
    """
    Parse the retired gallery card as a summary_large_image one.

    Unlike the summary card the description is optional and not truncated.
    """
    return SummaryCard(
        card="summary_large_image",
        origin=origin,
        title=resolve_scalar(tags, "title", OG_REQUIRED),
        description=resolve_scalar(tags, "description", OG_OPTIONAL),
        image=resolve_scalar(tags, "image0", GALLERY_IMAGE),
    )


def build_app(tags: TagCollection) -> AppCard:
    return AppCard(
        site=resolve_field(tags, "site", SITE),
        description=resolve_scalar(tags, "description", OG_OPTIONAL),
        country=resolve_scalar(tags, "app:country"),
        app_id=resolve_fixed_key_set(tags, APP_STORES, "app:id", required=True),
        app_url=resolve_fixed_key_set(tags, APP_STORES, "app:url"),
    )


def _player_fields(tags: TagCollection) -> dict:
    fields = {
        "title": resolve_scalar(tags, "title", OG_REQUIRED),
        "site": resolve_field(tags, "site", SITE),
        "description": resolve_scalar(tags, "description", OG_REQUIRED)[:DESCRIPTION_MAX_LENGTH],
        "player": resolve_scalar(tags, "player", REQUIRED),
        "player_width": parse_int(resolve_scalar(tags, "player:width", REQUIRED)),
        "player_height": parse_int(resolve_scalar(tags, "player:height", REQUIRED)),
        "image": resolve_scalar(tags, "image", OG_REQUIRED),
    }
    if fields["image"]:
        fields["image_alt"] = resolve_scalar(tags, "image:alt")

    fields["player_stream"] = resolve_scalar(tags, "player:stream")
    if fields["player_stream"]:
        fields["player_stream_content_type"] = resolve_scalar(tags, "player:stream:content_type")

    return fields


def build_player(tags: TagCollection) -> PlayerCard:
    return PlayerCard(**_player_fields(tags))


def build_audio(tags: TagCollection) -> AudioCard:
    """Player card with three additional required audio tags"""
    fields = _player_fields(tags)
    fields.update(
        audio_partner=resolve_scalar(tags, "audio:partner", REQUIRED),
        audio_artist_name=resolve_scalar(tags, "audio:artist_name", REQUIRED),
        audio_source=resolve_scalar(tags, "audio:source", REQUIRED),
    )
    return AudioCard(**fields)


def build_amplify(tags: TagCollection) -> AmplifyCard:
    # Amplify is not documented by Twitter, so every field is optional
    return AmplifyCard(
        site=resolve_field(tags, "site", SITE),
        title=resolve_scalar(tags, "title"),
        description=resolve_scalar(tags, "description"),
        image_src=resolve_scalar(tags, "image:src"),
        image_width=parse_int(resolve_scalar(tags, "image:width")),
        image_height=parse_int(resolve_scalar(tags, "image:height")),
        amplify_vmap=resolve_scalar(tags, "amplify:vmap"),
        amplify_teaser_segments_stream=resolve_scalar(tags, "amplify:teaser_segments_stream"),
        amplify_content_id=resolve_scalar(tags, "amplify:content_id"),
        player_width=parse_int(resolve_scalar(tags, "player:width")),
        player_height=parse_int(resolve_scalar(tags, "player:height")),
        player_stream_content_type=resolve_scalar(tags, "player:stream:content_type"),
        amplify_embeddable=resolve_scalar(tags, "amplify:embeddable") == "true",
        amplify_dynamic_ads=resolve_scalar(tags, "amplify:dynamic_ads") == "true",
        amplify_content_duration_seconds=parse_float(resolve_scalar(tags, "amplify:content_duration_seconds")),
        amplify_share_id=resolve_scalar(tags, "amplify:share_id"),
    )


def build_undocumented(tags: TagCollection, card_type: str) -> UndocumentedCard:
    """Keep every twitter:* tag of the page, nested by path"""
    fields = flatten_namespace(tags, "twitter:")
    fields["card"] = card_type
    fields["undocumented"] = True
    return UndocumentedCard(**fields)
