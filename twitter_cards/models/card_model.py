from typing import Dict, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


AppStoreData = Dict[str, str]
"""Per-platform app store values keyed by "iphone", "ipad" and "googleplay"."""

Number = Union[int, float]


class CardModel(BaseModel):
    """Immutable record serialized with camelCase keys"""
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class ValueOrId(CardModel):
    """A field given either as a literal value or as an opaque identifier"""
    value: Optional[str] = None
    id: Optional[str] = None

    @model_validator(mode="after")
    def check_exactly_one(self) -> "ValueOrId":
        if (self.value is None) == (self.id is None):
            raise ValueError("exactly one of 'value' or 'id' must be set")
        return self


class SummaryCard(CardModel):
    card: Literal["summary", "summary_large_image"]
    origin: str
    # The Twitter @username the card is attributed to
    site: Optional[ValueOrId] = None
    title: str
    description: Optional[str] = None
    image: Optional[str] = None
    # Text description of the image for visually impaired users
    image_alt: Optional[str] = None


class AppCard(CardModel):
    card: Literal["app"] = "app"
    site: Optional[ValueOrId] = None
    description: Optional[str] = None
    # Two-letter country code of the App Store that contains the app
    country: Optional[str] = None
    app_id: AppStoreData
    # The app's custom URL scheme
    app_url: Optional[AppStoreData] = None


class PlayerFields(CardModel):
    """Fields shared by the player and audio cards"""
    title: str
    site: Optional[ValueOrId] = None
    description: str
    player: str
    player_width: Number
    player_height: Number
    image: str
    image_alt: Optional[str] = None
    player_stream: Optional[str] = None
    player_stream_content_type: Optional[str] = None


class PlayerCard(PlayerFields):
    card: Literal["player"] = "player"


class AudioCard(PlayerFields):
    card: Literal["audio"] = "audio"
    audio_partner: str
    audio_artist_name: str
    audio_source: str


class AmplifyCard(CardModel):
    card: Literal["amplify"] = "amplify"
    site: Optional[ValueOrId] = None
    title: Optional[str] = None
    description: Optional[str] = None
    image_src: Optional[str] = None
    image_width: Optional[Number] = None
    image_height: Optional[Number] = None
    amplify_vmap: Optional[str] = None
    amplify_teaser_segments_stream: Optional[str] = None
    amplify_content_id: Optional[str] = None
    player_width: Optional[Number] = None
    player_height: Optional[Number] = None
    player_stream_content_type: Optional[str] = None
    amplify_embeddable: bool = False
    amplify_dynamic_ads: bool = False
    amplify_content_duration_seconds: Optional[float] = None
    amplify_share_id: Optional[str] = None


class UndocumentedCard(BaseModel):
    """
    Card type without a published schema.

    Every twitter:* tag of the page is kept as an extra field, nested by
    its colon-separated path (twitter:text:subtitle -> text["subtitle"]).
    """
    model_config = ConfigDict(frozen=True, extra="allow")

    card: str
    undocumented: Literal[True] = True


TwitterCard = Union[SummaryCard, AppCard, PlayerCard, AudioCard, AmplifyCard, UndocumentedCard]
