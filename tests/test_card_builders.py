import math

import pytest
from twitter_cards.models.card_model import ValueOrId
from twitter_cards.services.card_builders import (
    build_amplify,
    build_app,
    build_audio,
    build_gallery,
    build_player,
    build_summary,
    build_undocumented,
    parse_float,
    parse_int,
)
from twitter_cards.services.exceptions import MissingRequiredFieldError
from twitter_cards.services.models import MetaTag, TagCollection


def make_tags(*pairs):
    return TagCollection([MetaTag(name=name, content=content) for name, content in pairs])


PLAYER_TAGS = (
    ("twitter:title", "Video"),
    ("twitter:site", "@example"),
    ("twitter:description", "A video"),
    ("twitter:player", "https://example.com/embed"),
    ("twitter:player:width", "480"),
    ("twitter:player:height", "270"),
    ("twitter:image", "https://example.com/still.png"),
)


class TestNumberParsing:
    """Unit tests for the lenient number parsers"""

    @pytest.mark.parametrize("text,expected", [
        ("480", 480),
        (" 480px", 480),
        ("12.9", 12),
        ("-3", -3),
    ])
    def test_parse_int(self, text, expected):
        assert parse_int(text) == expected

    @pytest.mark.parametrize("text", ["not-a-number", "", "px480"])
    def test_parse_int_nan(self, text):
        assert math.isnan(parse_int(text))

    def test_parse_int_absent(self):
        assert parse_int(None) is None

    def test_parse_float(self):
        assert parse_float("12.5s") == 12.5
        assert math.isnan(parse_float("abc"))
        assert parse_float(None) is None


class TestSummaryBuilder:
    """Unit tests for summary and legacy gallery builders"""

    def test_summary_with_og_fallbacks(self):
        """Test title, description and image fall back to Open Graph tags."""
        tags = make_tags(
            ("og:title", "OG Title"),
            ("og:description", "OG Description"),
            ("og:image", "https://example.com/og.png"),
            ("twitter:image:alt", "Alt text"),
        )

        card = build_summary(tags, "summary", "https://example.com/page")

        assert card.card == "summary"
        assert card.origin == "https://example.com/page"
        assert card.site is None
        assert card.title == "OG Title"
        assert card.description == "OG Description"
        assert card.image == "https://example.com/og.png"
        assert card.image_alt == "Alt text"

    def test_summary_without_image_skips_alt(self):
        tags = make_tags(
            ("twitter:title", "Title"),
            ("twitter:description", "Description"),
            ("twitter:image:alt", "Orphan alt"),
        )

        card = build_summary(tags, "summary_large_image", "https://example.com")

        assert card.image is None
        assert card.image_alt is None

    def test_summary_site_identifier(self):
        tags = make_tags(
            ("twitter:site:id", "783214"),
            ("twitter:title", "Title"),
            ("twitter:description", "Description"),
        )

        card = build_summary(tags, "summary", "https://example.com")

        assert card.site == ValueOrId(id="783214")

    def test_summary_description_truncated(self):
        """Test the description is cut to 200 characters."""
        tags = make_tags(("twitter:title", "Title"), ("twitter:description", "x" * 450))

        card = build_summary(tags, "summary", "https://example.com")

        assert card.description == "x" * 200

    def test_summary_requires_description(self):
        with pytest.raises(MissingRequiredFieldError) as exc_info:
            build_summary(make_tags(("twitter:title", "Title")), "summary", "https://example.com")

        assert exc_info.value.field == "twitter:description"

    def test_gallery_description_optional_and_untruncated(self):
        """Test the gallery mapping keeps its optional, untruncated description."""
        long_description = "y" * 300
        tags = make_tags(
            ("twitter:title", "Gallery"),
            ("twitter:description", long_description),
            ("twitter:image0", "https://example.com/0.png"),
            ("twitter:image1", "https://example.com/1.png"),
        )

        card = build_gallery(tags, "https://example.com")

        assert card.card == "summary_large_image"
        assert card.description == long_description
        assert card.image == "https://example.com/0.png"

    def test_gallery_image_falls_back_to_og_image(self):
        tags = make_tags(("twitter:title", "Gallery"), ("og:image", "https://example.com/og.png"))

        card = build_gallery(tags, "https://example.com")

        assert card.description is None
        assert card.image == "https://example.com/og.png"

    def test_gallery_requires_image(self):
        with pytest.raises(MissingRequiredFieldError) as exc_info:
            build_gallery(make_tags(("twitter:title", "Gallery")), "https://example.com")

        assert exc_info.value.field == "twitter:image0"


class TestAppBuilder:
    """Unit tests for the app card builder"""

    def test_app_card(self):
        tags = make_tags(
            ("twitter:site", "@example"),
            ("og:description", "An app"),
            ("twitter:app:country", "US"),
            ("twitter:app:id:iphone", "123"),
            ("twitter:app:id:googleplay", "com.example.app"),
            ("twitter:app:url:iphone", "example://open"),
        )

        card = build_app(tags)

        assert card.card == "app"
        assert card.site == ValueOrId(value="@example")
        assert card.description == "An app"
        assert card.country == "US"
        assert card.app_id == {"iphone": "123", "googleplay": "com.example.app"}
        assert card.app_url == {"iphone": "example://open"}

    def test_app_card_without_urls(self):
        card = build_app(make_tags(("twitter:app:id:ipad", "9")))

        assert card.app_id == {"ipad": "9"}
        assert card.app_url is None

    def test_app_card_requires_an_id(self):
        with pytest.raises(MissingRequiredFieldError):
            build_app(make_tags(("twitter:app:url:iphone", "example://open")))


class TestPlayerBuilder:
    """Unit tests for player and audio builders"""

    def test_player_card(self):
        tags = make_tags(
            *PLAYER_TAGS,
            ("twitter:image:alt", "Still frame"),
            ("twitter:player:stream", "https://example.com/video.mp4"),
            ("twitter:player:stream:content_type", "video/mp4"),
        )

        card = build_player(tags)

        assert card.card == "player"
        assert card.player == "https://example.com/embed"
        assert card.player_width == 480
        assert card.player_height == 270
        assert card.image_alt == "Still frame"
        assert card.player_stream == "https://example.com/video.mp4"
        assert card.player_stream_content_type == "video/mp4"

    def test_player_stream_content_type_needs_stream(self):
        tags = make_tags(*PLAYER_TAGS, ("twitter:player:stream:content_type", "video/mp4"))

        card = build_player(tags)

        assert card.player_stream is None
        assert card.player_stream_content_type is None

    def test_player_width_not_a_number(self):
        """Test a non numeric width gives NaN instead of an error."""
        tags = make_tags(("twitter:player:width", "not-a-number"), *PLAYER_TAGS)

        card = build_player(tags)

        assert math.isnan(card.player_width)
        assert card.player_height == 270

    @pytest.mark.parametrize("missing", ["twitter:player", "twitter:player:width", "twitter:image"])
    def test_player_required_fields(self, missing):
        tags = make_tags(*[pair for pair in PLAYER_TAGS if pair[0] != missing])

        with pytest.raises(MissingRequiredFieldError) as exc_info:
            build_player(tags)

        assert exc_info.value.field == missing

    def test_audio_card(self):
        tags = make_tags(
            *PLAYER_TAGS,
            ("twitter:audio:partner", "Partner"),
            ("twitter:audio:artist_name", "Artist"),
            ("twitter:audio:source", "https://example.com/track"),
        )

        card = build_audio(tags)

        assert card.card == "audio"
        assert card.player_width == 480
        assert card.audio_partner == "Partner"
        assert card.audio_artist_name == "Artist"
        assert card.audio_source == "https://example.com/track"

    def test_audio_requires_partner(self):
        tags = make_tags(
            *PLAYER_TAGS,
            ("twitter:audio:artist_name", "Artist"),
            ("twitter:audio:source", "https://example.com/track"),
        )

        with pytest.raises(MissingRequiredFieldError) as exc_info:
            build_audio(tags)

        assert exc_info.value.field == "twitter:audio:partner"


class TestAmplifyBuilder:
    """Unit tests for the amplify card builder"""

    def test_empty_amplify_card(self):
        """Test an amplify card needs no tags at all."""
        card = build_amplify(make_tags())

        assert card.card == "amplify"
        assert card.title is None
        assert card.image_width is None
        assert card.amplify_embeddable is False
        assert card.amplify_content_duration_seconds is None

    def test_amplify_card(self):
        tags = make_tags(
            ("twitter:site:id", "42"),
            ("twitter:title", "Clip"),
            ("twitter:image:src", "https://example.com/thumb.jpg"),
            ("twitter:image:width", "1280"),
            ("twitter:image:height", "720"),
            ("twitter:amplify:vmap", "https://example.com/vmap.xml"),
            ("twitter:amplify:content_id", "abc"),
            ("twitter:amplify:embeddable", "true"),
            ("twitter:amplify:dynamic_ads", "TRUE"),
            ("twitter:amplify:content_duration_seconds", "31.5"),
            ("twitter:player:width", "1280"),
        )

        card = build_amplify(tags)

        assert card.site == ValueOrId(id="42")
        assert card.image_src == "https://example.com/thumb.jpg"
        assert card.image_width == 1280
        assert card.image_height == 720
        assert card.amplify_vmap == "https://example.com/vmap.xml"
        assert card.amplify_content_id == "abc"
        assert card.amplify_embeddable is True
        assert card.amplify_dynamic_ads is False
        assert card.amplify_content_duration_seconds == 31.5
        assert card.player_width == 1280
        assert card.player_height is None


class TestUndocumentedBuilder:
    """Unit tests for the namespace flattening builder"""

    def test_undocumented_card(self):
        tags = make_tags(
            ("twitter:card", "3691233323:periscope_broadcast"),
            ("twitter:site", "@periscopetv"),
            ("twitter:player", "https://www.periscope.tv/w/1"),
            ("twitter:player:width", "435"),
            ("twitter:boolean:is_360", "false"),
            ("twitter:text:broadcaster_twitter_id", "123456789012345678"),
        )

        card = build_undocumented(tags, "3691233323:periscope_broadcast")
        extra = card.model_extra

        assert card.card == "3691233323:periscope_broadcast"
        assert card.undocumented is True
        assert extra["site"] == "@periscopetv"
        assert extra["player"] == {"value": "https://www.periscope.tv/w/1", "width": 435}
        assert extra["boolean"] == {"is_360": False}
        assert extra["text"] == {"broadcaster_twitter_id": 123456789012345678}
