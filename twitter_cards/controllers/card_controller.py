from fastapi import Response

from twitter_cards.config.logging_config import get_logger
from twitter_cards.core.config import settings
from twitter_cards.exceptions.request import InvalidCardException, PayloadTooLargeException
from twitter_cards.models.card_request_model import CardParseRequest, CardParseResponse
from twitter_cards.services.card_parser import CardParser, CardParserInterface
from twitter_cards.services.exceptions import CardError

logger = get_logger(__name__)


class CardController:

    parser: CardParserInterface = CardParser()

    @staticmethod
    async def parse_card(request: CardParseRequest) -> CardParseResponse:
        logger.info(f"Received request to parse card for: {request.origin}")
        size = len(request.html.encode("utf-8"))
        if size > settings.max_html_bytes:
            raise PayloadTooLargeException(size, settings.max_html_bytes)

        try:
            card = CardController.parser.parse(request.html, request.origin)
        except CardError as e:
            logger.error(f"Failed to parse card for {request.origin}: {e.message}")
            raise InvalidCardException(e, request.origin)

        logger.info(f"Card parsed successfully for: {request.origin}")
        return CardParseResponse(card=card)

    @staticmethod
    def render(response: CardParseResponse) -> Response:
        # model_dump_json writes NaN as null, plain JSONResponse would reject it
        return Response(
            content=response.model_dump_json(by_alias=True),
            media_type="application/json",
        )
