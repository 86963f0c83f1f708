from fastapi import APIRouter, Response

from twitter_cards.config.logging_config import get_logger
from twitter_cards.controllers.card_controller import CardController
from twitter_cards.models.card_request_model import CardParseRequest

logger = get_logger(__name__)

router = APIRouter()

@router.post("")
async def parse_card(request: CardParseRequest) -> Response:
    logger.info(f"Received card parse request: {request.origin}")
    result = await CardController.parse_card(request)
    return CardController.render(result)
