from typing import Optional

from pydantic import BaseModel

from .card_model import TwitterCard


class CardParseRequest(BaseModel):
    html: str
    origin: str


class CardParseResponse(BaseModel):
    # None when the page declares no card
    card: Optional[TwitterCard] = None
