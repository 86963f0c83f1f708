from fastapi import APIRouter
from . import root_routes, card_routes

router = APIRouter()

router.include_router(root_routes.router, tags=["root"])
router.include_router(card_routes.router, prefix="/cards", tags=["cards"])

__all__ = ["router"]
