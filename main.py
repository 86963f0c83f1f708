import uvicorn

from twitter_cards.config.logging_config import setup_logging
from twitter_cards.core.config import settings

# Set up logging first
setup_logging()


if __name__ == "__main__":
    uvicorn.run(
        "twitter_cards.main:app",
        host=settings.server_host,
        port=settings.server_port,
        reload=settings.server_reload,
    )
