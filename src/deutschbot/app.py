import logging
import os
import sys
from logging.handlers import RotatingFileHandler

from .bot import DeutschBot
from .commands import CommandDispatcher
from .config import settings
from .translation import TranslationClient
from .vocabulary import VocabularyManager

logger = logging.getLogger(__name__)


# --- Logging Setup ---
def setup_logging():
    logger = logging.getLogger("deutschbot")
    logger.setLevel(logging.DEBUG if settings.DEBUG else logging.INFO)

    if not os.path.exists(settings.LOG_DIR):
        os.makedirs(settings.LOG_DIR, exist_ok=True)
    log_path = os.path.join(settings.LOG_DIR, settings.LOG_FILE)
    file_handler = RotatingFileHandler(log_path, maxBytes=5_000_000, backupCount=3)
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
    )
    logger.addHandler(file_handler)
    # Also configure root logger to see logs from discord.py and aiohttp
    logging.basicConfig(level=logging.INFO)


# --- Bot Factory ---
def create_bot() -> DeutschBot:
    setup_logging()
    vocabulary = VocabularyManager(settings.VOCAB_FILE)
    vocabulary.load_all()
    translator = TranslationClient(settings.TRANSLATE_URL)
    dispatcher = CommandDispatcher(vocabulary, translator)
    return DeutschBot(dispatcher, channel_id=settings.CHANNEL_ID)


def main():
    bot = create_bot()
    if not settings.BOT_TOKEN:
        logger.error("DISCORD_BOT_TOKEN is not set.")
        sys.exit(1)
    # logging is already configured above
    bot.run(settings.BOT_TOKEN, log_handler=None)


if __name__ == "__main__":
    main()
