import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def _int_or_none(value: Optional[str]) -> Optional[int]:
    try:
        return int(value) if value else None
    except ValueError:
        return None


class Settings:
    DEBUG: bool = os.environ.get("DEBUG", "").lower() in ("1", "true", "yes")
    LOG_DIR: str = os.environ.get("LOG_DIR", "log")
    LOG_FILE: str = os.environ.get("LOG_FILE", "deutschbot.log")
    BOT_TOKEN: Optional[str] = os.environ.get("DISCORD_BOT_TOKEN")
    CHANNEL_ID: Optional[int] = _int_or_none(os.environ.get("CHANNEL_ID"))
    VOCAB_FILE: str = os.environ.get("VOCAB_FILE", "vocabulary/german_english.json")
    TRANSLATE_URL: str = os.environ.get(
        "TRANSLATE_URL", "https://api.mymemory.translated.net/get"
    )
    COMMAND_PREFIX: str = "!"
    LESSON_HOUR: int = 10
    LESSON_MINUTE: int = 0


settings = Settings()
