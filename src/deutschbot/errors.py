class DeutschBotError(Exception):
    """Base class for errors raised by the bot."""


class TranslationError(DeutschBotError):
    """The translation endpoint could not be reached or answered badly."""
