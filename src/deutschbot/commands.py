import logging
from typing import Optional, Protocol

from . import quiz
from .config import settings
from .errors import TranslationError
from .models import (
    Command,
    FreeText,
    HelpCommand,
    InboundMessage,
    LeaderboardCommand,
    LessonCommand,
    NoWordAvailable,
    QuizCommand,
    TranslateCommand,
    TranslateUsage,
)
from .state import ScoreTable, SessionTable
from .translation import TranslationClient
from .vocabulary import VocabularyManager

logger = logging.getLogger(__name__)

PREFIX = settings.COMMAND_PREFIX

SIMPLE_COMMANDS = {
    f"{PREFIX}quiz": QuizCommand,
    f"{PREFIX}lesson": LessonCommand,
    f"{PREFIX}leaderboard": LeaderboardCommand,
    f"{PREFIX}help": HelpCommand,
}


class Channel(Protocol):
    async def send(self, content: str): ...


def parse_command(content: str) -> Command:
    """Classifies a raw message. Matching ignores case."""
    text = content.lower().strip()
    parts = text.split()

    if parts and parts[0] == f"{PREFIX}translate":
        if len(parts) < 3:
            return TranslateUsage()
        return TranslateCommand(phrase=" ".join(parts[1:-1]), target=parts[-1])

    command_cls = SIMPLE_COMMANDS.get(text)
    if command_cls is not None:
        return command_cls()

    return FreeText(text=content)


class CommandDispatcher:
    """Routes inbound messages to handlers and owns the quiz and score state."""

    def __init__(
        self,
        vocabulary: VocabularyManager,
        translator: TranslationClient,
        sessions: Optional[SessionTable] = None,
        scores: Optional[ScoreTable] = None,
    ):
        self.vocabulary = vocabulary
        self.translator = translator
        self.sessions = sessions if sessions is not None else SessionTable()
        self.scores = scores if scores is not None else ScoreTable()
        self._handlers = {
            TranslateCommand: self._translate,
            TranslateUsage: self._translate_usage,
            QuizCommand: self._quiz,
            LessonCommand: self._lesson,
            LeaderboardCommand: self._leaderboard,
            HelpCommand: self._help,
            FreeText: self._free_text,
        }

    async def handle(self, message: InboundMessage, channel: Channel):
        if message.author_is_bot:
            return
        command = parse_command(message.content)
        await self._handlers[type(command)](command, message, channel)

    async def post_lesson(self, channel: Channel):
        entry = self._pick_entry(quiz.LESSON_FETCH_ERROR, quiz.LESSON_ENTRY_ERROR)
        if isinstance(entry, str):
            await channel.send(entry)
            return
        await channel.send(quiz.build_lesson(entry))

    def _pick_entry(self, fetch_error: str, entry_error: str):
        """Returns a usable entry, or the error text to show instead."""
        result = self.vocabulary.fetch_random_word()
        if isinstance(result, NoWordAvailable):
            return fetch_error
        if not result.entry.english:
            logger.error(f"Invalid vocabulary entry: {result.entry}")
            return entry_error
        return result.entry

    # --- Handlers ---
    async def _translate(self, command: TranslateCommand, message, channel):
        try:
            translated = await self.translator.translate(command.phrase, command.target)
        except TranslationError:
            logger.exception("Error translating phrase")
            await channel.send(quiz.TRANSLATE_ERROR)
            return
        await channel.send(quiz.translation_reply(translated))

    async def _translate_usage(self, command, message, channel):
        await channel.send(quiz.TRANSLATE_USAGE)

    async def _quiz(self, command, message: InboundMessage, channel):
        entry = self._pick_entry(quiz.QUIZ_FETCH_ERROR, quiz.QUIZ_ENTRY_ERROR)
        if isinstance(entry, str):
            await channel.send(entry)
            return
        self.sessions.start(message.author_id, entry)
        logger.info(f"Quiz started for {message.author_id}: {entry.german}")
        await channel.send(quiz.build_question(entry))

    async def _lesson(self, command, message, channel):
        await self.post_lesson(channel)

    async def _leaderboard(self, command, message, channel):
        await channel.send(quiz.render_leaderboard(self.scores.ranking()))

    async def _help(self, command, message, channel):
        await channel.send(quiz.HELP_TEXT)

    async def _free_text(self, command: FreeText, message: InboundMessage, channel):
        session = self.sessions.pop(message.author_id)
        if session is None:
            return
        if quiz.is_correct(session, command.text):
            score = self.scores.increment(message.author_id)
            logger.info(f"Correct answer from {message.author_id}, score {score}")
            await channel.send(quiz.correct_reply(session))
        else:
            logger.info(f"Incorrect answer from {message.author_id}")
            await channel.send(quiz.incorrect_reply(session))
