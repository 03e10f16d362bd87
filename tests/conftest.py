import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from deutschbot.commands import CommandDispatcher
from deutschbot.models import InboundMessage
from deutschbot.translation import TranslationClient
from deutschbot.vocabulary import VocabularyManager


class FakeChannel:
    """Collects everything the bot sends."""

    def __init__(self, channel_id: int = 100):
        self.id = channel_id
        self.sent = []

    async def send(self, content: str):
        self.sent.append(content)


def message(content: str, author_id: int = 1, author_is_bot: bool = False) -> InboundMessage:
    return InboundMessage(
        author_id=author_id,
        content=content,
        channel_id=100,
        guild_id=200,
        author_is_bot=author_is_bot,
    )


def write_vocab(tmp_path, words) -> str:
    path = tmp_path / "german_english.json"
    path.write_text(json.dumps(words), encoding="utf-8")
    return str(path)


@pytest.fixture
def make_vocab(tmp_path):
    def _make(words):
        manager = VocabularyManager(write_vocab(tmp_path, words))
        manager.load_all()
        return manager

    return _make


@pytest.fixture
def translator():
    client = MagicMock(spec=TranslationClient)
    client.translate = AsyncMock(return_value="Hallo Welt")
    client.close = AsyncMock()
    return client


@pytest.fixture
def make_dispatcher(make_vocab, translator):
    def _make(words=None):
        vocab = make_vocab({"Hund": "dog"} if words is None else words)
        return CommandDispatcher(vocab, translator)

    return _make


@pytest.fixture
def channel():
    return FakeChannel()
