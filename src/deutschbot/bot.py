import logging

import discord

from .commands import CommandDispatcher
from .models import InboundMessage
from .scheduler import DailyLesson

logger = logging.getLogger(__name__)


def build_intents() -> discord.Intents:
    intents = discord.Intents.default()
    intents.guilds = True
    intents.guild_messages = True
    intents.message_content = True
    return intents


def to_inbound(message: discord.Message) -> InboundMessage:
    return InboundMessage(
        author_id=message.author.id,
        content=message.content,
        channel_id=message.channel.id,
        guild_id=message.guild.id if message.guild else None,
        author_is_bot=message.author.bot,
    )


class DeutschBot(discord.Client):
    """Discord gateway client that feeds messages to the dispatcher."""

    def __init__(self, dispatcher: CommandDispatcher, channel_id=None, **kwargs):
        kwargs.setdefault("intents", build_intents())
        super().__init__(**kwargs)
        self.dispatcher = dispatcher
        self.daily_lesson = DailyLesson(self, dispatcher, channel_id)

    async def setup_hook(self):
        self.daily_lesson.start()

    async def on_ready(self):
        logger.info(f"Ready! Logged in as {self.user}")

    async def on_message(self, message: discord.Message):
        await self.dispatcher.handle(to_inbound(message), message.channel)

    async def close(self):
        self.daily_lesson.stop()
        await self.dispatcher.translator.close()
        await super().close()
