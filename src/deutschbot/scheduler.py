import datetime
import logging
from typing import Optional

import discord
from discord.ext import tasks
from tzlocal import get_localzone

from .commands import CommandDispatcher
from .config import settings

logger = logging.getLogger(__name__)

# Fixed daily firing time; the local zone keeps it at 10:00 across DST changes
LESSON_TIME = datetime.time(
    hour=settings.LESSON_HOUR,
    minute=settings.LESSON_MINUTE,
    tzinfo=get_localzone(),
)


class DailyLesson:
    """Posts one lesson a day to the configured channel."""

    def __init__(
        self,
        client: discord.Client,
        dispatcher: CommandDispatcher,
        channel_id: Optional[int],
    ):
        self.client = client
        self.dispatcher = dispatcher
        self.channel_id = channel_id

    def start(self):
        self.post_daily_lesson.start()

    def stop(self):
        self.post_daily_lesson.cancel()

    @tasks.loop(time=LESSON_TIME)
    async def post_daily_lesson(self):
        await self.fire()

    @post_daily_lesson.before_loop
    async def before_post_daily_lesson(self):
        await self.client.wait_until_ready()

    async def fire(self):
        channel = self.resolve_channel()
        if channel is None:
            logger.warning(f"Daily lesson skipped: channel {self.channel_id} not found.")
            return
        logger.info(f"Posting daily lesson to channel {self.channel_id}")
        try:
            await self.dispatcher.post_lesson(channel)
        except discord.HTTPException:
            # an unhandled error would end the loop
            logger.exception(f"Failed to post daily lesson to channel {self.channel_id}")

    def resolve_channel(self):
        if self.channel_id is None:
            return None
        return self.client.get_channel(self.channel_id)
