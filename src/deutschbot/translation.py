import logging
from typing import Any, Dict, Optional

import aiohttp
from pydantic import ValidationError

from .errors import TranslationError
from .models import TranslationResponse

logger = logging.getLogger(__name__)

SOURCE_LANG = "en"


class TranslationClient:
    """Thin wrapper around the MyMemory translation endpoint.

    One GET per call, no retries and no caching. The underlying
    ``aiohttp.ClientSession`` is created on first use and closed by ``close()``.
    """

    def __init__(self, url: str):
        self.url = url
        self._session: Optional[aiohttp.ClientSession] = None

    def build_params(self, phrase: str, target: str) -> Dict[str, str]:
        return {"q": phrase, "langpair": f"{SOURCE_LANG}|{target}"}

    async def translate(self, phrase: str, target: str) -> str:
        payload = await self._get_json(self.build_params(phrase, target))
        try:
            response = TranslationResponse.model_validate(payload)
        except ValidationError as e:
            raise TranslationError(f"Unexpected response shape: {payload!r}") from e
        return response.responseData.translatedText

    async def _get_json(self, params: Dict[str, str]) -> Any:
        session = self._ensure_session()
        try:
            async with session.get(self.url, params=params) as resp:
                resp.raise_for_status()
                return await resp.json(content_type=None)
        except (aiohttp.ClientError, ValueError) as e:
            raise TranslationError(f"Request to {self.url} failed: {e}") from e

    def _ensure_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=None)
            )
        return self._session

    async def close(self):
        if self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None
