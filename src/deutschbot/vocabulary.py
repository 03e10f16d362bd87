import logging
import os
import random
from typing import List, Optional

import pandas as pd

from .models import NoWordAvailable, VocabularyEntry, WordFound, WordResult

logger = logging.getLogger(__name__)


class VocabularyManager:
    """Loads the German to English word list and hands out random entries."""

    def __init__(self, path: str):
        self.path = path
        self.words: List[VocabularyEntry] = []

    def load_all(self):
        self.words = []
        if not os.path.exists(self.path):
            logger.error(f"Vocabulary file {self.path} not found.")
            return

        try:
            series = pd.read_json(
                self.path,
                typ="series",
                dtype=False,
                convert_axes=False,
                convert_dates=False,
                encoding="utf-8",
            )
        except ValueError as e:
            logger.error(f"Failed to load {self.path}: {e}")
            return

        if not all(isinstance(german, str) for german in series.index):
            logger.error(f"Skipping {self.path}: expected a mapping of German to English.")
            return

        self.words = [
            VocabularyEntry(german=german, english=_translation(english))
            for german, english in series.items()
        ]
        logger.info(f"Loaded {len(self.words)} words from {self.path}")

    def fetch_random_word(self) -> WordResult:
        if not self.words:
            logger.error("No words available for the quiz.")
            return NoWordAvailable()
        return WordFound(entry=self.words[random.randrange(len(self.words))])

    def __len__(self) -> int:
        return len(self.words)


def _translation(value) -> Optional[str]:
    # null, numbers and nested objects count as a missing translation
    if isinstance(value, str) and value.strip():
        return value
    return None
