from typing import Dict, List, Optional, Tuple

from .models import QuizSession, VocabularyEntry
from .quiz import build_hint


class SessionTable:
    """Outstanding quiz questions, at most one per user."""

    def __init__(self):
        self._sessions: Dict[int, QuizSession] = {}

    def start(self, user_id: int, entry: VocabularyEntry) -> QuizSession:
        session = QuizSession(
            question=entry.german,
            answer=entry.english,
            hint=build_hint(entry.english),
        )
        self._sessions[user_id] = session
        return session

    def get(self, user_id: int) -> Optional[QuizSession]:
        """Looks without consuming; answers go through pop()."""
        return self._sessions.get(user_id)

    def pop(self, user_id: int) -> Optional[QuizSession]:
        return self._sessions.pop(user_id, None)

    def __contains__(self, user_id: int) -> bool:
        return user_id in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)


class ScoreTable:
    def __init__(self):
        self._scores: Dict[int, int] = {}

    def increment(self, user_id: int) -> int:
        self._scores[user_id] = self._scores.get(user_id, 0) + 1
        return self._scores[user_id]

    def get(self, user_id: int) -> int:
        return self._scores.get(user_id, 0)

    def ranking(self) -> List[Tuple[int, int]]:
        """Scores sorted high to low; equal scores keep the order users first scored."""
        return sorted(self._scores.items(), key=lambda item: item[1], reverse=True)

    def __len__(self) -> int:
        return len(self._scores)
