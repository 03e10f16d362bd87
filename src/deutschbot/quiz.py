"""User-facing texts for quizzes, lessons, the leaderboard and help."""
from typing import List, Tuple

from .models import QuizSession, VocabularyEntry

QUIZ_FETCH_ERROR = "Sorry, there was an error fetching a quiz word."
QUIZ_ENTRY_ERROR = "Sorry, there was an error with the quiz word."
LESSON_FETCH_ERROR = "Sorry, there was an error fetching the daily lesson word."
LESSON_ENTRY_ERROR = "Sorry, there was an error with the daily lesson word."

TRANSLATE_USAGE = "Usage: !translate <phrase> <target_language (de)>"
TRANSLATE_ERROR = "Sorry, there was an error translating the phrase."

EMPTY_LEADERBOARD = "No scores yet. Start playing to get on the leaderboard!"

HELP_TEXT = """
**German Language Learning Bot Commands:**
- `!translate <phrase> <target_language>`: Translates the provided phrase into the target language (de).
- `!quiz`: Asks a random vocabulary question. Respond with the correct answer.
- `!lesson`: Provides a daily lesson with a random vocabulary word.
- `!leaderboard`: Shows the quiz leaderboard.
- `!help`: Shows this help message.
"""


def build_question(entry: VocabularyEntry) -> str:
    return f"What is the English word for '{entry.german}'?"


def build_hint(answer: str) -> str:
    return f"The first letter of the word is '{answer[:1]}'"


def is_correct(session: QuizSession, attempt: str) -> bool:
    return attempt.strip().lower() == session.answer.lower()


def correct_reply(session: QuizSession) -> str:
    return f"Correct! The English word for '{session.question}' is '{session.answer}'."


def incorrect_reply(session: QuizSession) -> str:
    return (
        f"Incorrect. The English word for '{session.question}' is '{session.answer}'. "
        f"Here's a hint: {session.hint}"
    )


def build_lesson(entry: VocabularyEntry) -> str:
    return f"Today's lesson: The German word for '{entry.english}' is '{entry.german}'."


def translation_reply(translated: str) -> str:
    return f"Translated phrase: {translated}"


def render_leaderboard(ranking: List[Tuple[int, int]]) -> str:
    if not ranking:
        return EMPTY_LEADERBOARD
    lines = [
        f"{rank}. <@{user_id}>: {score} points"
        for rank, (user_id, score) in enumerate(ranking, 1)
    ]
    return "**Leaderboard**:\n" + "\n".join(lines)
