from typing import Optional, Union

from pydantic import BaseModel, ConfigDict


# --- Vocabulary ---
class VocabularyEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    german: str
    english: Optional[str] = None


class WordFound(BaseModel):
    entry: VocabularyEntry


class NoWordAvailable(BaseModel):
    reason: str = "vocabulary is empty"


WordResult = Union[WordFound, NoWordAvailable]


# --- Quiz ---
class QuizSession(BaseModel):
    question: str
    answer: str
    hint: str


# --- Chat ---
class InboundMessage(BaseModel):
    author_id: int
    content: str
    channel_id: Optional[int] = None
    guild_id: Optional[int] = None
    author_is_bot: bool = False


# --- Commands ---
class TranslateCommand(BaseModel):
    phrase: str
    target: str


class TranslateUsage(BaseModel):
    pass


class QuizCommand(BaseModel):
    pass


class LessonCommand(BaseModel):
    pass


class LeaderboardCommand(BaseModel):
    pass


class HelpCommand(BaseModel):
    pass


class FreeText(BaseModel):
    text: str


Command = Union[
    TranslateCommand,
    TranslateUsage,
    QuizCommand,
    LessonCommand,
    LeaderboardCommand,
    HelpCommand,
    FreeText,
]


# --- Translation endpoint ---
class ResponseData(BaseModel):
    translatedText: str


class TranslationResponse(BaseModel):
    responseData: ResponseData
