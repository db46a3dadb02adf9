"""Pydantic schemas for the chat API."""
from typing import Optional, Literal
from pydantic import BaseModel

from models.chart import ChartSpec

Intent = Literal[
    "popular_language",
    "authors_by_country",
    "journals_by_period",
    "translator_activity",
    "most_prolific_author",
    "countries_represented",
    "article_keyword_search",
    "most_active_decade",
    "unrecognized",
]


class Answer(BaseModel):
    """What a handler produces: the reply text and an optional chart."""
    text: str
    chart: Optional[ChartSpec] = None


class Turn(BaseModel):
    role: Literal["user", "assistant"]
    text: str
    chart: Optional[ChartSpec] = None


class ChatRequest(BaseModel):
    query: str


class ChatResponse(BaseModel):
    intent: Intent
    answer: str
    chart: Optional[ChartSpec] = None


class ConversationResponse(BaseModel):
    conversation_id: str
    thinking: bool
    turns: list[Turn]
