"""
Conversation state — the append-only log of chat turns.

One submission is processed at a time per conversation: the user turn is
appended, the conversation is marked as thinking, the answer is computed and
appended, and thinking is cleared. Handler failures become a generic
assistant reply so the conversation stays usable.
"""
import logging
import threading
import uuid
from typing import Optional, Sequence

from core.classifier import answer_query
from models.chat import ConversationResponse, Turn
from models.journal import JournalEntry

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = (
    "Welcome to AI Assistant! Ask me questions about the journal collection, such as "
    '"What was the most popular language of translation in the 1960s?" or '
    '"Show me all authors from Australia."'
)
LOAD_ERROR_MESSAGE = "Sorry, I encountered an error loading the journal data. Please try again later."
QUERY_ERROR_MESSAGE = "Sorry, I encountered an error processing your question. Please try again."


class ConversationNotFoundError(KeyError):
    pass


class ConversationBusyError(RuntimeError):
    pass


class Conversation:
    def __init__(self, dataset_error: Optional[str] = None):
        self.id = uuid.uuid4().hex
        self._turns: list[Turn] = [Turn(role="assistant", text=WELCOME_MESSAGE)]
        self._thinking = False
        self._lock = threading.Lock()
        if dataset_error:
            self._turns.append(Turn(role="assistant", text=LOAD_ERROR_MESSAGE))

    @property
    def turns(self) -> tuple[Turn, ...]:
        return tuple(self._turns)

    @property
    def thinking(self) -> bool:
        return self._thinking

    def submit(self, query: str, rows: Sequence[JournalEntry]) -> Optional[Turn]:
        """
        Run one query against the rows and return the assistant turn.
        Blank queries are ignored and return None.
        """
        if not query.strip():
            return None

        with self._lock:
            if self._thinking:
                raise ConversationBusyError(f"Conversation '{self.id}' is still answering a question.")
            self._thinking = True
            self._turns.append(Turn(role="user", text=query))

        try:
            try:
                _, answer = answer_query(query, rows)
                reply = Turn(role="assistant", text=answer.text, chart=answer.chart)
            except Exception:
                logger.exception("Failed to answer query: %s", query[:80])
                reply = Turn(role="assistant", text=QUERY_ERROR_MESSAGE)
            with self._lock:
                self._turns.append(reply)
        finally:
            with self._lock:
                self._thinking = False
        return reply

    def to_response(self) -> ConversationResponse:
        return ConversationResponse(conversation_id=self.id, thinking=self.thinking, turns=list(self.turns))


class ConversationRegistry:
    """
    In-memory registry: conversation id → Conversation.
    Holds at most max_conversations; the oldest is evicted to make room.
    """

    def __init__(self, max_conversations: int = 1000):
        self.max_conversations = max_conversations
        self._conversations: dict[str, Conversation] = {}
        self._lock = threading.Lock()

    def create(self, dataset_error: Optional[str] = None) -> Conversation:
        conv = Conversation(dataset_error=dataset_error)
        with self._lock:
            while self._conversations and len(self._conversations) >= self.max_conversations:
                # dicts keep insertion order, so the first key is the oldest
                oldest = next(iter(self._conversations))
                del self._conversations[oldest]
                logger.info("Evicted conversation %s (limit %d)", oldest, self.max_conversations)
            self._conversations[conv.id] = conv
        logger.info("Started conversation %s", conv.id)
        return conv

    def get(self, conversation_id: str) -> Conversation:
        if conversation_id not in self._conversations:
            raise ConversationNotFoundError(conversation_id)
        return self._conversations[conversation_id]

    def delete(self, conversation_id: str) -> None:
        with self._lock:
            if conversation_id not in self._conversations:
                raise ConversationNotFoundError(conversation_id)
            del self._conversations[conversation_id]

    def __len__(self) -> int:
        return len(self._conversations)
