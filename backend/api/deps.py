"""Accessors for the process-wide state the lifespan puts on app.state."""
from fastapi import Request

from core.conversation import ConversationRegistry
from core.dataset import DatasetSnapshot


def get_dataset(request: Request) -> DatasetSnapshot:
    return request.app.state.dataset


def get_conversations(request: Request) -> ConversationRegistry:
    return request.app.state.conversations
