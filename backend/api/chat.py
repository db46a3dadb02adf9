"""
POST /api/chat — single stateless question.
/api/conversations — chat sessions with an append-only turn log.
"""
import logging
from fastapi import APIRouter, Depends, HTTPException

from api.deps import get_conversations, get_dataset
from core.classifier import classify
from core.conversation import (
    QUERY_ERROR_MESSAGE, ConversationBusyError, ConversationNotFoundError, ConversationRegistry,
)
from core.dataset import DatasetSnapshot
from models.chat import ChatRequest, ChatResponse, ConversationResponse

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/chat", response_model=ChatResponse)
def chat(req: ChatRequest, dataset: DatasetSnapshot = Depends(get_dataset)):
    if not req.query.strip():
        raise HTTPException(400, detail="Query must not be empty.")
    intent, handler = classify(req.query)
    logger.info("Chat intent: %s for query: %s", intent, req.query[:80])
    try:
        answer = handler(dataset.rows, req.query.lower())
    except Exception:
        logger.exception("Chat query failed: %s", req.query[:80])
        return ChatResponse(intent=intent, answer=QUERY_ERROR_MESSAGE)
    return ChatResponse(intent=intent, answer=answer.text, chart=answer.chart)


@router.post("/conversations", response_model=ConversationResponse, status_code=201)
def start_conversation(
    dataset: DatasetSnapshot = Depends(get_dataset),
    conversations: ConversationRegistry = Depends(get_conversations),
):
    conv = conversations.create(dataset_error=dataset.error)
    return conv.to_response()


@router.get("/conversations/{conversation_id}", response_model=ConversationResponse)
def get_conversation(conversation_id: str, conversations: ConversationRegistry = Depends(get_conversations)):
    return _lookup(conversations, conversation_id).to_response()


@router.post("/conversations/{conversation_id}/messages", response_model=ConversationResponse)
def post_message(
    conversation_id: str,
    req: ChatRequest,
    dataset: DatasetSnapshot = Depends(get_dataset),
    conversations: ConversationRegistry = Depends(get_conversations),
):
    conv = _lookup(conversations, conversation_id)
    if not req.query.strip():
        raise HTTPException(400, detail="Query must not be empty.")
    try:
        conv.submit(req.query, dataset.rows)
    except ConversationBusyError as e:
        raise HTTPException(409, detail=str(e))
    return conv.to_response()


@router.delete("/conversations/{conversation_id}")
def delete_conversation(conversation_id: str, conversations: ConversationRegistry = Depends(get_conversations)):
    try:
        conversations.delete(conversation_id)
    except ConversationNotFoundError:
        raise HTTPException(404, detail=f"Conversation '{conversation_id}' not found.")
    return {"message": f"Conversation '{conversation_id}' removed successfully."}


def _lookup(conversations: ConversationRegistry, conversation_id: str):
    try:
        return conversations.get(conversation_id)
    except ConversationNotFoundError:
        raise HTTPException(404, detail=f"Conversation '{conversation_id}' not found.")
