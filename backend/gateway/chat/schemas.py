"""Pydantic schemas for the chat, completion and model-listing endpoints.

Optional request fields carry their documented defaults, so a handler sees
a fully resolved request before it checks for required fields.
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

DEFAULT_CHAT_MODEL       = "gpt-3.5-turbo"
DEFAULT_COMPLETION_MODEL = "gpt-3.5-turbo-instruct"
DEFAULT_COMPLETION_TOKENS = 100

CHAT_MAX_TOKENS        = 500
COMPLETION_TEMPERATURE = 0.7

NO_RESPONSE = "No response generated"


class ChatRequest(BaseModel):
    """Request body for POST /api/chat.

    Attributes:
        message: The single user message.  Required.
        model:   Chat model to use.
    """
    message: Optional[str] = Field(None, description="User message")
    model: str = Field(DEFAULT_CHAT_MODEL, description="Chat model")


class CompletionRequest(BaseModel):
    """Request body for POST /api/completion.

    Attributes:
        prompt:     Prompt text.  Required.
        model:      Completion model to use.
        max_tokens: Maximum tokens to generate.
    """
    prompt: Optional[str] = Field(None, description="Prompt text")
    model: str = Field(DEFAULT_COMPLETION_MODEL, description="Completion model")
    max_tokens: int = Field(DEFAULT_COMPLETION_TOKENS, description="Maximum tokens to generate")


class CompletionResponse(BaseModel):
    """Response body shared by POST /api/chat and POST /api/completion."""
    response: str
    usage: Optional[Dict[str, Any]] = None
    model: str


class ModelEntry(BaseModel):
    id: str
    created: int
    owned_by: str


class ModelsResponse(BaseModel):
    """Response body for GET /api/models, in provider order."""
    models: List[ModelEntry]
