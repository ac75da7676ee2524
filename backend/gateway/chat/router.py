"""Chat, completion and model-listing endpoints.

Endpoints:
    POST /api/chat       - Single-turn chat completion
    POST /api/completion - Legacy text completion
    GET  /api/models     - List the provider's models

Missing required fields return 400 before the provider is called.  Provider
failures return 500 with ``{"error": ..., "details": ...}``.
"""
import logging

from fastapi import APIRouter

from gateway.errors import ProviderError, RequestValidationFailed, provider_error_response
from gateway.provider import require_provider

from .schemas import (
    CHAT_MAX_TOKENS,
    COMPLETION_TEMPERATURE,
    NO_RESPONSE,
    ChatRequest,
    CompletionRequest,
    CompletionResponse,
    ModelEntry,
    ModelsResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["chat"])


@router.post("/chat", response_model=CompletionResponse)
async def chat(request: ChatRequest):
    """Send one user message to a chat model and return its reply.

    Example::

        POST /api/chat
        { "message": "Say hello" }

        200 OK
        { "response": "Hello!", "usage": {...}, "model": "gpt-3.5-turbo-0125" }
    """
    if not request.message:
        raise RequestValidationFailed("Message is required")

    try:
        result = await require_provider().chat(
            request.message,
            model=request.model,
            max_tokens=CHAT_MAX_TOKENS,
        )
    except ProviderError as exc:
        return provider_error_response("Failed to get response from OpenAI", exc)

    logger.info("[chat] model=%s usage=%s", result.model, result.usage)
    return CompletionResponse(
        response=result.text or NO_RESPONSE,
        usage=result.usage,
        model=result.model,
    )


@router.post("/completion", response_model=CompletionResponse)
async def completion(request: CompletionRequest):
    """Run a legacy text completion; the returned text is stripped."""
    if not request.prompt:
        raise RequestValidationFailed("Prompt is required")

    try:
        result = await require_provider().complete(
            request.prompt,
            model=request.model,
            max_tokens=request.max_tokens,
            temperature=COMPLETION_TEMPERATURE,
        )
    except ProviderError as exc:
        return provider_error_response("Failed to get completion from OpenAI", exc)

    text = (result.text or "").strip()
    return CompletionResponse(
        response=text or NO_RESPONSE,
        usage=result.usage,
        model=result.model,
    )


@router.get("/models", response_model=ModelsResponse)
async def list_models():
    """Return ``{id, created, owned_by}`` for every provider model."""
    try:
        models = await require_provider().list_models()
    except ProviderError as exc:
        return provider_error_response("Failed to fetch models from OpenAI", exc)

    return ModelsResponse(
        models=[
            ModelEntry(id=m.id, created=m.created, owned_by=m.owned_by)
            for m in models
        ]
    )
