"""FastAPI router for the embedding endpoints.

Endpoints:
    POST /api/embedding             - Embed a single text
    POST /api/embeddings/batch      - Embed up to 2048 texts in one call
    POST /api/embeddings/similarity - Cosine similarity of two texts

Constraints
-----------
- Returns 400 with ``{"error": "..."}`` for missing texts or a batch outside
  1–2048 items.  The provider is not called.
- Returns 500 with ``{"error": "...", "details": "..."}`` on provider failure.
"""
import logging

from fastapi import APIRouter

from gateway.errors import ProviderError, provider_error_response

from .schemas import (
    BatchEmbeddingRequest,
    BatchEmbeddingResponse,
    EmbeddingRequest,
    EmbeddingResponse,
    SimilarityRequest,
    SimilarityResponse,
)
from .service import EmbeddingService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["embeddings"])


@router.post("/embedding", response_model=EmbeddingResponse)
async def embed_text(request: EmbeddingRequest):
    """Return the provider's embedding list for one text.

    Example::

        POST /api/embedding
        { "text": "hello world" }

        200 OK
        {
            "embedding": {
                "object": "list",
                "data": [{"object": "embedding", "index": 0, "embedding": [...]}],
                "model": "text-embedding-ada-002",
                "usage": {"prompt_tokens": 2, "total_tokens": 2}
            }
        }
    """
    try:
        embedding = await EmbeddingService().embed_one(
            request.text,
            model=request.model,
            encoding_format=request.encoding_format,
        )
    except ProviderError as exc:
        return provider_error_response("Failed to get embedding from OpenAI", exc)

    return EmbeddingResponse(embedding=embedding)


@router.post("/embeddings/batch", response_model=BatchEmbeddingResponse)
async def embed_batch(request: BatchEmbeddingRequest):
    """Embed an ordered batch of texts.

    ``embeddings[i]`` always belongs to ``texts[i]``.
    """
    try:
        response = await EmbeddingService().embed_batch(request.texts, model=request.model)
    except ProviderError as exc:
        return provider_error_response("Failed to get batch embeddings from OpenAI", exc)

    logger.info(
        "[embeddings] embedded %d text(s) model=%s",
        response.total_embeddings,
        response.model,
    )
    return response


@router.post("/embeddings/similarity", response_model=SimilarityResponse)
async def compare_texts(request: SimilarityRequest):
    """Embed ``text1`` and ``text2`` together and return their cosine similarity.

    Example::

        POST /api/embeddings/similarity
        { "text1": "cat", "text2": "kitten" }

        200 OK
        {
            "text1": "cat",
            "text2": "kitten",
            "cosine_similarity": 0.8765432,
            "similarity_percentage": "87.65%",
            "embeddings": {"text1": {...}, "text2": {...}},
            "usage": {...},
            "model": "text-embedding-ada-002"
        }
    """
    try:
        return await EmbeddingService().compare(
            request.text1,
            request.text2,
            model=request.model,
        )
    except ProviderError as exc:
        return provider_error_response("Failed to calculate embedding similarity", exc)
