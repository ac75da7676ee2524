"""EmbeddingService: thin orchestration layer over LLMProvider.embed().

Validates batch-size constraints, delegates to the registered provider and
reshapes the result into the public response schemas.
"""
import logging
import math
from typing import List, Optional

from gateway.errors import ProviderError, RequestValidationFailed
from gateway.provider import EmbeddingResult, LLMProvider, require_provider

from .schemas import (
    MAX_BATCH,
    BatchEmbeddingItem,
    BatchEmbeddingResponse,
    EmbeddingData,
    EmbeddingList,
    SimilarityEmbeddings,
    SimilarityResponse,
    VectorWithDimensions,
)
from .similarity import cosine_similarity, format_percentage

logger = logging.getLogger(__name__)


def check_batch(texts: Optional[List[str]]) -> List[str]:
    """Validate a batch of texts against ``1 ≤ len(texts) ≤ MAX_BATCH``.

    Raises:
        RequestValidationFailed: If ``texts`` is missing, empty or too long.
    """
    if not texts:
        raise RequestValidationFailed("Texts array is required and must not be empty")
    if len(texts) > MAX_BATCH:
        raise RequestValidationFailed(f"Maximum {MAX_BATCH} texts allowed per batch")
    return texts


def _expect_count(result: EmbeddingResult, expected: int) -> None:
    if len(result.items) != expected:
        raise ProviderError(
            f"Provider returned {len(result.items)} embeddings for {expected} texts"
        )


class EmbeddingService:
    """Validates requests and delegates to an LLMProvider.

    Args:
        provider: Provider to use.  Defaults to the process-wide provider,
                  looked up only once a request has passed validation.
    """

    def __init__(self, provider: Optional[LLMProvider] = None) -> None:
        self._provider = provider

    @property
    def provider(self) -> LLMProvider:
        return self._provider or require_provider()

    # -----------------------------------------------------------------------
    # Public API
    # -----------------------------------------------------------------------

    async def embed_one(
        self,
        text: Optional[str],
        model: str,
        encoding_format: str = "float",
    ) -> EmbeddingList:
        """Embed a single text and return the provider's embedding list.

        Raises:
            RequestValidationFailed: If ``text`` is missing or empty.
            ProviderError: On provider-level errors.
        """
        if not text:
            raise RequestValidationFailed("Text is required")

        result = await self.provider.embed(text, model=model, encoding_format=encoding_format)
        return EmbeddingList(
            data=[
                EmbeddingData(index=item.index, embedding=item.embedding)
                for item in result.items
            ],
            model=result.model,
            usage=result.usage,
        )

    async def embed_batch(
        self,
        texts: Optional[List[str]],
        model: str,
    ) -> BatchEmbeddingResponse:
        """Embed an ordered batch, pairing each vector with its source text.

        Raises:
            RequestValidationFailed: If the batch is empty or exceeds ``MAX_BATCH``.
            ProviderError: On provider-level errors.
        """
        texts = check_batch(texts)

        logger.debug("[EmbeddingService] embedding %d text(s) model=%s", len(texts), model)
        result = await self.provider.embed(texts, model=model)
        _expect_count(result, len(texts))

        embeddings = [
            BatchEmbeddingItem(
                index=index,
                text=texts[index],
                embedding=vector,
                dimensions=len(vector),
            )
            for index, vector in enumerate(result.vectors)
        ]
        return BatchEmbeddingResponse(
            embeddings=embeddings,
            usage=result.usage,
            model=result.model,
            total_embeddings=len(embeddings),
        )

    async def compare(
        self,
        text1: Optional[str],
        text2: Optional[str],
        model: str,
    ) -> SimilarityResponse:
        """Embed two texts in one call and score them by cosine similarity.

        Raises:
            RequestValidationFailed: If either text is missing or empty.
            ProviderError: On provider-level errors, including a response
                that does not hold two equal-length vectors.
        """
        if not text1 or not text2:
            raise RequestValidationFailed("Both text1 and text2 are required")

        result = await self.provider.embed([text1, text2], model=model)
        _expect_count(result, 2)
        vector1, vector2 = result.vectors

        try:
            similarity = cosine_similarity(vector1, vector2)
        except ValueError as exc:
            raise ProviderError(str(exc)) from exc

        return SimilarityResponse(
            text1=text1,
            text2=text2,
            cosine_similarity=similarity if math.isfinite(similarity) else None,
            similarity_percentage=format_percentage(similarity),
            embeddings=SimilarityEmbeddings(
                text1=VectorWithDimensions(embedding=vector1, dimensions=len(vector1)),
                text2=VectorWithDimensions(embedding=vector2, dimensions=len(vector2)),
            ),
            usage=result.usage,
            model=result.model,
        )
