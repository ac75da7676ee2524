"""Pydantic schemas for the embedding endpoints."""
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field

DEFAULT_EMBEDDING_MODEL = "text-embedding-ada-002"
MAX_BATCH = 2048


# ---------------------------------------------------------------------------
# POST /api/embedding
# ---------------------------------------------------------------------------

class EmbeddingRequest(BaseModel):
    """Request body for POST /api/embedding.

    Attributes:
        text:            Text to embed.  Required.
        model:           Embedding model to use.
        encoding_format: ``"float"`` for a list of floats, ``"base64"`` for
                         a packed base64 string.
    """
    text: Optional[str] = Field(None, description="Text to embed")
    model: str = Field(DEFAULT_EMBEDDING_MODEL, description="Embedding model")
    encoding_format: Literal["float", "base64"] = Field("float", description="Vector encoding")


class EmbeddingData(BaseModel):
    object: Literal["embedding"] = "embedding"
    index: int
    embedding: Union[List[float], str]


class EmbeddingList(BaseModel):
    """The provider's embedding-list payload, field for field."""
    object: Literal["list"] = "list"
    data: List[EmbeddingData]
    model: str
    usage: Optional[Dict[str, Any]] = None


class EmbeddingResponse(BaseModel):
    embedding: EmbeddingList


# ---------------------------------------------------------------------------
# POST /api/embeddings/batch
# ---------------------------------------------------------------------------

class BatchEmbeddingRequest(BaseModel):
    """Request body for POST /api/embeddings/batch.

    Attributes:
        texts: 1 to ``MAX_BATCH`` strings.  Bounds are checked by the
               service so the caller gets the documented 400 messages.
        model: Embedding model to use.
    """
    texts: Optional[List[str]] = Field(None, description="Texts to embed, in order")
    model: str = Field(DEFAULT_EMBEDDING_MODEL, description="Embedding model")


class BatchEmbeddingItem(BaseModel):
    index: int
    text: str
    embedding: List[float]
    dimensions: int


class BatchEmbeddingResponse(BaseModel):
    """Response body for POST /api/embeddings/batch.

    Attributes:
        embeddings:       One item per input text, same order.
        usage:            Aggregate token usage.
        model:            Model that produced the vectors.
        total_embeddings: Number of items in ``embeddings``.
    """
    embeddings: List[BatchEmbeddingItem]
    usage: Optional[Dict[str, Any]] = None
    model: str
    total_embeddings: int


# ---------------------------------------------------------------------------
# POST /api/embeddings/similarity
# ---------------------------------------------------------------------------

class SimilarityRequest(BaseModel):
    """Request body for POST /api/embeddings/similarity."""
    text1: Optional[str] = Field(None, description="First text")
    text2: Optional[str] = Field(None, description="Second text")
    model: str = Field(DEFAULT_EMBEDDING_MODEL, description="Embedding model")


class VectorWithDimensions(BaseModel):
    embedding: List[float]
    dimensions: int


class SimilarityEmbeddings(BaseModel):
    text1: VectorWithDimensions
    text2: VectorWithDimensions


class SimilarityResponse(BaseModel):
    """Response body for POST /api/embeddings/similarity.

    ``cosine_similarity`` is null when it is not a finite number (one of
    the vectors was all zeros); ``similarity_percentage`` then reads
    ``"nan%"``.
    """
    text1: str
    text2: str
    cosine_similarity: Optional[float]
    similarity_percentage: str
    embeddings: SimilarityEmbeddings
    usage: Optional[Dict[str, Any]] = None
    model: str
