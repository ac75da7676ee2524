"""Embedding endpoints and local similarity scoring.

Vectors come from the registered LLMProvider; the only computation done
locally is cosine similarity.
"""
from .service import EmbeddingService, check_batch
from .similarity import cosine_similarity, format_percentage

__all__ = [
    "EmbeddingService",
    "check_batch",
    "cosine_similarity",
    "format_percentage",
]
