"""Upstream LLM provider access.

Usage:
    from gateway.provider import OpenAIProvider, set_provider

    set_provider(OpenAIProvider(api_key="sk-..."))
"""
from .base import CompletionResult, EmbeddingItem, EmbeddingResult, LLMProvider, ModelInfo
from .openai_provider import OpenAIProvider
from .registry import get_provider, require_provider, set_provider

__all__ = [
    "LLMProvider",
    "CompletionResult",
    "ModelInfo",
    "EmbeddingItem",
    "EmbeddingResult",
    "OpenAIProvider",
    "get_provider",
    "set_provider",
    "require_provider",
]
