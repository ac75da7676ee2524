"""Shared test fixtures and configuration for backend tests."""
from typing import List, Optional, Union

import pytest
from fastapi.testclient import TestClient

from gateway.errors import ProviderError
from gateway.main import app
from gateway.provider import (
    CompletionResult,
    EmbeddingItem,
    EmbeddingResult,
    LLMProvider,
    ModelInfo,
    get_provider,
    set_provider,
)


class RecordingProvider(LLMProvider):
    """In-memory LLMProvider that records every call it receives.

    Set ``error`` to make every call raise it as a ``ProviderError``.
    Embeddings are ``[len(text), position + 1, 0.5]`` unless ``vectors`` is
    set, so tests can tell inputs apart.
    """

    def __init__(self) -> None:
        self.calls: list = []
        self.error: Optional[Exception] = None
        self.text: Optional[str] = "Hello from the model"
        self.usage = {"prompt_tokens": 3, "completion_tokens": 5, "total_tokens": 8}
        self.models = [
            ModelInfo(id="gpt-4o", created=1715367049, owned_by="system"),
            ModelInfo(id="text-embedding-ada-002", created=1671217299, owned_by="openai-internal"),
        ]
        self.vectors: Optional[List[List[float]]] = None

    @property
    def call_count(self) -> int:
        return len(self.calls)

    def _record(self, name: str, **kwargs) -> None:
        self.calls.append((name, kwargs))
        if self.error is not None:
            raise ProviderError.from_exception(self.error)

    async def chat(self, message: str, model: str, max_tokens: int = 500) -> CompletionResult:
        self._record("chat", message=message, model=model, max_tokens=max_tokens)
        return CompletionResult(text=self.text, usage=self.usage, model=model)

    async def complete(
        self,
        prompt: str,
        model: str,
        max_tokens: int = 100,
        temperature: float = 0.7,
    ) -> CompletionResult:
        self._record(
            "complete", prompt=prompt, model=model,
            max_tokens=max_tokens, temperature=temperature,
        )
        return CompletionResult(text=self.text, usage=self.usage, model=model)

    async def list_models(self) -> List[ModelInfo]:
        self._record("list_models")
        return list(self.models)

    async def embed(
        self,
        inputs: Union[str, List[str]],
        model: str,
        encoding_format: Optional[str] = None,
    ) -> EmbeddingResult:
        self._record("embed", inputs=inputs, model=model, encoding_format=encoding_format)
        texts = [inputs] if isinstance(inputs, str) else inputs
        vectors = self.vectors or [
            [float(len(text)), float(position + 1), 0.5]
            for position, text in enumerate(texts)
        ]
        return EmbeddingResult(
            items=[EmbeddingItem(index=i, embedding=v) for i, v in enumerate(vectors)],
            usage={"prompt_tokens": len(texts), "total_tokens": len(texts)},
            model=model,
        )


@pytest.fixture
def api_client():
    """Provide a TestClient for the main FastAPI app.

    The lifespan is not entered, so the provider registered by
    ``fake_provider`` stays in place.
    """
    return TestClient(app)


@pytest.fixture
def fake_provider():
    """Register a RecordingProvider for the duration of one test."""
    original = get_provider()
    provider = RecordingProvider()
    set_provider(provider)
    yield provider
    set_provider(original)
