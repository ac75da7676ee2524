"""LLMProvider abstract interface for upstream model APIs.

Route handlers talk to the provider only through this interface and the
result dataclasses below, so the public response contracts never depend on
a vendor SDK's object model.

Usage:
    from gateway.provider import get_provider

    provider = get_provider()
    result = await provider.chat("Hello", model="gpt-3.5-turbo")
    print(result.text, result.usage, result.model)
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union


@dataclass
class CompletionResult:
    """Text produced by a chat or legacy completion call.

    Attributes:
        text: Generated text, or None when the provider returned no choice.
        usage: Token accounting exactly as reported by the provider.
        model: Model that actually served the request.
    """
    text: Optional[str]
    usage: Optional[Dict[str, Any]]
    model: str


@dataclass
class ModelInfo:
    """One entry of the provider's model catalogue."""
    id: str
    created: int
    owned_by: str


@dataclass
class EmbeddingItem:
    """A single embedding, in provider order.

    ``embedding`` is a list of floats, or a base64 string when the caller
    asked for ``encoding_format="base64"``.
    """
    index: int
    embedding: Union[List[float], str]


@dataclass
class EmbeddingResult:
    """Embeddings for one or more inputs plus usage metadata."""
    items: List[EmbeddingItem] = field(default_factory=list)
    usage: Optional[Dict[str, Any]] = None
    model: str = ""

    @property
    def vectors(self) -> List[Union[List[float], str]]:
        return [item.embedding for item in self.items]


class LLMProvider(ABC):
    """Abstract base class for upstream LLM providers.

    Every method performs exactly one upstream call and raises
    ``ProviderError`` on any failure.
    """

    @abstractmethod
    async def chat(
        self,
        message: str,
        model: str,
        max_tokens: int = 500,
    ) -> CompletionResult:
        """Send a single user-role message to a chat model.

        Args:
            message: The user message.
            model: Chat model identifier.
            max_tokens: Maximum tokens in the reply.

        Returns:
            CompletionResult with the assistant's content.

        Raises:
            ProviderError: If the upstream call fails.
        """

    @abstractmethod
    async def complete(
        self,
        prompt: str,
        model: str,
        max_tokens: int = 100,
        temperature: float = 0.7,
    ) -> CompletionResult:
        """Run a legacy single-shot text completion.

        Raises:
            ProviderError: If the upstream call fails.
        """

    @abstractmethod
    async def list_models(self) -> List[ModelInfo]:
        """Return the provider's model catalogue in provider order.

        Raises:
            ProviderError: If the upstream call fails.
        """

    @abstractmethod
    async def embed(
        self,
        inputs: Union[str, List[str]],
        model: str,
        encoding_format: Optional[str] = None,
    ) -> EmbeddingResult:
        """Embed one text or an ordered batch of texts.

        Args:
            inputs: A single string or a list of strings.
            model: Embedding model identifier.
            encoding_format: ``"float"`` or ``"base64"``.  ``None`` leaves
                the choice to the client library.

        Returns:
            EmbeddingResult with one item per input, in input order.

        Raises:
            ProviderError: If the upstream call fails.
        """
