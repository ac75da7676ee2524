"""OpenAI API provider implementation.

This module provides an LLMProvider implementation that connects to
OpenAI's API using the official async SDK.

Usage:
    provider = OpenAIProvider(api_key="sk-...")
    result = await provider.embed(["first", "second"], model="text-embedding-ada-002")
"""
import logging
from typing import Any, Dict, List, Optional, Union

import openai

from gateway.diagnostics import log_payload
from gateway.errors import ProviderError

from .base import CompletionResult, EmbeddingItem, EmbeddingResult, LLMProvider, ModelInfo

logger = logging.getLogger(__name__)


def _dump(obj: Any) -> Optional[Dict[str, Any]]:
    """Return an SDK sub-object as the JSON the provider sent, or None."""
    if obj is None:
        return None
    return obj.model_dump(exclude_unset=True)


class OpenAIProvider(LLMProvider):
    """LLMProvider implementation using OpenAI's API.

    The SDK client is created on first use and then reused for the lifetime
    of the provider.  A missing API key therefore does not stop the service
    from starting; the first call fails with a ``ProviderError`` instead.

    Attributes:
        api_key: OpenAI API key for authentication.
        base_url: Optional API base URL override.
        organization: Optional organization ID.
        timeout: Optional request timeout in seconds.
        log_payloads: Log a structural summary of every response.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        organization: Optional[str] = None,
        timeout: Optional[float] = None,
        log_payloads: bool = False,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url
        self.organization = organization
        self.timeout = timeout
        self.log_payloads = log_payloads
        self._client: Optional[openai.AsyncOpenAI] = None

    def _get_client(self) -> openai.AsyncOpenAI:
        """Get or create the OpenAI client.

        Raises:
            openai.OpenAIError: If no API key is configured.
        """
        if self._client is None:
            # One upstream attempt per request.
            kwargs: Dict[str, Any] = {"api_key": self.api_key, "max_retries": 0}
            if self.base_url:
                kwargs["base_url"] = self.base_url
            if self.organization:
                kwargs["organization"] = self.organization
            if self.timeout is not None:
                kwargs["timeout"] = self.timeout
            self._client = openai.AsyncOpenAI(**kwargs)
        return self._client

    def _trace(self, response: Any, label: str) -> None:
        if self.log_payloads:
            log_payload(response, label)

    async def chat(
        self,
        message: str,
        model: str,
        max_tokens: int = 500,
    ) -> CompletionResult:
        try:
            client = self._get_client()
            completion = await client.chat.completions.create(
                model=model,
                messages=[{"role": "user", "content": message}],
                max_tokens=max_tokens,
            )
            self._trace(completion, "CHAT COMPLETION")

            text = None
            if completion.choices:
                text = completion.choices[0].message.content
            return CompletionResult(
                text=text,
                usage=_dump(completion.usage),
                model=completion.model,
            )
        except Exception as exc:
            raise ProviderError.from_exception(exc) from exc

    async def complete(
        self,
        prompt: str,
        model: str,
        max_tokens: int = 100,
        temperature: float = 0.7,
    ) -> CompletionResult:
        try:
            client = self._get_client()
            completion = await client.completions.create(
                model=model,
                prompt=prompt,
                max_tokens=max_tokens,
                temperature=temperature,
            )
            self._trace(completion, "TEXT COMPLETION")

            text = None
            if completion.choices:
                text = completion.choices[0].text
            return CompletionResult(
                text=text,
                usage=_dump(completion.usage),
                model=completion.model,
            )
        except Exception as exc:
            raise ProviderError.from_exception(exc) from exc

    async def list_models(self) -> List[ModelInfo]:
        try:
            client = self._get_client()
            page = await client.models.list()
            self._trace(page, "MODELS LIST")

            return [
                ModelInfo(id=m.id, created=m.created, owned_by=m.owned_by)
                for m in page.data
            ]
        except Exception as exc:
            raise ProviderError.from_exception(exc) from exc

    async def embed(
        self,
        inputs: Union[str, List[str]],
        model: str,
        encoding_format: Optional[str] = None,
    ) -> EmbeddingResult:
        kwargs: Dict[str, Any] = {"model": model, "input": inputs}
        if encoding_format is not None:
            kwargs["encoding_format"] = encoding_format

        try:
            client = self._get_client()
            response = await client.embeddings.create(**kwargs)
            self._trace(response, "EMBEDDINGS")

            items = [
                EmbeddingItem(index=item.index, embedding=item.embedding)
                for item in response.data
            ]
            logger.debug(
                "[provider/openai] received %d embedding(s) model=%s",
                len(items),
                response.model,
            )
            return EmbeddingResult(
                items=items,
                usage=_dump(response.usage),
                model=response.model,
            )
        except Exception as exc:
            raise ProviderError.from_exception(exc) from exc
