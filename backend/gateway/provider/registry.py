"""Process-wide provider singleton.

``gateway/main.py`` creates the provider once during application startup;
route handlers look it up per request and share it read-only.
"""
import logging
from typing import Optional

from gateway.errors import ProviderError

from .base import LLMProvider

logger = logging.getLogger(__name__)

_provider: Optional[LLMProvider] = None


def get_provider() -> Optional[LLMProvider]:
    """Return the global LLMProvider, or None if not yet initialised."""
    return _provider


def set_provider(provider: Optional[LLMProvider]) -> None:
    """Set (or replace) the global LLMProvider instance."""
    global _provider
    _provider = provider


def require_provider() -> LLMProvider:
    """Return the global provider.

    Raises:
        ProviderError: If startup has not registered a provider.
    """
    if _provider is None:
        logger.warning("Provider call failed: provider not initialized")
        raise ProviderError("Provider client is not initialized")
    return _provider
