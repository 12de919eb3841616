"""
OpenAI Service - Embedding implementation using the OpenAI API.

Works against any OpenAI-compatible endpoint (OpenAI, Ollama, vLLM)
via base_url. Every request is bounded by a client timeout and a short
tenacity retry; when those are exhausted embed() returns None so the
caller can fall back to the heuristic scorer.
"""
from typing import List, Optional
import logging

import openai
from openai import OpenAI
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)
from tenacity import RetryCallState

from core.exceptions import ProviderUnavailableError
from core.llm.interfaces import EmbeddingProvider

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Retry helpers
# ---------------------------------------------------------------------------

_TRANSIENT_ERRORS = (
    openai.RateLimitError,
    openai.APITimeoutError,
    openai.APIConnectionError,
    openai.InternalServerError,
)


def _log_retry(retry_state: RetryCallState) -> None:
    """Log a warning before each retry sleep."""
    exc = retry_state.outcome.exception()
    wait = retry_state.next_action.sleep if retry_state.next_action else 0
    logger.warning(
        "Transient embedding error (attempt %s). Waiting %.1fs before retry. Details: %s",
        retry_state.attempt_number, wait, exc,
    )


def _embedding_retry(max_attempts: int):
    """Return a tenacity @retry decorator for embedding API calls."""
    return retry(
        retry=retry_if_exception_type(_TRANSIENT_ERRORS),
        wait=wait_exponential(multiplier=0.5, min=0.5, max=4),
        stop=stop_after_attempt(max(1, max_attempts)),
        before_sleep=_log_retry,
        reraise=True,
    )


class OpenAIEmbeddingService(EmbeddingProvider):
    """
    OpenAI embedding service.

    The underlying client is created with max_retries=0 so tenacity is
    the only retry layer and the worst-case latency stays bounded by
    timeout_seconds * max_attempts plus the backoff.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        model: str = "text-embedding-3-small",
        timeout_seconds: float = 10.0,
        max_attempts: int = 2,
        max_input_chars: int = 8000,
        client: Optional[OpenAI] = None
    ):
        if client is None:
            client_kwargs = {'timeout': timeout_seconds, 'max_retries': 0}
            if api_key:
                client_kwargs['api_key'] = api_key
            elif base_url:
                # Local OpenAI-compatible servers ignore the key but the client requires one
                client_kwargs['api_key'] = "unused"
            if base_url:
                client_kwargs['base_url'] = base_url
            client = OpenAI(**client_kwargs)

        self.client = client
        self.model = model
        self.max_attempts = max_attempts
        self.max_input_chars = max_input_chars

    def embed(self, text: str) -> Optional[List[float]]:
        """Generate an embedding, or None if the provider is unreachable."""
        try:
            return self.embed_or_raise(text)
        except ProviderUnavailableError as e:
            logger.warning(f"Embedding unavailable, using fallback: {e}")
            return None

    def embed_or_raise(self, text: str) -> List[float]:
        """
        Generate an embedding vector for text.

        Raises:
            ProviderUnavailableError: if the text is empty, the API keeps
                failing after retries, or the response carries no vector.
        """
        if not text or not text.strip():
            raise ProviderUnavailableError("Cannot embed empty text")

        request = _embedding_retry(self.max_attempts)(self._request_embedding)
        try:
            embedding = request(text[:self.max_input_chars])
        except openai.OpenAIError as e:
            raise ProviderUnavailableError(f"Embedding request failed: {e}") from e

        if not embedding:
            raise ProviderUnavailableError("Embedding response contained no vector")
        return embedding

    def _request_embedding(self, text: str) -> List[float]:
        response = self.client.embeddings.create(
            input=text,
            model=self.model,
        )
        if not response.data:
            return []
        return list(response.data[0].embedding)
