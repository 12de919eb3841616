"""
Embedding Provider Interface - Abstract base for embedding services.

The semantic criterion asks an EmbeddingProvider for vectors and falls
back to token overlap whenever the provider returns None.
"""
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from core.utils import cosine_similarity


class EmbeddingProvider(ABC):
    """
    Abstract interface for embedding services (OpenAI, Ollama, ...).
    """

    @property
    def is_available(self) -> bool:
        return True

    @abstractmethod
    def embed(self, text: str) -> Optional[List[float]]:
        """
        Generate a vector embedding for the given text.

        Returns None when no vector can be produced; implementations
        must not raise for provider outages.
        """
        pass

    def cosine_similarity(
        self,
        vector_a: Optional[Sequence[float]],
        vector_b: Optional[Sequence[float]]
    ) -> float:
        """Cosine similarity, 0.0 for missing, empty or mismatched vectors."""
        return cosine_similarity(vector_a, vector_b)


class NullEmbeddingProvider(EmbeddingProvider):
    """Stands in when no embedding service is configured."""

    @property
    def is_available(self) -> bool:
        return False

    def embed(self, text: str) -> Optional[List[float]]:
        return None
