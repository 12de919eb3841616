import logging
from dataclasses import dataclass

from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from core.config_loader import AppConfig, EmbeddingConfig
from core.llm.interfaces import EmbeddingProvider, NullEmbeddingProvider
from core.llm.openai_service import OpenAIEmbeddingService
from core.matcher.service import MatchingService
from database.database import build_engine, build_session_factory

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    """Application context container that holds all wired dependencies.

    A single source of truth for service instantiation. DB access
    happens through matching_uow() inside each service call, bound to
    session_factory.
    """
    config: AppConfig
    engine: Engine
    session_factory: sessionmaker
    embedding_provider: EmbeddingProvider
    matching_service: MatchingService

    @classmethod
    def build(cls, config: AppConfig) -> "AppContext":
        """Build an AppContext from config.

        Args:
            config: Loaded application configuration

        Returns:
            Fully wired AppContext instance
        """
        engine = build_engine(config.database.url)
        session_factory = build_session_factory(engine)

        embedding_provider = cls._build_embedding_provider(config.embedding)

        matching_service = MatchingService(
            session_factory=session_factory,
            embedding_provider=embedding_provider,
            config=config.matching,
        )

        return cls(
            config=config,
            engine=engine,
            session_factory=session_factory,
            embedding_provider=embedding_provider,
            matching_service=matching_service,
        )

    @staticmethod
    def _build_embedding_provider(embedding_config: EmbeddingConfig) -> EmbeddingProvider:
        """Build the embedding provider, or the null provider when none is configured."""
        if not embedding_config.enabled:
            logger.info("Embeddings disabled, semantic scores use token overlap")
            return NullEmbeddingProvider()

        if not embedding_config.api_key and not embedding_config.base_url:
            logger.warning("⚠️ No embedding API key or base URL configured, semantic scores use token overlap")
            return NullEmbeddingProvider()

        return OpenAIEmbeddingService(
            api_key=embedding_config.api_key,
            base_url=embedding_config.base_url,
            model=embedding_config.model,
            timeout_seconds=embedding_config.timeout_seconds,
            max_attempts=embedding_config.max_attempts,
            max_input_chars=embedding_config.max_input_chars,
        )
