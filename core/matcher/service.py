#!/usr/bin/env python3
"""
Matching Service - ranks the talent pool for a gig.

Pipeline per call:
1. Load the gig and the pool of available talents (one short read transaction)
2. Score every candidate on six criteria (thread pool, no shared state)
3. Aggregate, drop candidates below the threshold, sort, truncate
4. Explain the survivors
5. Replace the stored match set for the gig (one write transaction)

Writes for the same gig are serialized; different gigs never wait on
each other.
"""
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, List, Optional, Sequence, Tuple, Type
import logging
import threading
import weakref

from pydantic import BaseModel, ValidationError as PydanticValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from database.uow import matching_uow
from core.config_loader import MatchingConfig
from core.exceptions import (
    GigNotFoundError, MatchNotFoundError, PersistenceError, ValidationError
)
from core.llm.interfaces import EmbeddingProvider, NullEmbeddingProvider
from core.matcher import criteria
from core.matcher.dto import GigProfile, TalentProfile
from core.matcher.explainability import generate_explanation
from core.matcher.locations import LocationTables, DEFAULT_LOCATION_TABLES
from core.matcher.models import MatchCandidate, ScoreSet
from core.matcher.requests import (
    FindMatchesRequest, GigLookupRequest, FeedbackRequest, MatchStatusUpdate
)
from core.matcher.responses import (
    FindMatchesResponse, GigSummary, MatchResponse, SavedMatchResponse,
    SavedMatchesResponse, FeedbackResponse, ScoreBreakdown, TalentSummary
)
from core.matcher.similarity import calculate_semantic_score, gig_text, talent_text
from core.scorer.aggregate import (
    WEIGHTS, calculate_overall_score, apply_threshold, rank_candidates
)
from core.scorer.persistence import save_matches
from core.utils import to_percent

logger = logging.getLogger(__name__)

CRITERIA_DESCRIPTIONS = {
    'skills': 'Matches required skills with talent expertise, including partial and category matches',
    'location': 'Geographic compatibility, with higher scores for exact matches and regional proximity',
    'budget': 'Budget range compatibility between client requirements and talent expectations',
    'experience': 'Years of experience, project count, and client ratings',
    'availability': 'Current availability status of the talent',
    'semantic': 'Similarity between the gig brief and the talent profile (embeddings when available)',
}


class MatchingService:
    """
    Service that ranks talents for a gig and stores the shortlist.

    All collaborators are injected: the session factory for the match
    store, an optional embedding provider, configuration, location
    tables and the logger.
    """

    def __init__(
        self,
        session_factory: Optional[sessionmaker] = None,
        embedding_provider: Optional[EmbeddingProvider] = None,
        config: Optional[MatchingConfig] = None,
        location_tables: LocationTables = DEFAULT_LOCATION_TABLES,
        logger: logging.Logger = logger
    ):
        """
        Initialize matching service with dependencies.

        Args:
            session_factory: sessionmaker for the match store (defaults to SessionLocal)
            embedding_provider: Optional provider for the semantic criterion
            config: MatchingConfig with run parameters
            location_tables: City/region tables for the location criterion
            logger: Logger for run progress
        """
        self.session_factory = session_factory
        self.embeddings = embedding_provider or NullEmbeddingProvider()
        self.config = config or MatchingConfig()
        self.location_tables = location_tables
        self.logger = logger

        # Entries vanish once no caller holds the lock
        self._gig_locks: "weakref.WeakValueDictionary[int, threading.Lock]" = weakref.WeakValueDictionary()
        self._gig_locks_guard = threading.Lock()

    # ------------------------------------------------------------------
    # Matching
    # ------------------------------------------------------------------

    def find_matches(self, gig_id: Any, limit: Optional[int] = None) -> List[MatchCandidate]:
        """
        Rank the talent pool for a gig and persist the result.

        Args:
            gig_id: Gig to match (positive integer)
            limit: Maximum matches to return (1-50, default from config)

        Returns:
            Ranked candidates, best first, rank 1-based

        Raises:
            ValidationError: gig_id or limit is malformed
            GigNotFoundError: gig does not exist
            PersistenceError: storing the result failed; nothing was changed
        """
        _, ranked = self._run(self._find_request(gig_id, limit))
        return ranked

    def find_matches_response(self, gig_id: Any, limit: Optional[int] = None) -> FindMatchesResponse:
        """Same as find_matches, shaped for an API response."""
        gig, ranked = self._run(self._find_request(gig_id, limit))
        return FindMatchesResponse(
            gig=GigSummary.from_profile(gig),
            total_matches=len(ranked),
            matches=[MatchResponse.from_candidate(c) for c in ranked],
        )

    def calculate_scores(
        self,
        gig: GigProfile,
        talent: TalentProfile,
        gig_embedding: Optional[Sequence[float]] = None
    ) -> ScoreSet:
        """Compute all six criterion scores for one pair."""
        talent_embedding = None
        if gig_embedding is not None:
            talent_embedding = self._embed(talent_text(talent))

        return {
            'skills': criteria.calculate_skill_score(gig, talent),
            'location': criteria.calculate_location_score(gig, talent, self.location_tables),
            'budget': criteria.calculate_budget_score(gig, talent),
            'experience': criteria.calculate_experience_score(gig, talent),
            'availability': criteria.calculate_availability_score(gig, talent),
            'semantic': calculate_semantic_score(gig, talent, gig_embedding, talent_embedding),
        }

    def score_candidate(
        self,
        gig: GigProfile,
        talent: TalentProfile,
        gig_embedding: Optional[Sequence[float]] = None
    ) -> MatchCandidate:
        scores = self.calculate_scores(gig, talent, gig_embedding)
        return MatchCandidate(
            talent=talent,
            scores=scores,
            overall_score=calculate_overall_score(scores),
        )

    def _find_request(self, gig_id: Any, limit: Optional[int]) -> FindMatchesRequest:
        if limit is None:
            limit = self.config.default_limit
        return self._validate(FindMatchesRequest, gig_id=gig_id, limit=limit)

    def _run(self, request: FindMatchesRequest) -> Tuple[GigProfile, List[MatchCandidate]]:
        self.logger.info(f"🔍 Finding matches for gig {request.gig_id}")

        gig, pool = self._load(request.gig_id)
        self.logger.info(f"Loaded {len(pool)} available talents for gig {gig.id}")

        if not pool:
            self.logger.warning(f"No available talent to match for gig {gig.id}")
            ranked: List[MatchCandidate] = []
        else:
            scored = self._score_pool(gig, pool)
            eligible = apply_threshold(scored, self.config.min_score_threshold)
            ranked = rank_candidates(eligible, request.limit)
            for candidate in ranked:
                candidate.explanation = generate_explanation(candidate.talent, candidate.scores)
            self.logger.debug(
                f"Scored {len(scored)} candidates, {len(eligible)} above threshold "
                f"{self.config.min_score_threshold}"
            )

        self._persist(gig.id, ranked)

        self.logger.info(f"✅ Found {len(ranked)} matches for gig {gig.id}")
        return gig, ranked

    def _load(self, gig_id: int) -> Tuple[GigProfile, List[TalentProfile]]:
        with matching_uow(self.session_factory) as repo:
            gig = repo.gigs.get_by_id(gig_id)
            if gig is None:
                raise GigNotFoundError(f"Gig {gig_id} not found")

            talents = repo.talents.get_candidate_pool()
            return GigProfile.from_orm(gig), [TalentProfile.from_orm(t) for t in talents]

    def _score_pool(self, gig: GigProfile, pool: List[TalentProfile]) -> List[MatchCandidate]:
        gig_embedding = None
        if self.embeddings.is_available:
            gig_embedding = self._embed(gig_text(gig))
            if gig_embedding is None:
                self.logger.warning("Gig embedding unavailable, semantic scores use token overlap")

        workers = max(1, min(self.config.scoring_workers, len(pool)))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            # map() yields in submission order, so pool order survives
            return list(executor.map(
                lambda talent: self.score_candidate(gig, talent, gig_embedding),
                pool
            ))

    def _embed(self, text: str) -> Optional[List[float]]:
        try:
            return self.embeddings.embed(text)
        except Exception as e:
            self.logger.warning(f"Embedding provider failed, using fallback: {e}")
            return None

    def _persist(self, gig_id: int, ranked: List[MatchCandidate]) -> None:
        with self._lock_for(gig_id):
            try:
                with matching_uow(self.session_factory) as repo:
                    save_matches(repo, gig_id, ranked)
            except SQLAlchemyError as e:
                self.logger.error(f"❌ Error saving matches for gig {gig_id}: {e}")
                raise PersistenceError(f"Failed to save matches for gig {gig_id}") from e

    def _lock_for(self, gig_id: int) -> threading.Lock:
        with self._gig_locks_guard:
            lock = self._gig_locks.get(gig_id)
            if lock is None:
                lock = self._gig_locks[gig_id] = threading.Lock()
            return lock

    # ------------------------------------------------------------------
    # Stored matches
    # ------------------------------------------------------------------

    def get_saved_matches(self, gig_id: Any) -> SavedMatchesResponse:
        """Stored matches for a gig, best first."""
        request = self._validate(GigLookupRequest, gig_id=gig_id)

        with matching_uow(self.session_factory) as repo:
            matches = repo.matches.get_matches_for_gig(request.gig_id)
            saved = [
                SavedMatchResponse(
                    match_id=m.id,
                    talent=TalentSummary.from_profile(TalentProfile.from_orm(m.talent)),
                    overall_score=to_percent(float(m.overall_score or 0)),
                    scores=ScoreBreakdown.from_fractions(_row_scores(m)),
                    explanation=m.explanation,
                    status=m.status,
                    rank=position,
                )
                for position, m in enumerate(matches, start=1)
            ]

        return SavedMatchesResponse(gig_id=request.gig_id, total_matches=len(saved), matches=saved)

    def submit_feedback(self, match_id: Any, rating: Any, feedback: Optional[str] = None) -> FeedbackResponse:
        """
        Record client feedback on a match, replacing earlier feedback.

        Raises:
            ValidationError: ids or rating malformed
            MatchNotFoundError: match does not exist
        """
        request = self._validate(FeedbackRequest, match_id=match_id, rating=rating, feedback=feedback)

        with matching_uow(self.session_factory) as repo:
            match = repo.matches.get_by_id(request.match_id)
            if match is None:
                raise MatchNotFoundError(f"Match {request.match_id} not found")

            client_id = match.gig.client_id if match.gig else None
            repo.matches.upsert_feedback(
                match_id=match.id,
                client_id=client_id,
                rating=request.rating,
                feedback_text=request.feedback,
            )

        self.logger.info(f"Feedback {request.rating}/5 recorded for match {request.match_id}")
        return FeedbackResponse(match_id=request.match_id, rating=request.rating)

    def update_match_status(self, match_id: Any, status: Any) -> str:
        """Set a match's lifecycle status; returns the new status."""
        request = self._validate(MatchStatusUpdate, match_id=match_id, status=status)

        with matching_uow(self.session_factory) as repo:
            match = repo.matches.get_by_id(request.match_id)
            if match is None:
                raise MatchNotFoundError(f"Match {request.match_id} not found")
            repo.matches.update_status(match, request.status)

        return request.status

    @staticmethod
    def algorithm_info() -> Dict[str, Any]:
        """Static description of the scoring criteria and their weights."""
        return {
            'name': 'GigMatch Talent Matching Engine',
            'description': 'Multi-factor scoring combining rule-based criteria with optional embedding similarity',
            'scoring_criteria': {
                name: {
                    'weight': f"{round(weight * 100)}%",
                    'description': CRITERIA_DESCRIPTIONS[name],
                }
                for name, weight in WEIGHTS.items()
            },
        }

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    @staticmethod
    def _validate(model: Type[BaseModel], **values: Any):
        try:
            return model(**values)
        except PydanticValidationError as e:
            errors = e.errors(include_url=False, include_context=False)
            first = errors[0] if errors else {}
            field = ".".join(str(part) for part in first.get('loc', ()))
            raise ValidationError(
                f"Validation error: {field} {first.get('msg', 'invalid value')}".strip(),
                details=errors,
            ) from e


def _row_scores(match) -> ScoreSet:
    """Criterion fractions of a stored match row."""
    return {
        'skills': float(match.skill_score or 0),
        'location': float(match.location_score or 0),
        'budget': float(match.budget_score or 0),
        'experience': float(match.experience_score or 0),
        'availability': float(match.availability_score or 0),
        'semantic': float(match.semantic_score or 0),
    }
