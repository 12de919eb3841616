#!/usr/bin/env python3
"""
Semantic Similarity - gig description vs talent profile.

Two interchangeable ways to fill the semantic slot:
- embedding cosine similarity, when a provider returned vectors for both texts
- token overlap between the two texts, the deterministic local fallback
"""
import re
from typing import List, Optional, Sequence

from core.matcher.dto import GigProfile, TalentProfile
from core.utils import cosine_similarity, clamp01

_NON_WORD = re.compile(r"\W+")
MIN_TOKEN_LENGTH = 4  # tokens of 3 characters or fewer are discarded


def gig_text(gig: GigProfile) -> str:
    return f"{gig.title} {gig.description} {' '.join(gig.style_preferences)}"


def talent_text(talent: TalentProfile) -> str:
    return f"{talent.bio or ''} {' '.join(talent.skills)} {' '.join(talent.categories)}"


def tokenize(text: str) -> List[str]:
    """Lower-cased word tokens longer than three characters, in order."""
    return [w for w in _NON_WORD.split(text.lower()) if len(w) >= MIN_TOKEN_LENGTH]


def token_overlap_score(gig: GigProfile, talent: TalentProfile) -> float:
    """
    Keyword overlap between gig and talent texts.

    Gig tokens are counted with multiplicity when present anywhere in
    the talent text; the ratio is boosted x2 and capped at 1.0.
    """
    gig_words = tokenize(gig_text(gig))
    talent_tokens = tokenize(talent_text(talent))
    talent_words = set(talent_tokens)

    common = sum(1 for word in gig_words if word in talent_words)
    similarity = common / max(len(gig_words), len(talent_tokens), 1)

    return min(similarity * 2, 1.0)


def embedding_score(
    gig_embedding: Optional[Sequence[float]],
    talent_embedding: Optional[Sequence[float]]
) -> float:
    """Cosine similarity of two embeddings clamped to [0, 1]."""
    return clamp01(cosine_similarity(gig_embedding, talent_embedding))


def calculate_semantic_score(
    gig: GigProfile,
    talent: TalentProfile,
    gig_embedding: Optional[Sequence[float]] = None,
    talent_embedding: Optional[Sequence[float]] = None
) -> float:
    """
    Semantic score for the pair.

    Uses embeddings when both are present and of equal dimension,
    otherwise the token-overlap fallback.
    """
    if gig_embedding and talent_embedding and len(gig_embedding) == len(talent_embedding):
        return embedding_score(gig_embedding, talent_embedding)
    return token_overlap_score(gig, talent)
