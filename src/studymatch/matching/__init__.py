"""
Motor de matching.

Vectoriza perfiles, calcula similitud de coseno binaria y rankea
compañeros de estudio, grupos y recursos.
"""

from studymatch.matching.engine import (
    Match,
    RankingOptions,
    get_top_matches,
    matched_subjects,
    rank_candidates,
    recommend_resources,
    recommend_study_groups,
)
from studymatch.matching.errors import (
    InvalidProfileError,
    InvalidRankingParameterError,
    MatchingError,
    ProfileNotFoundError,
)
from studymatch.matching.ratings import average_ratings
from studymatch.matching.similarity import (
    TokenNormalization,
    cosine_similarity,
    normalize_tokens,
)
from studymatch.matching.vectorize import (
    group_subject_vector,
    group_to_vector,
    profile_to_vector,
    resource_interest_vector,
    resource_to_vector,
)

__all__ = [
    # Ranking
    "Match",
    "RankingOptions",
    "rank_candidates",
    "get_top_matches",
    "recommend_study_groups",
    "recommend_resources",
    "matched_subjects",
    "average_ratings",
    # Similitud
    "TokenNormalization",
    "cosine_similarity",
    "normalize_tokens",
    # Vectorización
    "profile_to_vector",
    "group_subject_vector",
    "group_to_vector",
    "resource_interest_vector",
    "resource_to_vector",
    # Errores
    "MatchingError",
    "InvalidProfileError",
    "InvalidRankingParameterError",
    "ProfileNotFoundError",
]
