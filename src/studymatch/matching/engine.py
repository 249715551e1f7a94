"""
Motor de ranking por similitud.

Implementa:
- Ranking genérico: vectoriza sujeto y candidatos, calcula similitud,
  filtra por threshold (inclusivo), ordena y corta en top N
- Compañeros de estudio, grupos y recursos como proyecciones distintas
  sobre el mismo ranking

Funciones puras: no hay I/O ni estado compartido.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Iterator, Optional, Union

import structlog
from pydantic import BaseModel, ConfigDict, Field, StrictInt, ValidationError

from studymatch.matching.errors import InvalidRankingParameterError
from studymatch.matching.similarity import TokenNormalization, cosine_similarity
from studymatch.matching.vectorize import (
    Vectorizer,
    get_field,
    group_subject_vector,
    group_to_vector,
    profile_to_vector,
    resource_interest_vector,
    resource_to_vector,
)

logger = structlog.get_logger()

DEFAULT_TOP_N = 3
DEFAULT_MIN_SCORE = 0.2
DEFAULT_RECOMMENDATION_LIMIT = 5
DEFAULT_GROUP_MIN_SCORE = 0.2
DEFAULT_RESOURCE_MIN_SCORE = 0.1


@dataclass(frozen=True)
class Match:
    """Par (candidato, score) resultante del ranking."""

    candidate: Any  # Referencia original, nunca una copia
    score: float  # 0.0 a 1.0

    def __iter__(self) -> Iterator[Any]:
        yield self.candidate
        yield self.score


class RankingOptions(BaseModel):
    """Parámetros validados de un ranking."""

    model_config = ConfigDict(frozen=True)

    top_n: StrictInt = Field(DEFAULT_TOP_N, ge=0, description="Máximo de resultados")
    min_score: float = Field(
        DEFAULT_MIN_SCORE,
        strict=True,  # int o float; rechaza str, bytes y bool
        ge=0.0,
        le=1.0,
        allow_inf_nan=False,
        description="Score mínimo inclusivo",
    )
    normalization: TokenNormalization = Field(
        TokenNormalization.EXACT, description="Política de comparación de tokens"
    )


def _build_options(
    top_n: int,
    min_score: float,
    normalization: Union[TokenNormalization, str],
) -> RankingOptions:
    try:
        return RankingOptions(
            top_n=top_n,
            min_score=min_score,
            normalization=normalization,
        )
    except ValidationError as e:
        raise InvalidRankingParameterError(str(e)) from e


def _as_candidate_list(candidates: Any) -> list[Any]:
    if isinstance(candidates, (str, bytes, Mapping)) or not isinstance(candidates, Iterable):
        raise InvalidRankingParameterError(
            f"candidates debe ser una secuencia de registros, llegó {type(candidates).__name__}"
        )
    return list(candidates)


def rank_candidates(
    subject: Any,
    candidates: Iterable[Any],
    *,
    subject_vectorizer: Vectorizer = profile_to_vector,
    candidate_vectorizer: Optional[Vectorizer] = None,
    top_n: int = DEFAULT_TOP_N,
    min_score: float = DEFAULT_MIN_SCORE,
    normalization: Union[TokenNormalization, str] = TokenNormalization.EXACT,
) -> list[Match]:
    """
    Rankea candidatos por similitud contra un sujeto.

    Flujo:
    1. Validar parámetros y candidatos (antes de calcular nada)
    2. Vectorizar sujeto una vez y cada candidato una vez
    3. Calcular similitud de coseno binaria
    4. Descartar score < min_score
    5. Ordenar descendente (sort estable: empates respetan el orden de entrada)
    6. Cortar en top_n

    Args:
        subject: Registro sujeto
        candidates: Registros candidatos (puede estar vacío)
        subject_vectorizer: Proyección del sujeto a tokens
        candidate_vectorizer: Proyección de candidatos (default: la del sujeto)
        top_n: Máximo de resultados (0 devuelve lista vacía)
        min_score: Threshold inclusivo
        normalization: Política de comparación de tokens

    Returns:
        Lista de Match ordenados por score

    Raises:
        InvalidRankingParameterError: top_n/min_score/candidates inválidos
        InvalidProfileError: Algún registro tiene un campo malformado
    """
    options = _build_options(top_n, min_score, normalization)
    pool = _as_candidate_list(candidates)
    candidate_vectorizer = candidate_vectorizer or subject_vectorizer

    subject_vector = subject_vectorizer(subject)
    candidate_vectors = [candidate_vectorizer(candidate) for candidate in pool]

    if options.top_n == 0:
        return []

    matches = []
    for candidate, vector in zip(pool, candidate_vectors):
        score = cosine_similarity(subject_vector, vector, options.normalization)
        if score >= options.min_score:
            matches.append(Match(candidate=candidate, score=score))

    matches.sort(key=lambda m: m.score, reverse=True)

    logger.debug(
        "Ranking calculado",
        candidates=len(pool),
        above_threshold=len(matches),
        top_n=options.top_n,
    )

    return matches[: options.top_n]


def get_top_matches(
    subject: Any,
    candidates: Iterable[Any],
    top_n: int = DEFAULT_TOP_N,
    min_score: float = DEFAULT_MIN_SCORE,
    normalization: Union[TokenNormalization, str] = TokenNormalization.EXACT,
) -> list[Match]:
    """Mejores compañeros de estudio para un usuario."""
    return rank_candidates(
        subject,
        candidates,
        subject_vectorizer=profile_to_vector,
        top_n=top_n,
        min_score=min_score,
        normalization=normalization,
    )


def recommend_study_groups(
    user: Any,
    groups: Iterable[Any],
    limit: int = DEFAULT_RECOMMENDATION_LIMIT,
    min_score: float = DEFAULT_GROUP_MIN_SCORE,
    normalization: Union[TokenNormalization, str] = TokenNormalization.EXACT,
) -> list[Match]:
    """Grupos recomendados según materias y nivel académico."""
    return rank_candidates(
        user,
        groups,
        subject_vectorizer=group_subject_vector,
        candidate_vectorizer=group_to_vector,
        top_n=limit,
        min_score=min_score,
        normalization=normalization,
    )


def recommend_resources(
    user: Any,
    resources: Iterable[Any],
    limit: int = DEFAULT_RECOMMENDATION_LIMIT,
    min_score: float = DEFAULT_RESOURCE_MIN_SCORE,
    normalization: Union[TokenNormalization, str] = TokenNormalization.EXACT,
) -> list[Match]:
    """Recursos recomendados según materias e historial de interacciones."""
    return rank_candidates(
        user,
        resources,
        subject_vectorizer=resource_interest_vector,
        candidate_vectorizer=resource_to_vector,
        top_n=limit,
        min_score=min_score,
        normalization=normalization,
    )


def matched_subjects(subject: Any, candidate: Any) -> list[str]:
    """Materias del sujeto que también tiene el candidato, sin repetir."""
    theirs = set(get_field(candidate, "subjects") or [])
    seen = set()
    overlap = []
    for name in get_field(subject, "subjects") or []:
        if name in theirs and name not in seen:
            seen.add(name)
            overlap.append(name)
    return overlap
