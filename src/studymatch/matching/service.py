"""
Servicio de matching sobre la base de datos.

Es el caller del motor: trae perfiles y candidatos de Supabase,
los valida contra los modelos (StudyProfile, StudyGroup, Resource),
ejecuta el ranking y registra el historial de matches. El ranking
nunca se pierde por un error al guardar el historial.
"""

from typing import Optional, TypeVar

import structlog
from pydantic import BaseModel, ValidationError

from studymatch.config import Settings, get_settings
from studymatch.database import (
    MatchHistoryRepository,
    ResourceRepository,
    StudyGroupRepository,
    UserRepository,
)
from studymatch.matching.engine import (
    Match,
    get_top_matches,
    matched_subjects,
    recommend_resources,
    recommend_study_groups,
)
from studymatch.matching.errors import InvalidProfileError, ProfileNotFoundError
from studymatch.matching.ratings import average_ratings
from studymatch.models import (
    MatchHistory,
    PartnerSuggestion,
    Resource,
    StudyGroup,
    StudyProfile,
)

logger = structlog.get_logger()

ModelT = TypeVar("ModelT", bound=BaseModel)


def _validate_rows(model: type[ModelT], rows: Optional[list[dict]]) -> list[ModelT]:
    """Convierte filas de Supabase en modelos; una fila inválida corta todo."""
    validated = []
    for row in rows or []:
        try:
            validated.append(model.model_validate(row))
        except ValidationError as e:
            error = e.errors()[0]
            field = ".".join(str(part) for part in error["loc"]) or model.__name__
            raise InvalidProfileError(field, error["msg"]) from e
    return validated


class MatchingService:
    """
    Orquesta matching de compañeros y recomendaciones.

    Flujo de compañeros:
    1. Obtener el usuario y todos los demás usuarios
    2. Rankear con el motor (top N + threshold de settings)
    3. Registrar cada match en el historial (best-effort)
    4. Devolver sugerencias con score redondeado
    """

    def __init__(
        self,
        user_repo: Optional[UserRepository] = None,
        group_repo: Optional[StudyGroupRepository] = None,
        resource_repo: Optional[ResourceRepository] = None,
        history_repo: Optional[MatchHistoryRepository] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or get_settings()
        self.user_repo = user_repo or UserRepository()
        self.group_repo = group_repo or StudyGroupRepository()
        self.resource_repo = resource_repo or ResourceRepository()
        self.history_repo = history_repo or MatchHistoryRepository()

    def _load_user(self, user_id: str) -> StudyProfile:
        row = self.user_repo.get_by_id(user_id)
        if not row:
            raise ProfileNotFoundError(user_id)
        return _validate_rows(StudyProfile, [row])[0]

    def find_study_partners(self, user_id: str) -> list[PartnerSuggestion]:
        """
        Busca compañeros de estudio compatibles.

        Args:
            user_id: UUID del usuario

        Returns:
            Lista de PartnerSuggestion ordenada por score

        Raises:
            ProfileNotFoundError: Si el usuario no existe
            InvalidProfileError: Si alguna fila no respeta el modelo
        """
        user = self._load_user(user_id)
        others = _validate_rows(StudyProfile, self.user_repo.get_others(user_id))

        if not others:
            logger.info("No hay otros usuarios para comparar", user_id=user_id)
            return []

        matches = get_top_matches(
            user,
            others,
            top_n=self.settings.match_top_n,
            min_score=self.settings.match_min_score,
            normalization=self.settings.token_normalization,
        )

        self._record_history(user_id, user, matches)

        logger.info(
            "Compañeros encontrados",
            user_id=user_id,
            candidates=len(others),
            matches=len(matches),
        )

        return [
            PartnerSuggestion(
                user_id=str(match.candidate.id),
                name=match.candidate.name,
                email=match.candidate.email,
                avatar=match.candidate.avatar or None,
                score=round(match.score, 2),
            )
            for match in matches
        ]

    def _record_history(self, user_id: str, user: StudyProfile, matches: list[Match]) -> int:
        """Guarda un MatchHistory por match. Devuelve cuántos se guardaron."""
        saved = 0
        for match in matches:
            try:
                record = MatchHistory(
                    user_a=user_id,
                    user_b=str(match.candidate.id),
                    compatibility_score=match.score,
                    matched_subjects=matched_subjects(user, match.candidate),
                )
                self.history_repo.create(record)
                saved += 1
            except Exception as e:
                logger.warning(
                    "No se pudo guardar el historial de match",
                    user_id=user_id,
                    error=str(e),
                )
        return saved

    def recommend_groups(self, user_id: str) -> list[StudyGroup]:
        """Grupos de estudio recomendados para un usuario."""
        user = self._load_user(user_id)
        groups = _validate_rows(StudyGroup, self.group_repo.get_all())

        matches = recommend_study_groups(
            user,
            groups,
            limit=self.settings.recommendation_limit,
            min_score=self.settings.group_min_score,
            normalization=self.settings.token_normalization,
        )
        logger.info("Grupos recomendados", user_id=user_id, total=len(matches))
        return [match.candidate for match in matches]

    def recommend_resources(self, user_id: str) -> list[Resource]:
        """Recursos recomendados para un usuario."""
        user = self._load_user(user_id)
        resources = _validate_rows(Resource, self.resource_repo.get_all())

        matches = recommend_resources(
            user,
            resources,
            limit=self.settings.recommendation_limit,
            min_score=self.settings.resource_min_score,
            normalization=self.settings.token_normalization,
        )
        logger.info("Recursos recomendados", user_id=user_id, total=len(matches))
        return [match.candidate for match in matches]

    def resource_catalog(self) -> list[Resource]:
        """Todos los recursos con su rating promedio (None si no tiene)."""
        resources = _validate_rows(Resource, self.resource_repo.get_all())
        ratings = average_ratings(_validate_rows(StudyProfile, self.user_repo.get_all()))

        return [
            resource.model_copy(update={"average_rating": ratings.get(str(resource.id))})
            for resource in resources
        ]
