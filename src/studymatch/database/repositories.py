"""
Repositorios para operaciones CRUD en Supabase.

Cada repositorio maneja una tabla/entidad específica.
"""

from typing import Optional

import structlog
from tenacity import retry, stop_after_attempt, wait_exponential

from studymatch.database.supabase_client import get_supabase_client, SupabaseClient
from studymatch.models import MatchHistory

logger = structlog.get_logger()

# Lecturas idempotentes: se reintentan ante errores transitorios de red
read_retry = retry(
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=1, max=8),
    reraise=True,
)


class BaseRepository:
    """Clase base para repositorios."""

    TABLE = ""

    def __init__(self, client: Optional[SupabaseClient] = None):
        self._client = client or get_supabase_client()

    @property
    def client(self) -> SupabaseClient:
        return self._client

    @read_retry
    def get_by_id(self, record_id: str) -> Optional[dict]:
        """Obtiene un registro por su UUID."""
        return self.client.fetch_one(self.TABLE, record_id)

    @read_retry
    def get_all(self) -> list[dict]:
        """Obtiene todos los registros de la tabla."""
        return self.client.fetch_all(self.TABLE)


class UserRepository(BaseRepository):
    """Repositorio para perfiles de usuario."""

    TABLE = SupabaseClient.USERS

    @read_retry
    def get_others(self, user_id: str) -> list[dict]:
        """Obtiene todos los usuarios excepto el indicado (candidatos)."""
        return self.client.fetch_all(self.TABLE, exclude_id=user_id)


class StudyGroupRepository(BaseRepository):
    """Repositorio para grupos de estudio."""

    TABLE = SupabaseClient.STUDY_GROUPS


class ResourceRepository(BaseRepository):
    """Repositorio para recursos de aprendizaje."""

    TABLE = SupabaseClient.RESOURCES


class MatchHistoryRepository(BaseRepository):
    """Repositorio para el historial de matches sugeridos."""

    TABLE = SupabaseClient.MATCH_HISTORY

    def create(self, record: MatchHistory) -> dict:
        """Registra un match sugerido."""
        created = self.client.insert_one(self.TABLE, record.to_db_dict())
        logger.info(
            "Match registrado",
            user_a=record.user_a,
            user_b=record.user_b,
            score=record.compatibility_score,
        )
        return created

