"""
Cliente de Supabase.

Singleton para conexión a la base de datos y acceso a las tablas
del sistema de matching (usuarios, grupos, recursos, historial).
"""

from functools import lru_cache
from typing import Optional

import structlog
from supabase import create_client, Client

from studymatch.config import get_settings

logger = structlog.get_logger()


class SupabaseClient:
    """Wrapper del cliente de Supabase restringido a las tablas de matching."""

    USERS = "users"
    STUDY_GROUPS = "study_groups"
    RESOURCES = "resources"
    MATCH_HISTORY = "match_history"
    TABLES = (USERS, STUDY_GROUPS, RESOURCES, MATCH_HISTORY)

    def __init__(self, client: Client):
        self._client = client

    def table(self, name: str):
        """Acceso a una tabla conocida."""
        if name not in self.TABLES:
            raise ValueError(f"Tabla desconocida: {name}")
        return self._client.table(name)

    def fetch_one(self, name: str, record_id: str) -> Optional[dict]:
        """Obtiene una fila por id, o None si no existe."""
        response = self.table(name).select("*").eq("id", record_id).limit(1).execute()
        return response.data[0] if response.data else None

    def fetch_all(self, name: str, exclude_id: Optional[str] = None) -> list[dict]:
        """
        Obtiene todas las filas de una tabla.

        Args:
            name: Nombre de la tabla
            exclude_id: Id a excluir (ej: el usuario que pide candidatos)
        """
        query = self.table(name).select("*")
        if exclude_id is not None:
            query = query.neq("id", exclude_id)
        return query.execute().data or []

    def insert_one(self, name: str, data: dict) -> dict:
        """Inserta una fila y devuelve la fila creada ({} si no hubo respuesta)."""
        response = self.table(name).insert(data).execute()
        return response.data[0] if response.data else {}


@lru_cache
def get_supabase_client() -> SupabaseClient:
    """
    Obtiene el cliente de Supabase (singleton cacheado).

    Raises:
        ValueError: Si las credenciales no están configuradas
    """
    settings = get_settings()

    if not settings.supabase_url or not settings.supabase_key:
        raise ValueError(
            "Faltan SUPABASE_URL o SUPABASE_KEY para conectar el matching a la base."
        )

    # El historial de matches se escribe con service key si está disponible
    key = settings.supabase_service_key or settings.supabase_key

    client = create_client(settings.supabase_url, key)
    logger.info("Conectado a Supabase", url=settings.supabase_url)

    return SupabaseClient(client)
