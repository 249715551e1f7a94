"""
Módulo de base de datos.

Provee acceso a Supabase y operaciones CRUD.
"""

from studymatch.database.supabase_client import get_supabase_client, SupabaseClient
from studymatch.database.repositories import (
    UserRepository,
    StudyGroupRepository,
    ResourceRepository,
    MatchHistoryRepository,
)

__all__ = [
    "get_supabase_client",
    "SupabaseClient",
    "UserRepository",
    "StudyGroupRepository",
    "ResourceRepository",
    "MatchHistoryRepository",
]
