"""
Configuración centralizada del sistema.
Carga variables de entorno y define settings globales.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Encontrar la raíz del proyecto (donde está el .env)
# config.py -> studymatch/ -> src/ -> project root
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Configuración principal de la aplicación."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Supabase (se validan recién al crear el cliente)
    supabase_url: Optional[str] = Field(None, description="URL del proyecto Supabase")
    supabase_key: Optional[str] = Field(None, description="Anon key de Supabase")
    supabase_service_key: Optional[str] = Field(
        None, description="Service role key para operaciones admin"
    )

    # Matching de compañeros
    match_top_n: int = Field(
        3, ge=0, description="Máximo de compañeros sugeridos por consulta"
    )
    match_min_score: float = Field(
        0.2, ge=0.0, le=1.0, description="Score mínimo (inclusive) para sugerir un compañero"
    )

    # Recomendaciones
    recommendation_limit: int = Field(
        5, ge=0, description="Máximo de grupos/recursos recomendados"
    )
    group_min_score: float = Field(
        0.2, ge=0.0, le=1.0, description="Score mínimo para recomendar un grupo"
    )
    resource_min_score: float = Field(
        0.1, ge=0.0, le=1.0, description="Score mínimo para recomendar un recurso"
    )

    # Normalización de tokens: "exact" compara strings tal cual
    token_normalization: Literal["exact", "casefold"] = Field(
        "exact", description="Política de comparación de tokens"
    )

    # Logging
    log_level: str = Field("INFO", description="Nivel de logging")


@lru_cache
def get_settings() -> Settings:
    """Obtiene la configuración cacheada."""
    return Settings()

