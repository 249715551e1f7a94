"""
Modelos de salida del matching.

MatchHistory es el registro persistido de cada sugerencia;
PartnerSuggestion es la forma en que se devuelve al cliente.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field


class MatchHistory(BaseModel):
    """Registro histórico de un match sugerido entre dos usuarios."""

    id: Optional[str] = Field(None, description="UUID generado por Supabase")
    user_a: str = Field(..., description="FK al usuario que pidió el matching")
    user_b: str = Field(..., description="FK al usuario sugerido")
    compatibility_score: float = Field(..., ge=0, le=1, description="Score de 0.0 a 1.0")
    matched_subjects: list[str] = Field(
        default_factory=list, description="Materias en común"
    )
    matched_at: str = Field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat(),
        description="Fecha del match",
    )
    feedback: Optional[str] = Field(None, description="Feedback libre del usuario")

    def to_db_dict(self) -> dict:
        """Convierte a diccionario para inserción en Supabase."""
        return self.model_dump(exclude={"id"})


class PartnerSuggestion(BaseModel):
    """Compañero sugerido tal como se devuelve al cliente."""

    user_id: str
    name: Optional[str] = None
    email: Optional[str] = None
    avatar: Optional[str] = None
    score: float = Field(..., ge=0, le=1, description="Score redondeado a 2 decimales")
