"""
Modelo de Usuario (perfil de estudio)

Define los campos del perfil que consume el motor de matching
(materias, horarios, nivel académico, estilo de aprendizaje) junto
con el payload opaco que se devuelve al caller.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ResourceInteraction(BaseModel):
    """Interacción de un usuario con un recurso (vista + rating)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    resource: str = Field(..., description="FK al Resource")
    rating: Optional[float] = Field(None, ge=0, le=5, description="Rating de 0 a 5")
    viewed_at: Optional[datetime] = Field(None, description="Fecha de la interacción")


class StudyProfile(BaseModel):
    """
    Perfil de estudio de un usuario.

    Solo subjects, preferred_study_times, academic_level y learning_style
    participan del matching. El resto es payload para el caller.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    # Identificadores
    id: Optional[str] = Field(None, description="UUID generado por Supabase")
    name: str = Field(..., description="Nombre visible")
    email: str = Field(..., description="Email único")
    avatar: Optional[str] = Field(None, description="URL del avatar")

    # Campos de matching
    academic_level: Optional[str] = Field(None, description="Ej: Undergrad, Masters")
    subjects: list[str] = Field(default_factory=list, description="Materias de interés")
    study_goals: Optional[str] = Field(None, description="Objetivos libres")
    preferred_study_times: list[str] = Field(
        default_factory=list, description="Horarios preferidos (texto libre)"
    )
    learning_style: Optional[str] = Field(None, description="Ej: Visual, Auditory")

    # Relaciones
    joined_groups: list[str] = Field(default_factory=list, description="IDs de grupos")
    interaction_history: list[ResourceInteraction] = Field(
        default_factory=list, description="Historial de recursos vistos"
    )
