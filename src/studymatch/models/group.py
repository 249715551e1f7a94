"""
Modelo de Grupo de estudio.
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class StudyGroup(BaseModel):
    """Grupo de estudio al que un usuario puede unirse."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: Optional[str] = Field(None, description="UUID generado por Supabase")
    title: str = Field(..., description="Título del grupo")
    description: Optional[str] = Field(None, description="Descripción libre")
    subject: str = Field(..., description="Materia principal")
    academic_level: Optional[str] = Field(None, description="Nivel académico objetivo")
    meeting_time: Optional[str] = Field(None, description="Horario de encuentro")
    group_type: Literal["Virtual", "In-Person"] = Field(
        default="Virtual", description="Virtual o In-Person"
    )
    members: list[str] = Field(default_factory=list, description="IDs de miembros")
