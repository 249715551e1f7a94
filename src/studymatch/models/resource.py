"""
Modelo de Recurso de aprendizaje (video, artículo o quiz).
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Resource(BaseModel):
    """Recurso recomendable según los tags de materia."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: Optional[str] = Field(None, description="UUID generado por Supabase")
    title: str = Field(..., description="Título del recurso")
    content_url: str = Field(..., description="URL del contenido")
    type: Literal["Video", "Article", "Quiz"] = Field(..., description="Tipo de recurso")
    subject_tags: list[str] = Field(default_factory=list, description="Tags de materia")
    difficulty_level: Optional[str] = Field(None, description="Dificultad declarada")
    description: Optional[str] = Field(None, description="Descripción libre")
    average_rating: Optional[float] = Field(
        None, description="Rating promedio calculado desde las interacciones"
    )
