"""
Modelos de datos del sistema.

- Perfiles: StudyProfile (entrada principal del matching)
- Candidatos: StudyGroup, Resource
- Salida: MatchHistory, PartnerSuggestion

El servicio de matching valida cada fila leída de Supabase contra
StudyProfile, StudyGroup o Resource antes de rankear.
"""

from studymatch.models.user import StudyProfile, ResourceInteraction
from studymatch.models.group import StudyGroup
from studymatch.models.resource import Resource
from studymatch.models.match import MatchHistory, PartnerSuggestion

__all__ = [
    # Perfiles
    "StudyProfile",
    "ResourceInteraction",
    # Candidatos
    "StudyGroup",
    "Resource",
    # Salida
    "MatchHistory",
    "PartnerSuggestion",
]
