"""
Vectorización de perfiles.

Cada función convierte un registro (dict de Supabase o modelo pydantic)
en una lista plana de tokens string. No se normaliza nada: los tokens
se comparan por igualdad exacta en similarity.py.

Proyecciones disponibles:
- Personas: subjects + preferredStudyTimes + academicLevel + learningStyle
- Grupos: [subject, academicLevel] contra subjects + academicLevel del usuario
- Recursos: subjectTags contra subjects + recursos vistos por el usuario
"""

from collections.abc import Iterable, Mapping
from typing import Any, Callable

from studymatch.matching.errors import InvalidProfileError

Vectorizer = Callable[[Any], list[str]]

_MISSING = object()


def get_field(record: Any, *names: str) -> Any:
    """
    Lee un campo de un registro probando varios nombres en orden.

    Acepta mappings (filas de Supabase, documentos camelCase) u objetos
    con atributos (modelos pydantic). Devuelve None si no existe.
    """
    if record is None:
        raise InvalidProfileError(names[0], "el registro es None")

    if isinstance(record, Mapping):
        for name in names:
            if name in record:
                return record[name]
        return None

    for name in names:
        value = getattr(record, name, _MISSING)
        if value is not _MISSING:
            return value
    return None


def _label_list(record: Any, *names: str) -> list[str]:
    """Campo multi-valor: None o vacío no aporta tokens."""
    value = get_field(record, *names)
    if value is None:
        return []

    field = names[0]
    if isinstance(value, (str, bytes)) or isinstance(value, Mapping):
        raise InvalidProfileError(field, f"se esperaba una lista, llegó {type(value).__name__}")
    if not isinstance(value, Iterable):
        raise InvalidProfileError(field, f"{type(value).__name__} no es iterable")

    labels = list(value)
    for label in labels:
        if not isinstance(label, str):
            raise InvalidProfileError(field, f"contiene un valor no string: {label!r}")
    return labels


def _single_label(record: Any, *names: str) -> list[str]:
    """Campo opcional de un solo valor: se agrega solo si no está vacío."""
    value = get_field(record, *names)
    if value is None or value == "":
        return []
    if not isinstance(value, str):
        raise InvalidProfileError(names[0], f"se esperaba string, llegó {type(value).__name__}")
    return [value]


def profile_to_vector(profile: Any) -> list[str]:
    """
    Vector de features de una persona.

    Orden fijo: subjects, preferredStudyTimes, academicLevel, learningStyle.
    """
    return [
        *_label_list(profile, "subjects"),
        *_label_list(profile, "preferredStudyTimes", "preferred_study_times"),
        *_single_label(profile, "academicLevel", "academic_level"),
        *_single_label(profile, "learningStyle", "learning_style"),
    ]


def group_subject_vector(user: Any) -> list[str]:
    """Lado usuario de la recomendación de grupos."""
    return [
        *_label_list(user, "subjects"),
        *_single_label(user, "academicLevel", "academic_level"),
    ]


def group_to_vector(group: Any) -> list[str]:
    """Un grupo se describe por su materia y su nivel académico."""
    return [
        *_single_label(group, "subject"),
        *_single_label(group, "academicLevel", "academic_level"),
    ]


def resource_interest_vector(user: Any) -> list[str]:
    """
    Lado usuario de la recomendación de recursos.

    Además de las materias incluye el ID de cada recurso del historial
    de interacciones.
    """
    history = get_field(user, "interactionHistory", "interaction_history")
    if history is None:
        history = []
    elif isinstance(history, (str, bytes, Mapping)) or not isinstance(history, Iterable):
        raise InvalidProfileError(
            "interactionHistory", f"se esperaba una lista, llegó {type(history).__name__}"
        )

    viewed = []
    for interaction in history:
        resource_id = get_field(interaction, "resource")
        if resource_id is None or resource_id == "":
            raise InvalidProfileError("interactionHistory", "interacción sin recurso")
        viewed.append(str(resource_id))

    return [*_label_list(user, "subjects"), *viewed]


def resource_to_vector(resource: Any) -> list[str]:
    """Un recurso se describe solo por sus tags de materia."""
    return _label_list(resource, "subjectTags", "subject_tags")
