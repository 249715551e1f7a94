"""
Rating promedio de recursos a partir del historial de los usuarios.
"""

from collections.abc import Iterable
from numbers import Real
from typing import Any

from studymatch.matching.vectorize import get_field


def average_ratings(users: Iterable[Any]) -> dict[str, float]:
    """
    Calcula el rating promedio de cada recurso.

    Cada par (usuario, recurso) cuenta una sola vez: si un usuario
    interactuó varias veces con el mismo recurso vale la primera.

    Args:
        users: Registros de usuario con interactionHistory

    Returns:
        Dict resource_id -> promedio redondeado a 1 decimal
    """
    totals: dict[str, float] = {}
    counts: dict[str, int] = {}
    seen: set[tuple[str, str]] = set()

    for position, user in enumerate(users):
        user_key = str(get_field(user, "id") or f"#{position}")
        history = get_field(user, "interactionHistory", "interaction_history") or []

        for interaction in history:
            resource_id = get_field(interaction, "resource")
            rating = get_field(interaction, "rating")
            if not resource_id or isinstance(rating, bool) or not isinstance(rating, Real):
                continue

            key = (user_key, str(resource_id))
            if key in seen:
                continue
            seen.add(key)

            resource_key = str(resource_id)
            totals[resource_key] = totals.get(resource_key, 0.0) + float(rating)
            counts[resource_key] = counts.get(resource_key, 0) + 1

    return {
        resource_id: round(totals[resource_id] / counts[resource_id], 1)
        for resource_id in totals
    }
