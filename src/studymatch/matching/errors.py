"""
Errores del motor de matching.

Todos se levantan antes de calcular cualquier score: el ranking
completo funciona o falla entero.
"""


class MatchingError(Exception):
    """Error base del motor de matching."""


class InvalidProfileError(MatchingError, ValueError):
    """Un perfil tiene un campo con forma inválida."""

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"Campo '{field}' inválido: {reason}")


class InvalidRankingParameterError(MatchingError, ValueError):
    """Parámetros de ranking (top_n, min_score, candidatos) inválidos."""


class ProfileNotFoundError(MatchingError, LookupError):
    """El perfil sujeto del matching no existe."""

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"Usuario no encontrado: {user_id}")
