"""
Similitud de coseno binaria entre listas de tokens.

Cada token distinto es una dimensión con peso 0/1 (presencia), así que
el producto punto es el tamaño de la intersección y cada norma es la
raíz de la cantidad de tokens distintos (coeficiente de Otsuka-Ochiai).
"""

import math
from collections.abc import Iterable
from enum import Enum
from typing import Union


class TokenNormalization(str, Enum):
    """Política de comparación de tokens."""

    # Igualdad exacta: "Math" y "math" son tokens distintos
    EXACT = "exact"
    # Opt-in: strip + casefold, descarta tokens que quedan vacíos
    CASEFOLD = "casefold"


def normalize_tokens(
    tokens: Iterable[str],
    policy: Union[TokenNormalization, str] = TokenNormalization.EXACT,
) -> list[str]:
    """Aplica la política de normalización a una lista de tokens."""
    # Acepta también el valor como string ("exact", "casefold")
    policy = TokenNormalization(policy)
    if policy == TokenNormalization.EXACT:
        return list(tokens)

    normalized = []
    for token in tokens:
        folded = token.strip().casefold()
        if folded:
            normalized.append(folded)
    return normalized


def cosine_similarity(
    tokens_a: Iterable[str],
    tokens_b: Iterable[str],
    normalization: Union[TokenNormalization, str] = TokenNormalization.EXACT,
) -> float:
    """
    Calcula la similitud de coseno entre dos listas de tokens.

    Los duplicados no suman peso. Si alguno de los lados no aporta
    tokens el resultado es 0.0 (no hay división por cero).

    Args:
        tokens_a: Tokens del primer perfil
        tokens_b: Tokens del segundo perfil
        normalization: Política de comparación (exacta por defecto)

    Returns:
        Similitud de coseno (0.0 a 1.0)
    """
    set_a = set(normalize_tokens(tokens_a, normalization))
    set_b = set(normalize_tokens(tokens_b, normalization))

    if not set_a or not set_b:
        return 0.0

    dot_product = len(set_a & set_b)
    # sqrt(|A| * |B|) es exacto cuando |A| == |B|, así conjuntos iguales dan 1.0
    magnitude = math.sqrt(len(set_a) * len(set_b))

    return min(1.0, dot_product / magnitude)
