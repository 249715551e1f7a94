"""
Script para ejecutar el matching de un usuario.

Busca compañeros de estudio, grupos o recursos recomendados
y los imprime como JSON.

Uso:
    python -m studymatch.scripts.run_matching --user-id <uuid>
    python -m studymatch.scripts.run_matching --user-id <uuid> --kind groups
    python -m studymatch.scripts.run_matching --user-id <uuid> --top-n 5 --min-score 0.3
"""

import argparse
import json
import logging
import sys
from typing import Optional

import structlog
from pydantic import ValidationError

from studymatch.config import Settings, get_settings
from studymatch.matching.errors import MatchingError
from studymatch.matching.service import MatchingService

logger = structlog.get_logger()


def configure_logging(level: str):
    """Configura structlog sobre el logging estándar."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(message)s",
        stream=sys.stderr,
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def run_matching(
    user_id: str,
    kind: str = "partners",
    top_n: Optional[int] = None,
    min_score: Optional[float] = None,
    service: Optional[MatchingService] = None,
) -> list[dict]:
    """
    Ejecuta un tipo de matching para un usuario.

    Args:
        user_id: UUID del usuario
        kind: partners, groups o resources
        top_n: Override del máximo de resultados
        min_score: Override del score mínimo

    Returns:
        Resultados serializables a JSON

    Raises:
        pydantic.ValidationError: Si un override no respeta los Settings
    """
    if service is None:
        overrides = {}
        if top_n is not None:
            overrides["match_top_n" if kind == "partners" else "recommendation_limit"] = top_n
        if min_score is not None:
            key = {
                "partners": "match_min_score",
                "groups": "group_min_score",
                "resources": "resource_min_score",
            }[kind]
            overrides[key] = min_score
        # Se revalida todo: un override fuera de rango falla antes de tocar la base
        settings = Settings.model_validate({**get_settings().model_dump(), **overrides})
        service = MatchingService(settings=settings)

    if kind == "partners":
        return [s.model_dump() for s in service.find_study_partners(user_id)]
    if kind == "groups":
        return [g.model_dump() for g in service.recommend_groups(user_id)]
    if kind == "resources":
        return [r.model_dump() for r in service.recommend_resources(user_id)]
    raise ValueError(f"Tipo de matching no soportado: {kind}")


def main():
    """Entry point del script."""
    parser = argparse.ArgumentParser(
        description="Busca compañeros, grupos o recursos para un usuario"
    )
    parser.add_argument("--user-id", required=True, help="UUID del usuario")
    parser.add_argument(
        "--kind",
        default="partners",
        choices=["partners", "groups", "resources"],
        help="Tipo de matching a ejecutar",
    )
    parser.add_argument("--top-n", type=int, default=None, help="Máximo de resultados")
    parser.add_argument("--min-score", type=float, default=None, help="Score mínimo (0-1)")

    args = parser.parse_args()

    configure_logging(get_settings().log_level)
    logger.info("Iniciando matching...", user_id=args.user_id, kind=args.kind)

    try:
        results = run_matching(
            user_id=args.user_id,
            kind=args.kind,
            top_n=args.top_n,
            min_score=args.min_score,
        )
        print(json.dumps(results, ensure_ascii=False, indent=2, default=str))
        logger.info("Matching completado", results=len(results))
        sys.exit(0)

    except KeyboardInterrupt:
        logger.info("Matching interrumpido por usuario")
        sys.exit(130)
    except ValidationError as e:
        logger.error("Parámetros de matching inválidos", error=str(e))
        sys.exit(1)
    except MatchingError as e:
        logger.error("Error de matching", error=str(e))
        sys.exit(1)
    except Exception as e:
        logger.error("Error fatal en matching", error=str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
