# bval/annotations/main.py
"""
Entry point: turn the configured mapping files into annotation proxies.

``build_annotations`` is safe to call from library code; only the console
entry point ``main`` configures logging.
"""
from __future__ import annotations

import logging
import sys
from typing import Any, Iterable

from bval.annotations.contracts.mapping import ConstraintDeclaration
from bval.annotations.core.config import settings
from bval.annotations.core.errors import MappingError
from bval.annotations.core.mapping import build_annotation, load_constraint_declarations
from bval.annotations.core.proxy import ProxyClassCache

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        stream=sys.stdout,
        format="%(asctime)s %(levelname)-8s %(name)s  %(message)s",
    )


def build_annotations(
    patterns: Iterable[str] | None = None,
    *,
    cache: ProxyClassCache | None = None,
) -> list[tuple[ConstraintDeclaration, Any]]:
    """Load every constraint declaration and build its annotation.

    Args:
        patterns: Glob patterns of mapping files; defaults to
            ``settings.mapping_config_paths``
        cache: Optional proxy class cache shared by all builders

    Returns:
        ``(declaration, annotation)`` pairs in file order
    """
    patterns = list(patterns) if patterns is not None else settings.mapping_config_paths
    logger.info("Building annotations (env=%s)", settings.app_env)

    built: list[tuple[ConstraintDeclaration, Any]] = []
    for declaration in load_constraint_declarations(patterns):
        try:
            built.append((declaration, build_annotation(declaration, cache=cache)))
        except Exception:
            logger.exception("Failed to build annotation '%s'", declaration.annotation)
            raise

    logger.info("Built %d annotation(s)", len(built))
    return built


def main(argv: list[str] | None = None) -> int:
    """Console entry point: build annotations from the given (or configured) files."""
    _configure_logging(settings.log_level)
    args = sys.argv[1:] if argv is None else argv

    try:
        built = build_annotations(args or None)
    except MappingError as exc:
        logger.error("%s", exc)
        return 1

    for declaration, annotation in built:
        logger.info("%s -> %r", declaration.target or "(no target)", annotation)
    return 0


if __name__ == "__main__":
    sys.exit(main())
