# bval/annotations/core/mapping.py
"""
Constraint declarations from YAML mapping files.

Each declaration names an annotation type and the element values to
configure on it; :func:`build_annotation` turns it into a proxy through
:class:`AnnotationProxyBuilder`. Element values are handed over exactly as
YAML produced them.
"""
from __future__ import annotations

import logging
from typing import Any, Iterable

from pydantic import ValidationError

from bval.annotations.contracts.mapping import ConstraintDeclaration
from bval.annotations.core.builder import AnnotationProxyBuilder
from bval.annotations.core.errors import DeclarationError
from bval.annotations.core.loader import import_attr, load_yaml_files, substitute_env_vars
from bval.annotations.core.proxy import ProxyClassCache

logger = logging.getLogger(__name__)


def load_constraint_declarations(patterns: Iterable[str]) -> list[ConstraintDeclaration]:
    """Load constraint declarations from YAML.

    Expected structure::

        constraints:
          - annotation: myapp.constraints:Size
            target: myapp.models:Customer.name
            message: "must be sized"
            groups: ["bval.annotations.contracts:Default"]
            elements:
              min: 1
              max: "${MAX_NAME_LENGTH:-10}"

    Raises:
        DeclarationError: If a file is not a mapping, an entry does not match
            the declaration schema, or references an unset variable
    """
    declarations: list[ConstraintDeclaration] = []

    for path, data in load_yaml_files(patterns):
        if not isinstance(data, dict):
            raise DeclarationError(str(path), "expected a mapping with a 'constraints' key")
        entries = data.get("constraints") or []
        if not isinstance(entries, list):
            raise DeclarationError(str(path), "'constraints' must be a list")

        for index, raw in enumerate(entries):
            source = f"{path}[{index}]"
            try:
                declarations.append(
                    ConstraintDeclaration.model_validate(substitute_env_vars(raw))
                )
            except (ValidationError, ValueError) as exc:
                # unset ${VAR} without default, or schema mismatch
                raise DeclarationError(source, str(exc)) from exc

    logger.info("Loaded %d constraint declaration(s)", len(declarations))
    return declarations


def _resolve_markers(paths: list[str]) -> tuple[Any, ...]:
    return tuple(import_attr(p) for p in paths)


def build_annotation(
    declaration: ConstraintDeclaration,
    *,
    cache: ProxyClassCache | None = None,
) -> Any:
    """
    Create the annotation described by a declaration.

    ``groups`` and ``payload`` are always set (empty when not declared);
    ``message`` only when the declaration carries one.

    Raises:
        DeclarationError: If an import path cannot be resolved
        InstantiationError: If the proxy cannot be created
    """
    try:
        annotation_type = import_attr(declaration.annotation)
        groups = _resolve_markers(declaration.groups)
        payload = _resolve_markers(declaration.payload)
    except (ValueError, ImportError, AttributeError) as exc:
        raise DeclarationError(declaration.annotation, str(exc)) from exc

    builder: AnnotationProxyBuilder[Any] = AnnotationProxyBuilder(
        annotation_type, declaration.elements, cache=cache
    )
    if declaration.message is not None:
        builder.set_message(declaration.message)
    builder.set_groups(groups)
    builder.set_payload(payload)

    logger.debug(
        "Building %s for target %s", annotation_type.__name__, declaration.target
    )
    return builder.create_annotation()
