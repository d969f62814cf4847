# bval/annotations/contracts/mapping.py
"""
Constraint declaration contracts.

A constraint declaration is one entry of a YAML mapping file: an import
path to an annotation type plus the element values configured for it.
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ConstraintDeclaration(BaseModel):
    """A single constraint declared in a mapping file.

    Attributes:
        annotation: Import path of the annotation type (``module:Class``).
        target: Free-form description of what the constraint applies to.
            Carried through untouched for the validation engine.
        message: Optional ``message`` element.
        groups: Import paths of group markers.
        payload: Import paths of payload markers.
        elements: Remaining element values, passed to the builder as-is.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    annotation: str
    target: str | None = None
    message: str | None = None
    groups: list[str] = Field(default_factory=list)
    payload: list[str] = Field(default_factory=list)
    elements: dict[str, Any] = Field(default_factory=dict)
