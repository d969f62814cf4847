# bval/annotations/core/errors.py
"""
Errors raised while assembling constraint annotations from mapping config.
"""
from __future__ import annotations

from typing import Any


class MappingError(Exception):
    """Base class for all errors raised by the annotation builder."""


class ReplicationError(MappingError):
    """Raised when an existing annotation cannot be copied into a builder."""

    def __init__(self, element: str, instance: Any, reason: str = ""):
        self.element = element
        self.instance = instance
        self.reason = reason
        # object.__repr__ never calls back into the (possibly failing) elements
        msg = f"Cannot access annotation {object.__repr__(instance)} element: {element}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class InstantiationError(MappingError):
    """Raised when a proxy instance cannot be created for a builder."""

    def __init__(self, annotation_type: type, reason: str = ""):
        self.annotation_type = annotation_type
        msg = (
            "Unable to create annotation for configured constraint "
            f"'{annotation_type.__name__}'"
        )
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class MissingAttributeError(MappingError):
    """Raised when a proxy is asked for an element that was never configured."""

    def __init__(self, annotation_type: type, element: str):
        self.annotation_type = annotation_type
        self.element = element
        super().__init__(
            f"Annotation '{annotation_type.__name__}' has no value for element '{element}'"
        )


class DeclarationError(MappingError, ValueError):
    """Raised when a constraint declaration in a mapping file is malformed."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Invalid constraint declaration in {source}: {reason}")
