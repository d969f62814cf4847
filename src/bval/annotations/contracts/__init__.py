"""Public contracts for annotation types and constraint declarations."""
from bval.annotations.contracts.markers import Default, Payload
from bval.annotations.contracts.annotation import (
    Annotation,
    Constraint,
    annotation_type_of,
)
from bval.annotations.contracts.mapping import ConstraintDeclaration

__all__ = [
    "Default", "Payload",
    "Annotation", "Constraint", "annotation_type_of",
    "ConstraintDeclaration",
]
