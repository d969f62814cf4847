"""Runtime construction of constraint annotations from mapping configuration."""
from bval.annotations.contracts import (
    Annotation,
    Constraint,
    ConstraintDeclaration,
    Default,
    Payload,
    annotation_type_of,
)
from bval.annotations.core.builder import MISSING, AnnotationProxyBuilder
from bval.annotations.core.errors import (
    DeclarationError,
    InstantiationError,
    MappingError,
    MissingAttributeError,
    ReplicationError,
)
from bval.annotations.core.proxy import ProxyClassCache
from bval.annotations.main import build_annotations

__all__ = [
    "Annotation", "Constraint", "ConstraintDeclaration",
    "Default", "Payload", "annotation_type_of",
    "MISSING", "AnnotationProxyBuilder",
    "MappingError", "ReplicationError", "InstantiationError",
    "MissingAttributeError", "DeclarationError",
    "ProxyClassCache",
    "build_annotations",
]
