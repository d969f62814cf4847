# bval/annotations/contracts/annotation.py
"""
Annotation contract base.

An annotation type is a class whose elements are declared as zero-argument
abstract methods. Subclassing :class:`Annotation` records the element names
at class definition time, so builders and proxies never have to guess which
methods are elements:

    class Size(Constraint):
        @abstractmethod
        def min(self) -> int: ...

        @abstractmethod
        def max(self) -> int: ...

    Size.__accessors__  # ("message", "groups", "payload", "min", "max")

A subclass that leaves every element abstract is itself an annotation type,
even if it declares no new element (``class NotNull(Constraint): pass``).
Concrete subclasses (hand-written literals or generated proxies) inherit
``__annotation_type__`` from the annotation type they implement.
"""
from __future__ import annotations

import inspect
from abc import ABC, abstractmethod
from types import FunctionType
from typing import Any, ClassVar

from bval.annotations.contracts.markers import Payload


def is_accessor(name: str, member: Any) -> bool:
    """Return True if ``member`` looks like a zero-argument element method."""
    if name.startswith("_") or not isinstance(member, FunctionType):
        return False
    try:
        params = list(inspect.signature(member).parameters.values())
    except (TypeError, ValueError):
        return False
    return len(params) == 1 and params[0].kind in (
        inspect.Parameter.POSITIONAL_ONLY,
        inspect.Parameter.POSITIONAL_OR_KEYWORD,
    )


def annotation_type_of(instance: Any) -> type:
    """Return the annotation type an instance conforms to."""
    cls = type(instance)
    return getattr(cls, "__annotation_type__", cls)


def freeze_value(value: Any) -> Any:
    """Convert container values into hashable equivalents."""
    if isinstance(value, (list, tuple)):
        return tuple(freeze_value(v) for v in value)
    if isinstance(value, (set, frozenset)):
        return frozenset(freeze_value(v) for v in value)
    if isinstance(value, dict):
        return frozenset((k, freeze_value(v)) for k, v in value.items())
    return value


def element_hash(annotation_type: type, values: dict[str, Any]) -> int:
    parts = []
    for name, value in values.items():
        frozen = freeze_value(value)
        try:
            hash(frozen)
        except TypeError:
            # Equal values share a type, so the type name keeps hash/eq consistent.
            frozen = type(value).__name__
        parts.append((name, frozen))
    return hash((annotation_type, frozenset(parts)))


def element_repr(annotation_type: type, values: dict[str, Any]) -> str:
    body = ", ".join(f"{name}={values[name]!r}" for name in sorted(values))
    return f"@{annotation_type.__name__}({body})"


class Annotation(ABC):
    """
    Base class for annotation types.

    Instances compare by value: two annotations are equal when they share
    the same annotation type and every element returns an equal value.
    """

    __annotation_type__: ClassVar[type]
    __accessors__: ClassVar[tuple[str, ...]] = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        inherited = [name for base in cls.__bases__ for name in getattr(base, "__accessors__", ())]
        declared = [
            name
            for name, member in vars(cls).items()
            if is_accessor(name, member) and getattr(member, "__isabstractmethod__", False)
        ]
        accessors = tuple(dict.fromkeys([*inherited, *declared]))

        # Only classes leaving every element abstract are annotation types;
        # implementations inherit the type they implement.
        if accessors and all(
            getattr(getattr(cls, name, None), "__isabstractmethod__", False)
            for name in accessors
        ):
            cls.__accessors__ = accessors
            cls.__annotation_type__ = cls

    def _element_values(self) -> dict[str, Any]:
        accessors = annotation_type_of(self).__accessors__
        return {name: getattr(self, name)() for name in accessors}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Annotation):
            return NotImplemented
        if annotation_type_of(self) is not annotation_type_of(other):
            return False
        return self._element_values() == other._element_values()

    def __hash__(self) -> int:
        return element_hash(annotation_type_of(self), self._element_values())

    def __repr__(self) -> str:
        return element_repr(annotation_type_of(self), self._element_values())


class Constraint(Annotation):
    """Annotation type carrying the three reserved constraint elements."""

    @abstractmethod
    def message(self) -> str:
        ...

    @abstractmethod
    def groups(self) -> tuple[type, ...]:
        ...

    @abstractmethod
    def payload(self) -> tuple[type[Payload], ...]:
        ...
