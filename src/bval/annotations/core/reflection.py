# bval/annotations/core/reflection.py
"""
Reflection helpers used by the builder and the proxy factory.

Python has no reflective sandbox to escape from, so "privileged" access
here means going around instance-level hooks: element lookups fall back to
the class dictionary when the instance refuses attribute access, and proxy
instances are created without running their ``__init__`` or their
``__setattr__`` guard.
"""
from __future__ import annotations

import inspect
import logging
from typing import Any

from bval.annotations.contracts.annotation import annotation_type_of, is_accessor

logger = logging.getLogger(__name__)

__all__ = [
    "annotation_type_of",
    "declared_accessors",
    "invoke_accessor",
    "new_instance",
    "resolve_loading_context",
]


def declared_accessors(annotation_type: type) -> tuple[str, ...]:
    """
    Return the element names declared by an annotation type.

    Types deriving from ``Annotation`` carry a registered ``__accessors__``
    tuple. Any other class is inspected for public methods taking only
    ``self``; ``object``'s own members are never reported.

    Args:
        annotation_type: The annotation type to enumerate

    Returns:
        Element names, in declaration order
    """
    registered = getattr(annotation_type, "__accessors__", None)
    if registered:
        return tuple(registered)

    names: list[str] = []
    for cls in reversed(annotation_type.__mro__):
        if cls is object:
            continue
        for name, member in vars(cls).items():
            if is_accessor(name, member) and name not in names:
                names.append(name)
    logger.debug(
        "Introspected %d accessor(s) on %s: %s",
        len(names), annotation_type.__name__, names,
    )
    return tuple(names)


def invoke_accessor(instance: Any, name: str) -> Any:
    """
    Call a zero-argument element method on ``instance``.

    If the instance denies attribute access (``__getattr__`` or
    ``__getattribute__`` raising ``AttributeError``), the method is looked
    up statically on the type and bound to the instance directly.

    Raises:
        AttributeError: If the element does not exist at all
        TypeError: If the element is not callable without arguments
        Exception: Whatever the element method itself raises
    """
    try:
        accessor = getattr(instance, name)
    except AttributeError:
        cls = type(instance)
        member = inspect.getattr_static(cls, name)
        logger.debug("Using class-level lookup for %s.%s", cls.__name__, name)
        accessor = member.__get__(instance, cls) if hasattr(member, "__get__") else member

    if not callable(accessor):
        raise TypeError(f"Element '{name}' of {type(instance).__name__} is not callable")
    return accessor()


def resolve_loading_context(owner: type) -> str:
    """Return the module generated proxy classes are attributed to."""
    return owner.__module__


def new_instance(proxy_class: type, handler: Any) -> Any:
    """Instantiate a generated proxy class around ``handler``.

    The class's ``__init__`` is skipped and the handler is attached with
    ``object.__setattr__`` so immutable proxies can still be initialised.
    """
    instance = object.__new__(proxy_class)
    object.__setattr__(instance, "_proxy_handler", handler)
    return instance
