# bval/annotations/core/proxy.py
"""
Annotation proxies.

A proxy is an instance of a class generated once per annotation type. The
generated class subclasses the annotation type and implements every element
as a small closure that asks the instance's :class:`AnnotationProxy` handler
for the configured value. Handlers hold an immutable snapshot of the
builder's element values, so a proxy never changes after it was created.
"""
from __future__ import annotations

import logging
import threading
import types
from typing import TYPE_CHECKING, Any, Callable, Iterator, Mapping

from bval.annotations.contracts.annotation import element_hash, element_repr
from bval.annotations.core.errors import MissingAttributeError
from bval.annotations.core.reflection import (
    annotation_type_of,
    declared_accessors,
    invoke_accessor,
)

if TYPE_CHECKING:
    from bval.annotations.core.builder import AnnotationProxyBuilder

logger = logging.getLogger(__name__)


class AnnotationProxy:
    """Routes element calls of a proxy instance to a snapshot of values."""

    def __init__(self, builder: AnnotationProxyBuilder) -> None:
        self.annotation_type: type = builder.get_type()
        self.values: Mapping[str, Any] = types.MappingProxyType(builder.elements())

    def invoke(self, name: str) -> Any:
        try:
            return self.values[name]
        except KeyError:
            raise MissingAttributeError(self.annotation_type, name) from None

    def declared_values(self) -> dict[str, Any]:
        """Configured values restricted to the elements the type declares."""
        return {
            name: self.values[name]
            for name in declared_accessors(self.annotation_type)
            if name in self.values
        }

    def __repr__(self) -> str:
        return element_repr(self.annotation_type, dict(self.values))


class ProxyInstance:
    """Base of every generated proxy class.

    Two proxies compare their whole element bags, while a proxy compared with
    any other implementation only looks at declared elements. Equality is
    therefore not transitive when a bag carries undeclared keys: proxies built
    with and without an ``extra`` key both equal the same native instance but
    not each other.
    """

    _proxy_handler: AnnotationProxy

    def _element_values(self) -> dict[str, Any]:
        return self._proxy_handler.declared_values()

    def __eq__(self, other: object) -> bool:
        handler = self._proxy_handler
        if isinstance(other, ProxyInstance):
            theirs = other._proxy_handler
            return (
                handler.annotation_type is theirs.annotation_type
                and dict(handler.values) == dict(theirs.values)
            )
        if annotation_type_of(other) is not handler.annotation_type:
            return NotImplemented
        if hasattr(other, "_element_values"):
            other_values = other._element_values()
        else:
            other_values = {
                name: invoke_accessor(other, name)
                for name in declared_accessors(handler.annotation_type)
            }
        return handler.declared_values() == other_values

    def __hash__(self) -> int:
        handler = self._proxy_handler
        return element_hash(handler.annotation_type, handler.declared_values())

    def __repr__(self) -> str:
        return repr(self._proxy_handler)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")


def _dispatch(name: str) -> Callable[[ProxyInstance], Any]:
    def element(self: ProxyInstance) -> Any:
        return self._proxy_handler.invoke(name)

    element.__name__ = name
    element.__qualname__ = name
    return element


def make_proxy_class(annotation_type: type, module: str) -> type:
    """
    Generate the proxy class for an annotation type.

    Args:
        annotation_type: The annotation type to implement
        module: Module name the generated class is attributed to

    Returns:
        A subclass of ``annotation_type`` whose elements read from the
        instance's handler
    """
    dispatch_table = {name: _dispatch(name) for name in declared_accessors(annotation_type)}

    def body(ns: dict[str, Any]) -> None:
        ns.update(dispatch_table)
        ns["__module__"] = module
        ns["__annotation_type__"] = annotation_type

    name = f"{annotation_type.__name__}Proxy"
    proxy_class = types.new_class(name, (ProxyInstance, annotation_type), exec_body=body)
    logger.debug(
        "Generated %s.%s with elements %s", module, name, sorted(dispatch_table)
    )
    return proxy_class


class ProxyClassCache:
    """
    Cache of generated proxy classes keyed by annotation type.

    A single instance is shared process-wide by default; builders accept
    their own instance for isolation. With ``enabled=False`` every request
    generates a fresh class.
    """

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self._classes: dict[type, type] = {}
        self._lock = threading.Lock()

    def get_or_create(self, annotation_type: type, factory: Callable[[], type]) -> type:
        if not self.enabled:
            return factory()
        with self._lock:
            cls = self._classes.get(annotation_type)
            if cls is None:
                cls = factory()
                self._classes[annotation_type] = cls
            return cls

    def get(self, annotation_type: type) -> type:
        try:
            return self._classes[annotation_type]
        except KeyError:
            raise KeyError(
                f"No proxy class cached for '{annotation_type.__name__}'"
            ) from None

    def has(self, annotation_type: type) -> bool:
        return annotation_type in self._classes

    def clear(self) -> None:
        with self._lock:
            self._classes.clear()

    def __contains__(self, annotation_type: type) -> bool:
        return self.has(annotation_type)

    def __len__(self) -> int:
        return len(self._classes)

    def __iter__(self) -> Iterator[type]:
        return iter(list(self._classes))
