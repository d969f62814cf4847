# bval/annotations/core/builder.py
"""
Annotation proxy builder.

Holds the element values of one constraint while a mapping source is being
read, then turns them into an object implementing the annotation type.
"""
from __future__ import annotations

import logging
from typing import Any, Generic, Iterable, Mapping, TypeVar

from bval.annotations.core.config import settings
from bval.annotations.core.errors import (
    InstantiationError,
    MappingError,
    ReplicationError,
)
from bval.annotations.core.proxy import AnnotationProxy, ProxyClassCache, make_proxy_class
from bval.annotations.core.reflection import (
    annotation_type_of,
    declared_accessors,
    invoke_accessor,
    new_instance,
    resolve_loading_context,
)

logger = logging.getLogger(__name__)

A = TypeVar("A")

ANNOTATION_MESSAGE = "message"
ANNOTATION_GROUPS = "groups"
ANNOTATION_PAYLOAD = "payload"


class _Missing:
    """Sentinel type for element values that were never set."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()

proxy_classes = ProxyClassCache(enabled=settings.proxy_class_cache)


class AnnotationProxyBuilder(Generic[A]):
    """
    Collects element values for an annotation type and creates proxies.

    Example:
        builder = AnnotationProxyBuilder(Size)
        builder.put_value("min", 1)
        builder.put_value("max", 10)
        builder.set_message("must be sized")
        builder.set_groups(())
        builder.set_payload(())

        size = builder.create_annotation()
        size.max()  # 10
    """

    def __init__(
        self,
        annotation_type: type[A],
        elements: Mapping[str, Any] | None = None,
        *,
        cache: ProxyClassCache | None = None,
    ) -> None:
        self._type = annotation_type
        self._elements: dict[str, Any] = dict(elements) if elements else {}
        self._cache = cache if cache is not None else proxy_classes

    @classmethod
    def replicate(
        cls,
        annotation: A,
        *,
        cache: ProxyClassCache | None = None,
    ) -> AnnotationProxyBuilder[A]:
        """
        Create a builder seeded with the element values of ``annotation``.

        Every element declared by the annotation's type is called once and
        its result stored under the element name.

        Args:
            annotation: Existing annotation instance (native or proxy)
            cache: Optional proxy class cache for the new builder

        Returns:
            A builder bound to the annotation's type

        Raises:
            ReplicationError: If an element cannot be read
        """
        builder = cls(annotation_type_of(annotation), cache=cache)
        for name in declared_accessors(builder.get_type()):
            try:
                value = invoke_accessor(annotation, name)
            except AttributeError as exc:
                raise ReplicationError(name, annotation, "element is not accessible") from exc
            except TypeError as exc:
                raise ReplicationError(name, annotation, f"invalid element call: {exc}") from exc
            except Exception as exc:
                raise ReplicationError(name, annotation, f"element raised {type(exc).__name__}") from exc
            builder.put_value(name, value)

        logger.debug(
            "Replicated %s with %d element(s)", builder.get_type().__name__, builder.size()
        )
        return builder

    def put_value(self, name: str, value: Any) -> None:
        self._elements[name] = value

    def get_value(self, name: str) -> Any:
        """Return the value stored for ``name``, or ``MISSING``."""
        return self._elements.get(name, MISSING)

    def contains(self, name: str) -> bool:
        return name in self._elements

    def size(self) -> int:
        return len(self._elements)

    def get_type(self) -> type[A]:
        return self._type

    def elements(self) -> dict[str, Any]:
        """Shallow copy of the current element values."""
        return dict(self._elements)

    def set_message(self, message: str) -> None:
        self.put_value(ANNOTATION_MESSAGE, message)

    def set_groups(self, groups: Iterable[type]) -> None:
        self.put_value(ANNOTATION_GROUPS, groups)

    def set_payload(self, payload: Iterable[type]) -> None:
        self.put_value(ANNOTATION_PAYLOAD, payload)

    def create_annotation(self) -> A:
        """
        Create an immutable object implementing the annotation type.

        The result reflects the element values at call time; later calls to
        ``put_value`` do not affect it.

        Raises:
            InstantiationError: If the proxy cannot be created
        """
        module = resolve_loading_context(type(self))
        try:
            proxy_class = self._cache.get_or_create(
                self._type, lambda: make_proxy_class(self._type, module)
            )
            annotation = new_instance(proxy_class, AnnotationProxy(self))
        except MappingError:
            raise
        except Exception as exc:
            raise InstantiationError(self._type, str(exc)) from exc

        logger.debug("Created %r", annotation)
        return annotation

    def __contains__(self, name: str) -> bool:
        return self.contains(name)

    def __len__(self) -> int:
        return self.size()

    def __repr__(self) -> str:
        return f"AnnotationProxyBuilder({self._type.__name__}, {self._elements!r})"
