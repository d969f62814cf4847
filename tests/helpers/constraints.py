# tests/helpers/constraints.py
"""Annotation types and hand-written implementations shared by the tests."""
from __future__ import annotations

from abc import abstractmethod
from typing import Any

from bval.annotations.contracts import Constraint, Payload


class Size(Constraint):
    @abstractmethod
    def min(self) -> int: ...

    @abstractmethod
    def max(self) -> int: ...


class NotNull(Constraint):
    pass


class Severity(Payload):
    pass


class Strict:
    """Group marker."""


class SizeLiteral(Size):
    """Hand-written Size implementation."""

    def __init__(
        self,
        min: int = 0,
        max: int = 2**31 - 1,
        message: str = "size must be between {min} and {max}",
        groups: tuple[type, ...] = (),
        payload: tuple[type, ...] = (),
    ) -> None:
        self._values = dict(min=min, max=max, message=message, groups=groups, payload=payload)

    def min(self) -> int:
        return self._values["min"]

    def max(self) -> int:
        return self._values["max"]

    def message(self) -> str:
        return self._values["message"]

    def groups(self) -> tuple[type, ...]:
        return self._values["groups"]

    def payload(self) -> tuple[type, ...]:
        return self._values["payload"]


class BrokenSize(SizeLiteral):
    """Size whose ``max`` element fails."""

    def max(self) -> int:
        raise RuntimeError("boom")


class ArgumentSize(SizeLiteral):
    """Size whose ``max`` element wrongly requires an argument."""

    def max(self, scale: int) -> int:  # type: ignore[override]
        return 10 * scale


class GuardedSize(SizeLiteral):
    """Size that hides its elements from instance attribute access."""

    def __getattribute__(self, name: str) -> Any:
        if name in Size.__accessors__:
            raise AttributeError(name)
        return super().__getattribute__(name)


class Range:
    """Annotation type that does not derive from ``Annotation``."""

    def __init__(self, low: int, high: int) -> None:
        self._low = low
        self._high = high

    def low(self) -> int:
        return self._low

    def high(self) -> int:
        return self._high

    def contains(self, value: int) -> bool:
        return self._low <= value <= self._high


class Pattern(Constraint):
    """Annotation type with an abstract method that is not an element."""

    @abstractmethod
    def regexp(self) -> str: ...

    @abstractmethod
    def matches(self, value: str) -> bool: ...
