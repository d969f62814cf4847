# tests/conftest.py
from __future__ import annotations

import pytest

from bval.annotations.core.builder import AnnotationProxyBuilder
from bval.annotations.core.proxy import ProxyClassCache
from tests.helpers.constraints import Size


@pytest.fixture
def cache() -> ProxyClassCache:
    return ProxyClassCache()


@pytest.fixture
def size_builder(cache: ProxyClassCache) -> AnnotationProxyBuilder[Size]:
    builder = AnnotationProxyBuilder(Size, cache=cache)
    builder.put_value("min", 1)
    builder.put_value("max", 10)
    builder.set_message("must be sized")
    builder.set_groups([])
    builder.set_payload([])
    return builder
