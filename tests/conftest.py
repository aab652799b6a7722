from __future__ import annotations

import pytest

from doctag.processor import DocCommentProcessor
from doctag.registry import TagRegistry
from doctag.tags import builtin_tags


@pytest.fixture
def registry() -> TagRegistry:
    """Frozen registry holding only the built-in tags (no entry points)."""
    return TagRegistry.build(builtin_tags())


@pytest.fixture
def processor(registry: TagRegistry) -> DocCommentProcessor:
    return DocCommentProcessor(registry)
