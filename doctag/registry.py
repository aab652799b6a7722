"""Validated, write-once lookup table of tag definitions."""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Optional

from .config import TagConfig
from .errors import DuplicateField, DuplicatePattern, FrozenRegistry
from .logging import get_logger
from .tags import discover_tags
from .tags.base import TagDefinition

logger = get_logger("registry")


class TagRegistry:
    """Maps `@pattern` text to its definition.

    Definitions are registered at startup; ``freeze()`` validates the table
    and makes it read-only so it can be shared between threads.
    """

    def __init__(self) -> None:
        self._by_pattern: Dict[str, TagDefinition] = {}
        self._folders: Dict[str, TagDefinition] = {}
        self._frozen = False

    @classmethod
    def build(cls, definitions: Iterable[TagDefinition]) -> "TagRegistry":
        registry = cls()
        for definition in definitions:
            registry.register(definition)
        registry.freeze()
        return registry

    @property
    def frozen(self) -> bool:
        return self._frozen

    def register(self, definition: TagDefinition) -> None:
        if self._frozen:
            raise FrozenRegistry(f"Cannot register @{definition.pattern}: registry is frozen")
        existing = self._by_pattern.get(definition.pattern)
        if existing is not None:
            raise DuplicatePattern(
                f"Pattern '@{definition.pattern}' is registered by both "
                f"{type(existing).__name__} and {type(definition).__name__}"
            )
        self._by_pattern[definition.pattern] = definition
        self._folders.setdefault(definition.key, definition)

    def validate(self) -> None:
        """Raise DuplicateField when two keys declare the same metadata field."""
        owners: Dict[str, str] = {}
        for definition in self._by_pattern.values():
            for field_name in definition.fields:
                owner = owners.setdefault(field_name, definition.key)
                if owner != definition.key:
                    raise DuplicateField(
                        f"Field '{field_name}' is populated by both key '{owner}' "
                        f"and key '{definition.key}' (@{definition.pattern})"
                    )

    def freeze(self) -> None:
        if self._frozen:
            return
        self.validate()
        self._by_pattern = MappingProxyType(dict(self._by_pattern))  # type: ignore[assignment]
        self._folders = MappingProxyType(dict(self._folders))  # type: ignore[assignment]
        self._frozen = True
        logger.debug("Tag registry frozen with %d patterns", len(self._by_pattern))

    def lookup(self, pattern: str) -> Optional[TagDefinition]:
        return self._by_pattern.get(pattern)

    def folder(self, key: str) -> TagDefinition:
        """Return the definition whose ``process_doc`` folds ``key``."""
        return self._folders[key]

    def keys(self) -> List[str]:
        return list(self._folders)

    def definitions(self) -> List[TagDefinition]:
        return list(self._by_pattern.values())

    def __contains__(self, pattern: object) -> bool:
        return pattern in self._by_pattern

    def __iter__(self) -> Iterator[TagDefinition]:
        return iter(self.definitions())

    def __len__(self) -> int:
        return len(self._by_pattern)


def build_registry(config: TagConfig | None = None) -> TagRegistry:
    """Discover tag definitions per ``config`` and return a frozen registry."""
    config = config or TagConfig()
    definitions = discover_tags(config.enabled, config.disabled, plugins=config.plugins)
    return TagRegistry.build(definitions)


__all__ = ["TagRegistry", "build_registry"]
