#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wikirender/registry.py
"""Dialect registry.

Every renderer module under :mod:`wikirender.renderers` that defines a
``DIALECT_METADATA`` attribute is registered on first use. Third-party
packages can add dialects through the ``wikirender.dialects`` entry point
group; the entry point must resolve to a :class:`DialectMetadata` instance.

"""

from __future__ import annotations

import importlib
import importlib.metadata
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from wikirender.exceptions import FormatError

logger = logging.getLogger(__name__)

BUILTIN_RENDERER_MODULES = ("redmine", "tiddlywiki")
ENTRY_POINT_GROUP = "wikirender.dialects"


@dataclass
class DialectMetadata:
    """Metadata describing one output dialect.

    Parameters
    ----------
    dialect_name : str
        Unique dialect name used by ``--to`` and :func:`wikirender.render`
    renderer_class : type
        Renderer class (subclass of BaseRenderer)
    options_class : type
        Options class accepted by ``renderer_class``
    extensions : list[str]
        File extensions conventionally used for this markup
    description : str
        Human-readable description
    priority : int
        When two entries share a name, the higher priority wins

    """

    dialect_name: str
    renderer_class: type
    options_class: type
    extensions: List[str] = field(default_factory=list)
    description: str = ""
    priority: int = 0


class DialectRegistry:
    """Registry of output dialects.

    Examples
    --------
        >>> from wikirender.registry import registry
        >>> registry.list_formats()
        ['redmine', 'tiddlywiki']
        >>> registry.get_renderer("redmine").__name__
        'RedmineRenderer'

    """

    def __init__(self) -> None:
        """Initialize an empty, undiscovered registry."""
        self._dialects: Dict[str, List[DialectMetadata]] = {}
        self._initialized = False

    def register(self, metadata: DialectMetadata) -> None:
        """Register a dialect, keeping entries for one name sorted by priority."""
        entries = self._dialects.setdefault(metadata.dialect_name, [])
        entries.append(metadata)
        entries.sort(key=lambda m: m.priority, reverse=True)
        logger.debug(f"Registered dialect: {metadata.dialect_name} (priority={metadata.priority})")

    def unregister(self, dialect_name: str) -> bool:
        """Remove every entry for ``dialect_name``; return False if there was none."""
        if dialect_name in self._dialects:
            del self._dialects[dialect_name]
            logger.debug(f"Unregistered dialect: {dialect_name}")
            return True
        return False

    def get_format_info(self, dialect_name: str) -> Optional[DialectMetadata]:
        """Return the highest-priority metadata for ``dialect_name``, or None."""
        self.auto_discover()
        entries = self._dialects.get(dialect_name.strip().lower())
        return entries[0] if entries else None

    def _require(self, dialect_name: str) -> DialectMetadata:
        metadata = self.get_format_info(dialect_name)
        if metadata is None:
            raise FormatError(format_type=dialect_name, supported_formats=self.list_formats())
        return metadata

    def get_renderer(self, dialect_name: str) -> type:
        """Return the renderer class for ``dialect_name``.

        Raises
        ------
        FormatError
            If the dialect is not registered

        """
        return self._require(dialect_name).renderer_class

    def get_options_class(self, dialect_name: str) -> type:
        """Return the options class for ``dialect_name``.

        Raises
        ------
        FormatError
            If the dialect is not registered

        """
        return self._require(dialect_name).options_class

    def list_formats(self) -> List[str]:
        """Return the sorted names of all registered dialects."""
        self.auto_discover()
        return sorted(self._dialects)

    def auto_discover(self) -> None:
        """Register built-in dialects and entry point plugins, once."""
        if self._initialized:
            return
        self._initialized = True

        for module_name in BUILTIN_RENDERER_MODULES:
            module = importlib.import_module(f"wikirender.renderers.{module_name}")
            self.register(module.DIALECT_METADATA)

        self._discover_plugins()

    def _discover_plugins(self) -> None:
        for entry_point in importlib.metadata.entry_points(group=ENTRY_POINT_GROUP):
            dist_name = entry_point.dist.name if entry_point.dist else "unknown"
            try:
                metadata = entry_point.load()
            except (ImportError, AttributeError) as e:
                logger.warning(f"Failed to load dialect plugin '{entry_point.name}' from '{dist_name}': {e}")
                continue

            if isinstance(metadata, DialectMetadata):
                self.register(metadata)
                logger.info(f"Registered plugin dialect: {metadata.dialect_name} from package '{dist_name}'")
            else:
                logger.warning(
                    f"Entry point '{entry_point.name}' from '{dist_name}' did not return a DialectMetadata instance"
                )


# Global registry instance
registry = DialectRegistry()

__all__ = ["DialectMetadata", "DialectRegistry", "registry"]
