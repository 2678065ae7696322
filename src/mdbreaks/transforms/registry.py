#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdbreaks/transforms/registry.py
"""Registry of named tree transforms.

The built-in ``breaks`` transform is registered on first access, followed by
any `TransformMetadata` published under the ``mdbreaks.transforms`` entry point
group. Named transforms (``mdbreaks --transform NAME``, ``Pipeline(["NAME"])``)
are looked up here.
"""

from __future__ import annotations

import importlib.metadata
import logging
from typing import Any, Optional

from mdbreaks.transforms.metadata import TransformMetadata, Transformer

logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "mdbreaks.transforms"


class TransformRegistry:
    """Process-wide registry of transforms by name.

    Every instantiation returns the same object; use the module-level
    ``transform_registry``.
    """

    _instance: Optional[TransformRegistry] = None
    _transforms: dict[str, TransformMetadata]
    _initialized: bool

    def __new__(cls) -> TransformRegistry:
        """Create or return singleton instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._transforms = {}
            cls._instance._initialized = False
        return cls._instance

    def _ensure_initialized(self) -> None:
        if not self._initialized:
            self._initialized = True
            self._register_builtins()
            self.discover_plugins()

    def _register_builtins(self) -> None:
        from mdbreaks.transforms._builtin_metadata import BUILTIN_TRANSFORMS

        for metadata in BUILTIN_TRANSFORMS:
            if metadata.name not in self._transforms:
                self.register(metadata)

    def register(self, metadata: TransformMetadata) -> None:
        """Register a transform, replacing (with a warning) any transform of the same name."""
        if metadata.name in self._transforms:
            logger.warning(f"Transform '{metadata.name}' already registered, overwriting")

        self._transforms[metadata.name] = metadata
        logger.debug(f"Registered transform: {metadata.name}")

    def unregister(self, name: str) -> bool:
        """Remove a transform; returns False if it was not registered."""
        if name in self._transforms:
            del self._transforms[name]
            logger.debug(f"Unregistered transform: {name}")
            return True
        return False

    def get_metadata(self, name: str) -> TransformMetadata:
        """Get metadata for a transform.

        Raises
        ------
        KeyError
            If transform is not registered

        """
        self._ensure_initialized()

        if name not in self._transforms:
            raise KeyError(f"Transform '{name}' not registered")

        return self._transforms[name]

    def get_transformer(self, name: str, **kwargs: Any) -> Optional[Transformer]:
        """Create a transformer by name, passing ``kwargs`` to its options class.

        Raises
        ------
        KeyError
            If transform is not registered

        """
        return self.get_metadata(name).create_transformer(**kwargs)

    def has_transform(self, name: str) -> bool:
        """Check if a transform is registered."""
        self._ensure_initialized()
        return name in self._transforms

    def order_by_priority(self, names: list[str]) -> list[str]:
        """Sort transform names by priority, keeping the given order among equal priorities.

        Raises
        ------
        KeyError
            If a name is not registered

        """
        return sorted(names, key=lambda name: self.get_metadata(name).priority)

    def list_transforms(self, tags: Optional[list[str]] = None) -> list[str]:
        """List registered transform names by priority, then name.

        Parameters
        ----------
        tags : list[str], optional
            Only return transforms with at least one of these tags

        """
        self._ensure_initialized()

        names = [
            name
            for name, metadata in self._transforms.items()
            if tags is None or any(t in metadata.tags for t in tags)
        ]
        return self.order_by_priority(sorted(names))

    def discover_plugins(self) -> int:
        """Register transforms from the ``mdbreaks.transforms`` entry points.

        Returns
        -------
        int
            Number of transforms discovered and registered

        """
        discovered_count = 0

        try:
            transform_eps = importlib.metadata.entry_points().select(group=ENTRY_POINT_GROUP)

            for ep in transform_eps:
                try:
                    metadata = ep.load()

                    if not isinstance(metadata, TransformMetadata):
                        logger.warning(f"Entry point '{ep.name}' did not return TransformMetadata, skipping")
                        continue

                    self.register(metadata)
                    discovered_count += 1

                except Exception as e:
                    logger.warning(f"Failed to load transform entry point '{ep.name}': {e}")

        except Exception as e:
            logger.warning(f"Failed to discover transform plugins: {e}")

        logger.debug(f"Discovered {discovered_count} transform(s) from entry points")
        return discovered_count

    def clear(self) -> None:
        """Forget every transform; built-ins are registered again on next access."""
        self._transforms.clear()
        self._initialized = False
        logger.debug("Cleared transform registry")


transform_registry = TransformRegistry()

__all__ = [
    "ENTRY_POINT_GROUP",
    "TransformRegistry",
    "transform_registry",
]
