"""Plugin registry for gridfield.

Maps string keys to implementation classes.  gridfield uses one
registry, ``gridfield.type_options.type_option_registry``, keyed by
``FieldType`` tag values, so the table engine can find the type option
for a field from its declared type.

Example
-------
Register a type option with the decorator::

    from gridfield.type_options import type_option_registry

    @type_option_registry.register("rating")
    class RatingTypeOption(TypeOption[int, RatingFilter]):
        ...

Third-party packages can declare type options as entry-points in their
own ``pyproject.toml``:

.. code-block:: toml

    [project.entry-points."gridfield.type_options"]
    rating = "my_package.rating:RatingTypeOption"

and they are picked up with::

    type_option_registry.load_entrypoints("gridfield.type_options")
"""
from __future__ import annotations

import importlib.metadata
import logging
from collections.abc import Callable
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PluginNotFoundError(KeyError):
    """Raised when no plugin is registered under the requested key."""

    def __init__(self, name: str, registry_name: str) -> None:
        self.plugin_name = name
        self.registry_name = registry_name
        super().__init__(
            f"Nothing is registered as {name!r} in the {registry_name!r} registry. "
            "Check that the providing package is installed and imported."
        )


class PluginAlreadyRegisteredError(ValueError):
    """Raised when a key is registered twice."""

    def __init__(self, name: str, registry_name: str) -> None:
        self.plugin_name = name
        self.registry_name = registry_name
        super().__init__(
            f"{name!r} is already registered in the {registry_name!r} registry. "
            "Deregister the existing entry first."
        )


class PluginRegistry(Generic[T]):
    """Registry of implementation classes sharing a common base class.

    Parameters
    ----------
    base_class:
        Every registered class must subclass this.
    name:
        Human-readable registry name, used in error and log messages.
    """

    def __init__(self, base_class: type[T], name: str) -> None:
        self._base_class = base_class
        self._name = name
        self._plugins: dict[str, type[T]] = {}

    @property
    def name(self) -> str:
        return self._name

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(self, name: str) -> Callable[[type[T]], type[T]]:
        """Return a class decorator registering the class under ``name``.

        The decorated class is returned unchanged.

        Raises
        ------
        PluginAlreadyRegisteredError
            If ``name`` is taken.
        TypeError
            If the class does not subclass the registry's base class.
        """

        def decorator(cls: type[T]) -> type[T]:
            self.register_class(name, cls)
            return cls

        return decorator

    def register_class(self, name: str, cls: type[T]) -> None:
        """Register ``cls`` under ``name`` without decorator syntax."""
        if name in self._plugins:
            raise PluginAlreadyRegisteredError(name, self._name)
        if not (isinstance(cls, type) and issubclass(cls, self._base_class)):
            raise TypeError(
                f"Cannot register {cls!r} as {name!r}: "
                f"it must be a subclass of {self._base_class.__name__}."
            )
        self._plugins[name] = cls
        logger.debug("Registered %r -> %s in %r", name, cls.__qualname__, self._name)

    def deregister(self, name: str) -> None:
        """Remove ``name`` from the registry.

        Raises
        ------
        PluginNotFoundError
            If ``name`` is not registered.
        """
        if name not in self._plugins:
            raise PluginNotFoundError(name, self._name)
        del self._plugins[name]
        logger.debug("Deregistered %r from %r", name, self._name)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, name: str) -> type[T]:
        """Return the class registered under ``name``.

        Raises
        ------
        PluginNotFoundError
            If nothing is registered under ``name``.
        """
        try:
            return self._plugins[name]
        except KeyError:
            raise PluginNotFoundError(name, self._name) from None

    def list_plugins(self) -> list[str]:
        """Return registered keys in alphabetical order."""
        return sorted(self._plugins)

    def __contains__(self, name: object) -> bool:
        return name in self._plugins

    def __len__(self) -> int:
        return len(self._plugins)

    def __repr__(self) -> str:
        return (
            f"PluginRegistry(name={self._name!r}, "
            f"base_class={self._base_class.__name__}, "
            f"plugins={self.list_plugins()})"
        )

    # ------------------------------------------------------------------
    # Entry-point loading
    # ------------------------------------------------------------------

    def load_entrypoints(self, group: str) -> None:
        """Register the classes installed packages declare under ``group``.

        Keys that are already registered are skipped, so repeated calls
        are harmless.  An entry-point that fails to import, or loads
        something that is not a subclass of the base class, is logged
        and skipped.
        """
        for ep in importlib.metadata.entry_points(group=group):
            if ep.name in self._plugins:
                logger.debug("Entry-point %r already registered in %r; skipping.", ep.name, self._name)
                continue
            try:
                cls = ep.load()
            except Exception:
                logger.exception("Failed to load entry-point %r from group %r; skipping.", ep.name, group)
                continue
            try:
                self.register_class(ep.name, cls)
            except (PluginAlreadyRegisteredError, TypeError):
                logger.warning(
                    "Entry-point %r could not be registered in %r; skipping.",
                    ep.name,
                    self._name,
                )
