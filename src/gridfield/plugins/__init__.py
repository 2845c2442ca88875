"""Plugin subsystem for gridfield.

``PluginRegistry`` backs the field-type dispatch in
``gridfield.type_options``.  Installed packages can contribute type
options through the ``gridfield.type_options`` entry-point group.
"""
from __future__ import annotations

from gridfield.plugins.registry import (
    PluginAlreadyRegisteredError,
    PluginNotFoundError,
    PluginRegistry,
)

__all__ = ["PluginRegistry", "PluginNotFoundError", "PluginAlreadyRegisteredError"]
