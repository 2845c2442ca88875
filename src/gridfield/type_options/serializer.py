"""Type-option serialization for gridfield.

Converts type options to and from plain dicts, JSON and YAML.  The dict
form carries a ``field_type`` discriminator so that loading picks the
right type option class from ``type_option_registry``.

Usage
-----
::

    from gridfield.type_options.serializer import TypeOptionSerializer

    serializer = TypeOptionSerializer()
    text = serializer.to_yaml(checklist)
    checklist2 = serializer.from_yaml(text)
    assert checklist == checklist2

A document looks like::

    field_type: checklist
    disable_color: false
    options:
      - id: a1
        label: Write tests
        color: purple
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from gridfield.core.errors import TypeOptionDecodeError
from gridfield.plugins.registry import PluginNotFoundError
from gridfield.type_options.base import TypeOption
from gridfield.type_options.registry import type_option_class

logger = logging.getLogger(__name__)

_YAML_SUFFIXES = frozenset({".yaml", ".yml"})


class TypeOptionSerializer:
    """Converts between type options and plain Python dicts."""

    # ------------------------------------------------------------------
    # dict
    # ------------------------------------------------------------------

    def to_dict(self, type_option: TypeOption[Any, Any]) -> dict[str, Any]:
        """Serialize ``type_option`` to a JSON-compatible dict."""
        return type_option.to_dict()

    def from_dict(self, data: object, source: str | None = None) -> TypeOption[Any, Any]:
        """Deserialize a type option, dispatching on ``field_type``.

        Raises
        ------
        TypeOptionDecodeError
            If ``data`` is not a mapping, lacks ``field_type``, names an
            unregistered field type or is otherwise malformed.
        """
        if not isinstance(data, dict):
            raise TypeOptionDecodeError(
                f"document must be a mapping, got {type(data).__name__}", source
            )
        field_type = data.get("field_type")
        if not isinstance(field_type, str):
            raise TypeOptionDecodeError("missing 'field_type'", source)
        try:
            cls = type_option_class(field_type)
        except PluginNotFoundError:
            raise TypeOptionDecodeError(f"unknown field_type {field_type!r}", source) from None
        try:
            return cls.from_dict(data)
        except TypeOptionDecodeError as exc:
            if source is None or exc.source is not None:
                raise
            raise TypeOptionDecodeError(exc.message, source) from exc

    # ------------------------------------------------------------------
    # JSON
    # ------------------------------------------------------------------

    def to_json(self, type_option: TypeOption[Any, Any], indent: int = 2) -> str:
        return json.dumps(self.to_dict(type_option), indent=indent, ensure_ascii=False)

    def from_json(self, text: str, source: str | None = None) -> TypeOption[Any, Any]:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise TypeOptionDecodeError(f"invalid JSON: {exc}", source) from exc
        return self.from_dict(data, source)

    # ------------------------------------------------------------------
    # YAML
    # ------------------------------------------------------------------

    def to_yaml(self, type_option: TypeOption[Any, Any]) -> str:
        return yaml.safe_dump(
            self.to_dict(type_option),
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
        )

    def from_yaml(self, text: str, source: str | None = None) -> TypeOption[Any, Any]:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise TypeOptionDecodeError(f"invalid YAML: {exc}", source) from exc
        return self.from_dict(data, source)

    # ------------------------------------------------------------------
    # Files
    # ------------------------------------------------------------------

    def load(self, path: str | Path) -> TypeOption[Any, Any]:
        """Load a type option from a ``.json``, ``.yaml`` or ``.yml`` file.

        Raises
        ------
        OSError
            If the file cannot be read.
        TypeOptionDecodeError
            If the contents are malformed.
        """
        path = Path(path)
        text = path.read_text(encoding="utf-8")
        logger.debug("Loading type option from %s", path)
        if path.suffix.lower() in _YAML_SUFFIXES:
            return self.from_yaml(text, source=str(path))
        return self.from_json(text, source=str(path))

    def dump(self, type_option: TypeOption[Any, Any], path: str | Path) -> None:
        """Write ``type_option`` to ``path``, choosing the format by suffix."""
        path = Path(path)
        if path.suffix.lower() in _YAML_SUFFIXES:
            text = self.to_yaml(type_option)
        else:
            text = self.to_json(type_option) + "\n"
        path.write_text(text, encoding="utf-8")
