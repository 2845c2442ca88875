"""Select options and the per-field option registry.

An ``OptionRegistry`` is owned by a field's type option.  It is an
immutable, ordered collection of ``SelectOption`` values keyed by id;
insertion order is the display order.  Editing methods return a new
registry rather than mutating in place, so a registry can be shared
freely between cells being filtered or sorted.
"""
from __future__ import annotations

import logging
import uuid
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum

from gridfield.core.errors import TypeOptionDecodeError
from gridfield.selection.ids import SELECTION_IDS_SEPARATOR, SelectionState

logger = logging.getLogger(__name__)


class SelectOptionColor(Enum):
    """Display color of a select option.

    Member order is significant: the position of a color is its legacy
    integer wire value, and ties in ``OptionRegistry.create_option`` are
    broken in this order.
    """

    PURPLE = "purple"
    PINK = "pink"
    LIGHT_PINK = "light_pink"
    ORANGE = "orange"
    YELLOW = "yellow"
    LIME = "lime"
    GREEN = "green"
    AQUA = "aqua"
    BLUE = "blue"

    @property
    def index(self) -> int:
        """Legacy integer value of this color."""
        return list(SelectOptionColor).index(self)

    @classmethod
    def parse(cls, value: "str | int | SelectOptionColor") -> "SelectOptionColor":
        """Return the color named by ``value``.

        Accepts a member, its string value (case-insensitive, ``-`` or
        ``_`` separated) or its legacy integer index.

        Raises
        ------
        ValueError
            If ``value`` does not name a color.
        """
        if isinstance(value, SelectOptionColor):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Unknown option color {value!r}")
        if isinstance(value, int):
            members = list(cls)
            if 0 <= value < len(members):
                return members[value]
            raise ValueError(f"Option color index {value} is out of range")
        try:
            return cls(value.strip().lower().replace("-", "_"))
        except ValueError:
            raise ValueError(f"Unknown option color {value!r}") from None


@dataclass(frozen=True, slots=True)
class SelectOption:
    """One selectable entry of a select or checklist field.

    Parameters
    ----------
    id:
        Identifier, unique within the field and immutable once created.
        Must not be blank or contain ``SELECTION_IDS_SEPARATOR``, since
        cells store ids joined by it.
    label:
        Text shown to the user.
    color:
        Display color.

    Raises
    ------
    ValueError
        If ``id`` is blank or contains the separator.
    """

    id: str
    label: str
    color: SelectOptionColor = SelectOptionColor.PURPLE

    def __post_init__(self) -> None:
        if not self.id.strip():
            raise ValueError(f"option id must not be blank, got {self.id!r}")
        if SELECTION_IDS_SEPARATOR in self.id:
            raise ValueError(
                f"option id {self.id!r} must not contain {SELECTION_IDS_SEPARATOR!r}"
            )

    @classmethod
    def new(
        cls, label: str, color: SelectOptionColor = SelectOptionColor.PURPLE
    ) -> "SelectOption":
        """Create an option with a freshly generated id."""
        return cls(id=uuid.uuid4().hex, label=label, color=color)

    def to_dict(self) -> dict[str, str]:
        return {"id": self.id, "label": self.label, "color": self.color.value}

    @classmethod
    def from_dict(cls, data: object) -> "SelectOption":
        """Build an option from its serialized form.

        ``name`` is accepted in place of ``label`` and a null label reads
        as empty; ``color`` may be a color name or its legacy integer
        index and defaults to purple.  The id is kept verbatim.

        Raises
        ------
        TypeOptionDecodeError
            If the id is missing, blank or contains the storage
            separator, or the color is unknown.
        """
        if not isinstance(data, dict):
            raise TypeOptionDecodeError(f"option must be a mapping, got {type(data).__name__}")
        option_id = data.get("id")
        if not isinstance(option_id, str):
            raise TypeOptionDecodeError(f"option is missing a non-empty 'id': {data!r}")
        label = data.get("label", data.get("name"))
        if label is None:
            label = ""
        try:
            color = SelectOptionColor.parse(data.get("color", SelectOptionColor.PURPLE))
        except (ValueError, AttributeError) as exc:
            raise TypeOptionDecodeError(f"option {option_id!r}: {exc}") from exc
        try:
            return cls(id=option_id, label=str(label), color=color)
        except ValueError as exc:
            raise TypeOptionDecodeError(str(exc)) from exc

    def with_label(self, label: str) -> "SelectOption":
        return SelectOption(id=self.id, label=label, color=self.color)

    def with_color(self, color: SelectOptionColor) -> "SelectOption":
        return SelectOption(id=self.id, label=self.label, color=color)


@dataclass(frozen=True)
class OptionRegistry:
    """Ordered, id-unique collection of the options available to a field.

    Duplicate ids passed at construction keep their first occurrence.

    Parameters
    ----------
    options:
        The options, in display order.
    """

    options: tuple[SelectOption, ...] = ()
    _by_id: dict[str, SelectOption] = field(
        init=False, repr=False, compare=False, hash=False
    )
    _positions: dict[str, int] = field(
        init=False, repr=False, compare=False, hash=False
    )

    def __post_init__(self) -> None:
        by_id: dict[str, SelectOption] = {}
        for option in self.options:
            if option.id in by_id:
                logger.debug("Dropping duplicate option id %r from registry", option.id)
                continue
            by_id[option.id] = option
        object.__setattr__(self, "options", tuple(by_id.values()))
        object.__setattr__(self, "_by_id", by_id)
        object.__setattr__(
            self, "_positions", {option_id: i for i, option_id in enumerate(by_id)}
        )

    @classmethod
    def of(cls, options: Iterable[SelectOption]) -> "OptionRegistry":
        return cls(options=tuple(options))

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, option_id: str) -> SelectOption | None:
        """Return the option with ``option_id``, or ``None``."""
        return self._by_id.get(option_id)

    def index_of(self, option_id: str) -> int | None:
        """Return the display position of ``option_id``, or ``None``."""
        return self._positions.get(option_id)

    @property
    def ids(self) -> tuple[str, ...]:
        return tuple(self._by_id)

    @property
    def valid_ids(self) -> frozenset[str]:
        """Ids a changeset is allowed to insert."""
        return frozenset(self._by_id)

    def resolve(self, selection: SelectionState | Iterable[str]) -> tuple[SelectOption, ...]:
        """Resolve ids to options in selection order, skipping unknown ids."""
        resolved = []
        for option_id in selection:
            option = self._by_id.get(option_id)
            if option is None:
                logger.debug("Skipping unresolved option id %r", option_id)
                continue
            resolved.append(option)
        return tuple(resolved)

    def __contains__(self, option_id: object) -> bool:
        return option_id in self._by_id

    def __iter__(self) -> Iterator[SelectOption]:
        return iter(self.options)

    def __len__(self) -> int:
        return len(self.options)

    # ------------------------------------------------------------------
    # Editing (returns new registries)
    # ------------------------------------------------------------------

    def insert(self, option: SelectOption) -> "OptionRegistry":
        """Return a registry with ``option`` added.

        An existing option with the same id is replaced in place,
        keeping its position; otherwise the option is appended.
        """
        if option.id in self._by_id:
            return OptionRegistry(
                tuple(option if o.id == option.id else o for o in self.options)
            )
        return OptionRegistry(self.options + (option,))

    def delete(self, option_id: str) -> "OptionRegistry":
        """Return a registry without ``option_id``.

        Cells still referencing the id are not touched; they decode fine
        and the id is skipped wherever it is resolved.
        """
        if option_id not in self._by_id:
            return self
        return OptionRegistry(tuple(o for o in self.options if o.id != option_id))

    def next_color(self) -> SelectOptionColor:
        """Return the least-used color, first in enum order on ties."""
        usage = {color: 0 for color in SelectOptionColor}
        for option in self.options:
            usage[option.color] += 1
        return min(SelectOptionColor, key=lambda color: usage[color])

    def create_option(self, label: str) -> SelectOption:
        """Build a new option for ``label`` colored by ``next_color``.

        The option is not added; pass it to ``insert`` for that.
        """
        return SelectOption.new(label, color=self.next_color())


@dataclass(frozen=True)
class SelectOptionCellData:
    """Display payload of a selection cell.

    Parameters
    ----------
    options:
        Every option in the field's registry, in display order.
    select_options:
        The cell's resolved options, in selection order.
    """

    options: tuple[SelectOption, ...]
    select_options: tuple[SelectOption, ...]

    @property
    def labels(self) -> list[str]:
        return [option.label for option in self.select_options]
