"""Widget and anchor records stored in a LayoutTree."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator

from .anchors import ANCHOR_ORDER, AnchorType
from .bounds import Bounds

ROOT_INDEX = 0
"""Arena slot of the root container in every LayoutTree."""


class WidgetKind(Enum):
    """How a widget takes part in the layout."""
    ROOT = "root"
    HELPER = "helper"  # non-visual: barriers, guidelines, chains
    WIDGET = "widget"


@dataclass(frozen=True)
class AnchorTarget:
    """The far end of a connection: an anchor on another widget.

    Attributes:
        widget: Arena index of the widget owning the target anchor (0 = root)
        anchor: Which anchor of that widget is targeted
    """

    widget: int
    anchor: AnchorType


@dataclass
class Anchor:
    """A connection point on a widget.

    An anchor is connected when it has a target. The margin is the gap the
    solver keeps between this anchor and its target, in layout units.
    """

    type: AnchorType
    target: AnchorTarget | None = None
    margin: int = 0

    @property
    def is_connected(self) -> bool:
        return self.target is not None

    def reset(self) -> None:
        """Drop the connection."""
        self.target = None
        self.margin = 0


@dataclass
class Widget:
    """A positioned element of a resolved constraint layout.

    Widgets never hold references to each other; connections and helper
    references are arena indices into the owning LayoutTree.

    Attributes:
        index: Slot of this widget in its LayoutTree
        kind: Root, helper or plain widget
        string_id: Internal id given by the layout engine, if any
        layout_id: Identifier assigned by the declaring owner, if any
        bounds: Solved geometry before any screen offset
        anchors: One anchor per AnchorType
        references: Arena indices of the widgets a helper controls
    """

    index: int
    kind: WidgetKind = WidgetKind.WIDGET
    string_id: str | None = None
    layout_id: Any = None
    bounds: Bounds = field(default_factory=Bounds)
    anchors: dict[AnchorType, Anchor] = field(default_factory=dict, repr=False)
    references: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        for anchor_type in ANCHOR_ORDER:
            self.anchors.setdefault(anchor_type, Anchor(anchor_type))

    @property
    def is_root(self) -> bool:
        return self.kind is WidgetKind.ROOT

    @property
    def is_helper(self) -> bool:
        return self.kind is WidgetKind.HELPER

    def anchor(self, anchor_type: AnchorType) -> Anchor:
        """Get the anchor of the given type."""
        return self.anchors[anchor_type]

    def iter_anchors(self) -> Iterator[Anchor]:
        """Iterate over all anchors in the fixed enumeration order."""
        for anchor_type in ANCHOR_ORDER:
            yield self.anchors[anchor_type]

    def iter_connections(self) -> Iterator[Anchor]:
        """Iterate over connected anchors only, in enumeration order."""
        for anchor in self.iter_anchors():
            if anchor.is_connected:
                yield anchor

    def __repr__(self) -> str:
        name = self.string_id if self.string_id is not None else f"#{self.index}"
        refs_str = f", references={self.references}" if self.references else ""
        return f"Widget({name!r}, {self.kind.value}, {self.bounds!r}{refs_str})"
