"""LayoutTree arena holding a root container and its widgets."""

from __future__ import annotations

from typing import Any, Iterable, Iterator

from .anchors import AnchorType, parse_anchor_type
from .bounds import Bounds
from .widget import ROOT_INDEX, Anchor, AnchorTarget, Widget, WidgetKind

WidgetRef = Widget | int


class LayoutTree:
    """Flat storage for one resolved constraint layout.

    Slot 0 is always the root container; every other widget is a direct
    child of the root, in insertion order. Anchors and helpers refer to
    other widgets by arena index, so the structure has no ownership cycles
    even though connections form a graph.

    Example:
        tree = LayoutTree(Bounds.from_rect(0, 0, 1080, 1920))
        title = tree.add_widget("title", Bounds.from_rect(16, 16, 300, 64))
        tree.connect(title, "left", tree.root, "left", margin=16)
        barrier = tree.add_helper("barrier", references=[title])
    """

    def __init__(self, bounds: Bounds | None = None, string_id: str | None = None) -> None:
        root = Widget(
            index=ROOT_INDEX,
            kind=WidgetKind.ROOT,
            string_id=string_id,
            bounds=bounds if bounds is not None else Bounds(),
        )
        self._widgets: list[Widget] = [root]

    @property
    def root(self) -> Widget:
        return self._widgets[ROOT_INDEX]

    @property
    def children(self) -> list[Widget]:
        """Direct children of the root, in insertion order."""
        return self._widgets[1:]

    def __len__(self) -> int:
        return len(self._widgets)

    def get(self, ref: WidgetRef) -> Widget:
        """Resolve a widget or arena index to the stored widget.

        Raises:
            IndexError: If the index is not a slot of this tree
            ValueError: If the widget belongs to another tree
        """
        if isinstance(ref, Widget):
            index = ref.index
            if index >= len(self._widgets) or self._widgets[index] is not ref:
                raise ValueError(f"Widget {ref!r} does not belong to this layout")
            return ref
        if ref < 0 or ref >= len(self._widgets):
            raise IndexError(f"No widget at index {ref} (layout has {len(self._widgets)})")
        return self._widgets[ref]

    def add_widget(
        self,
        string_id: str | None = None,
        bounds: Bounds | None = None,
        layout_id: Any = None,
    ) -> Widget:
        """Add a plain widget as the last child of the root.

        Args:
            string_id: Internal id of the widget
            bounds: Solved geometry (defaults to an empty box at the origin)
            layout_id: Identifier assigned by the widget's declaring owner

        Returns:
            The added widget (for chaining)
        """
        widget = Widget(
            index=len(self._widgets),
            kind=WidgetKind.WIDGET,
            string_id=string_id,
            layout_id=layout_id,
            bounds=bounds if bounds is not None else Bounds(),
        )
        self._widgets.append(widget)
        return widget

    def add_helper(
        self,
        string_id: str | None = None,
        bounds: Bounds | None = None,
        references: Iterable[WidgetRef] = (),
    ) -> Widget:
        """Add a helper widget (barrier, guideline, ...) as the last child.

        Args:
            string_id: Internal id of the helper
            bounds: Solved geometry of the helper
            references: Widgets the helper controls, in order

        Returns:
            The added helper
        """
        helper = Widget(
            index=len(self._widgets),
            kind=WidgetKind.HELPER,
            string_id=string_id,
            bounds=bounds if bounds is not None else Bounds(),
        )
        self._widgets.append(helper)
        for ref in references:
            self.add_reference(helper, ref)
        return helper

    def add_reference(self, helper: WidgetRef, widget: WidgetRef) -> None:
        """Append a widget to the list a helper controls.

        Raises:
            ValueError: If the first argument is not a helper
        """
        helper = self.get(helper)
        if not helper.is_helper:
            raise ValueError(f"Cannot add references to non-helper {helper!r}")
        helper.references.append(self.get(widget).index)

    def connect(
        self,
        widget: WidgetRef,
        anchor: AnchorType | str,
        target: WidgetRef,
        target_anchor: AnchorType | str,
        margin: int = 0,
    ) -> Anchor:
        """Connect an anchor of a widget to an anchor of another widget.

        An existing connection on the same anchor is replaced.

        Args:
            widget: Widget owning the origin anchor
            anchor: Origin anchor type
            target: Widget owning the target anchor (the root for parent constraints)
            target_anchor: Target anchor type
            margin: Gap between the two anchors, in layout units

        Returns:
            The connected origin anchor
        """
        owner = self.get(widget)
        target_widget = self.get(target)
        anchor_type = parse_anchor_type(anchor)
        target_type = parse_anchor_type(target_anchor)

        if owner is target_widget and anchor_type is target_type:
            raise ValueError(f"Anchor {anchor_type.value} of {owner!r} cannot target itself")

        origin = owner.anchor(anchor_type)
        origin.target = AnchorTarget(widget=target_widget.index, anchor=target_type)
        origin.margin = int(margin)
        return origin

    def disconnect(self, widget: WidgetRef, anchor: AnchorType | str) -> None:
        """Remove the connection of one anchor, if any."""
        self.get(widget).anchor(parse_anchor_type(anchor)).reset()

    def iter_widgets(self, include_root: bool = True) -> Iterator[Widget]:
        """Iterate over the widgets of this layout (root first).

        Args:
            include_root: Whether to include the root container

        Yields:
            Widget instances in arena order
        """
        start = ROOT_INDEX if include_root else ROOT_INDEX + 1
        yield from self._widgets[start:]

    def find(self, string_id: str) -> Widget | None:
        """Find a widget by its internal string id.

        Args:
            string_id: The id to search for

        Returns:
            The first matching widget, or None
        """
        for widget in self._widgets:
            if widget.string_id == string_id:
                return widget
        return None

    def __repr__(self) -> str:
        return f"LayoutTree(root={self.root.bounds!r}, children={len(self._widgets) - 1})"
