"""Design-info JSON for layout inspection tools.

Serializes the bounding box and constraint connections of every widget in a
resolved LayoutTree into the document read by a design tool's visual
inspector:

    {"type": "CONSTRAINTS", "version": 1, "content": {<viewId>: <entry>, ...}}
"""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping, Protocol, runtime_checkable

from ..core.tree import LayoutTree
from ..core.widget import Widget, WidgetKind
from .options import SerializationOptions

logger = logging.getLogger(__name__)

CONSTRAINTS_JSON_VERSION = 1
DESIGN_INFO_TYPE = "CONSTRAINTS"

# The root id is not user defined, so the layout engine's parent key is used
ROOT_ID = "parent"

# String form of a missing identifier
NULL_ID = "null"


@runtime_checkable
class HelperIdLookup(Protocol):
    """Maps helper widgets to the id they were declared with.

    Helpers (barriers, guidelines) are created from declarative references
    and have no layout id of their own; the subsystem tracking those
    declarations knows their display id.
    """

    def lookup_display_id(self, helper: Widget) -> Any:
        """Return the display id of a helper widget, or None if unknown."""
        ...


@runtime_checkable
class DesignInfoProvider(Protocol):
    """Interface used by design tooling.

    Returns a JSON string with the constraints and bounding box for each id
    in the layout.
    """

    def get_design_info(self, start_x: int, start_y: int, args: str) -> str:
        """Describe the layout with boxes offset by (start_x, start_y).

        args is a decimal bitmask (1 = bounds, 2 = constraints); anything
        that is not an integer includes both.
        """
        ...


class KeyedHelperIds:
    """HelperIdLookup backed by a mapping of helper arena index to key."""

    def __init__(self, keys: Mapping[int, Any] | None = None) -> None:
        self._keys: dict[int, Any] = dict(keys or {})

    def register(self, helper: Widget, key: Any) -> None:
        self._keys[helper.index] = key

    def lookup_display_id(self, helper: Widget) -> Any:
        return self._keys.get(helper.index)

    def __len__(self) -> int:
        return len(self._keys)


class ConstraintLayoutDesignInfo:
    """DesignInfoProvider for one resolved layout.

    Holds no state besides the layout and the helper lookup, so repeated
    calls on an unchanged layout return identical strings.
    """

    def __init__(self, tree: LayoutTree, lookup: HelperIdLookup) -> None:
        self.tree = tree
        self.lookup = lookup

    def get_design_info(self, start_x: int, start_y: int, args: str) -> str:
        return parse_constraints_to_json(self.tree, self.lookup, start_x, start_y, args)


def _id_string(value: Any) -> str:
    return NULL_ID if value is None else str(value)


def resolve_widget_id(tree: LayoutTree, widget: Widget, lookup: HelperIdLookup) -> str:
    """Resolve the id reported for a widget.

    The root is checked first, then helpers (via the lookup), then the
    identifier assigned by the declaring owner, then the internal string id.

    Args:
        tree: Layout the widget belongs to
        widget: The widget to identify
        lookup: Source of helper display ids

    Returns:
        The view id; "null" when nothing identifies the widget
    """
    kind = WidgetKind.ROOT if widget is tree.root else widget.kind
    if kind is WidgetKind.ROOT:
        return ROOT_ID
    if kind is WidgetKind.HELPER:
        return _id_string(lookup.lookup_display_id(widget))
    if widget.layout_id is not None:
        return str(widget.layout_id)
    return _id_string(widget.string_id)


def bounds_to_json(widget: Widget, start_x: int, start_y: int) -> dict[str, int]:
    """Get the widget's box translated by (start_x, start_y)."""
    return widget.bounds.to_box(start_x, start_y)


def constraints_to_json(
    tree: LayoutTree, widget: Widget, lookup: HelperIdLookup
) -> list[dict[str, Any]]:
    """Describe each connected anchor of a widget, in anchor order."""
    constraints = []
    for anchor in widget.iter_connections():
        target = anchor.target
        constraints.append({
            "originAnchor": anchor.type.value,
            "targetAnchor": target.anchor.value,
            "target": resolve_widget_id(tree, tree.get(target.widget), lookup),
            "margin": anchor.margin,
        })
    return constraints


def helper_references(
    tree: LayoutTree, widget: Widget, lookup: HelperIdLookup
) -> list[str]:
    """Ids of the widgets a helper controls; empty for anything else."""
    if not widget.is_helper:
        return []
    return [resolve_widget_id(tree, tree.get(ref), lookup) for ref in widget.references]


def _view_entry(
    view_id: str,
    box: dict[str, int],
    is_helper: bool,
    is_root: bool,
    references: list[str],
    constraints: list[dict[str, Any]],
    options: SerializationOptions,
) -> dict[str, Any]:
    entry: dict[str, Any] = {"viewId": view_id}
    if options.with_bounds:
        entry["box"] = box
    entry["isHelper"] = is_helper
    entry["isRoot"] = is_root
    entry["helperReferences"] = references
    if options.with_constraints:
        entry["constraints"] = constraints
    return entry


def create_design_info_json(content: dict[str, Any]) -> str:
    """Wrap per-view entries in the versioned envelope and dump them."""
    envelope = {
        "type": DESIGN_INFO_TYPE,
        "version": CONSTRAINTS_JSON_VERSION,
        "content": content,
    }
    return json.dumps(envelope, separators=(",", ":"))


def parse_constraints_to_json(
    tree: LayoutTree,
    lookup: HelperIdLookup,
    start_x: int,
    start_y: int,
    args: str | None,
) -> str:
    """Serialize bounds and constraints of every widget in a layout.

    One entry is produced per direct child of the root, in child order,
    followed by an entry for the root itself. The tree is only read.

    Args:
        tree: Resolved layout to describe
        lookup: Source of helper display ids
        start_x: Horizontal offset added to every box
        start_y: Vertical offset added to every box
        args: Options bitmask as a string (bit 0 = bounds, bit 1 = constraints);
            anything that is not an integer includes both

    Returns:
        The design-info JSON document
    """
    options = SerializationOptions.parse(args)
    content: dict[str, Any] = {}

    for widget in tree.children:
        view_id = resolve_widget_id(tree, widget, lookup)
        content[view_id] = _view_entry(
            view_id=view_id,
            box=bounds_to_json(widget, start_x, start_y),
            is_helper=widget.is_helper,
            is_root=False,
            references=helper_references(tree, widget, lookup),
            constraints=constraints_to_json(tree, widget, lookup),
            options=options,
        )

    content[ROOT_ID] = _view_entry(
        view_id=ROOT_ID,
        box=bounds_to_json(tree.root, start_x, start_y),
        is_helper=False,
        is_root=True,
        references=[],
        constraints=[],
        options=options,
    )

    logger.debug(
        "Serialized design info for %d views (bounds=%s, constraints=%s)",
        len(content), options.with_bounds, options.with_constraints,
    )
    return create_design_info_json(content)
