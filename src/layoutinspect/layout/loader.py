"""YAML loader for resolved layout snapshots."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from ..core.anchors import AnchorType, parse_anchor_type
from ..core.bounds import Bounds
from ..core.tree import LayoutTree
from ..core.widget import Widget
from ..tooling.design_info import ROOT_ID, KeyedHelperIds

logger = logging.getLogger(__name__)


class LayoutDefinitionError(ValueError):
    """Raised when a layout snapshot cannot be turned into a LayoutTree."""


@dataclass
class LoadedLayout:
    """A layout built from YAML, with the display keys of its helpers."""

    tree: LayoutTree
    helper_ids: KeyedHelperIds


class LayoutLoader:
    """Loads resolved constraint layouts from YAML files.

    YAML format:
        root:
          bounds: [left, top, right, bottom]   # or rect: [x, y, width, height]

        widgets:
          title:
            rect: [16, 16, 300, 64]
            layout_id: title                   # identifier set by the owner
            constraints:
              left: {to: parent, anchor: left, margin: 16}
              top: {to: parent, margin: 16}    # anchor defaults to the origin side

          barrier:
            helper: true
            key: barrier1                      # display id of the helper
            references: [title, subtitle]

    Widgets are added to the root in file order. The widget name becomes its
    internal string id; "parent" always refers to the root container.
    """

    def load(self, path: str | Path) -> LoadedLayout:
        """Load a layout snapshot from a YAML file.

        Args:
            path: Path to the YAML file

        Returns:
            LoadedLayout with the tree and helper keys
        """
        path = Path(path)
        with open(path) as f:
            data = yaml.safe_load(f)

        layout = self._build_layout(data)
        logger.info("Loaded layout %s with %d widgets", path, len(layout.tree) - 1)
        return layout

    def load_string(self, yaml_string: str) -> LoadedLayout:
        """Load a layout snapshot from a YAML string.

        Args:
            yaml_string: YAML content as a string

        Returns:
            LoadedLayout with the tree and helper keys
        """
        data = yaml.safe_load(yaml_string)
        return self._build_layout(data)

    def _build_layout(self, data: Any) -> LoadedLayout:
        """Build the layout tree from parsed YAML data."""
        if not isinstance(data, dict):
            raise LayoutDefinitionError("Layout definition must be a mapping")

        root_def = self._mapping("root", data.get("root"))
        tree = LayoutTree(
            bounds=self._parse_bounds("root", root_def),
            string_id=root_def.get("id"),
        )
        helper_ids = KeyedHelperIds()

        widget_defs = data.get("widgets") or {}
        if not isinstance(widget_defs, dict):
            raise LayoutDefinitionError("'widgets' must be a mapping of name to definition")

        # First pass: create every widget so constraints can point forward
        widgets: dict[str, Widget] = {ROOT_ID: tree.root}
        for name, widget_def in widget_defs.items():
            name = str(name)
            widget_def = self._mapping(f"widget '{name}'", widget_def)
            if name in widgets:
                raise LayoutDefinitionError(f"Widget name '{name}' is reserved or duplicated")

            bounds = self._parse_bounds(name, widget_def)
            if widget_def.get("helper", False):
                widget = tree.add_helper(name, bounds)
                if "key" in widget_def:
                    helper_ids.register(widget, widget_def["key"])
            else:
                if "references" in widget_def:
                    raise LayoutDefinitionError(
                        f"Widget '{name}' lists references but is not a helper"
                    )
                widget = tree.add_widget(name, bounds, layout_id=widget_def.get("layout_id"))
            widgets[name] = widget

        # Second pass: helper references and anchor connections
        for name, widget_def in widget_defs.items():
            name = str(name)
            widget_def = widget_def or {}
            widget = widgets[name]

            references = widget_def.get("references") or []
            if not isinstance(references, list):
                raise LayoutDefinitionError(f"References of '{name}' must be a list of widget names")
            for ref_name in references:
                tree.add_reference(widget, self._lookup(widgets, name, ref_name))

            constraints = self._mapping(f"constraints of '{name}'", widget_def.get("constraints"))
            for anchor_name, target_def in constraints.items():
                anchor_type = self._parse_anchor(name, anchor_name)
                if isinstance(target_def, str):
                    target_def = {"to": target_def}
                elif not isinstance(target_def, dict):
                    raise LayoutDefinitionError(
                        f"Constraint {anchor_name} of '{name}' must be a widget name or a mapping"
                    )
                target = self._lookup(widgets, name, target_def.get("to", ROOT_ID))
                target_anchor = self._parse_anchor(name, target_def.get("anchor", anchor_type))
                try:
                    tree.connect(
                        widget,
                        anchor_type,
                        target,
                        target_anchor,
                        margin=int(target_def.get("margin", 0)),
                    )
                except (TypeError, ValueError) as e:
                    raise LayoutDefinitionError(str(e)) from e

        return LoadedLayout(tree=tree, helper_ids=helper_ids)

    def _parse_bounds(self, name: str, widget_def: dict[str, Any]) -> Bounds:
        """Read 'bounds' (edges) or 'rect' (position and size) of a widget."""
        try:
            if "bounds" in widget_def:
                return Bounds(widget_def["bounds"])
            if "rect" in widget_def:
                x, y, width, height = (int(v) for v in widget_def["rect"])
                return Bounds.from_rect(x, y, width, height)
        except (TypeError, ValueError, OverflowError) as e:
            raise LayoutDefinitionError(f"Invalid bounds for '{name}': {e}") from e
        return Bounds()

    def _mapping(self, what: str, value: Any) -> dict[str, Any]:
        """Treat a missing section as empty; reject anything but a mapping."""
        if value is None:
            return {}
        if not isinstance(value, dict):
            raise LayoutDefinitionError(f"Definition of {what} must be a mapping")
        return value

    def _parse_anchor(self, name: str, anchor: AnchorType | str) -> AnchorType:
        try:
            return parse_anchor_type(anchor)
        except (AttributeError, ValueError) as e:
            raise LayoutDefinitionError(f"Unknown anchor '{anchor}' on '{name}'") from e

    def _lookup(self, widgets: dict[str, Widget], name: str, target: Any) -> Widget:
        widget = widgets.get(str(target))
        if widget is None:
            raise LayoutDefinitionError(f"Widget '{name}' refers to unknown widget '{target}'")
        return widget
