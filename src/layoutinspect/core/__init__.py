"""Core layout data model components."""

from .anchors import ANCHOR_ORDER, AnchorType, parse_anchor_type
from .bounds import Bounds
from .widget import ROOT_INDEX, Anchor, AnchorTarget, Widget, WidgetKind
from .tree import LayoutTree

__all__ = [
    "ANCHOR_ORDER",
    "AnchorType",
    "parse_anchor_type",
    "Bounds",
    "ROOT_INDEX",
    "Anchor",
    "AnchorTarget",
    "Widget",
    "WidgetKind",
    "LayoutTree",
]
