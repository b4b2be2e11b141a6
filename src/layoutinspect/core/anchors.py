"""Anchor types for constraint connections between widgets."""

from enum import Enum


class AnchorType(Enum):
    """Directional connection points on a widget.

    Values are the names reported to the design tool, so they double as
    the wire representation of ``originAnchor`` and ``targetAnchor``.
    """
    # Sides
    LEFT = "LEFT"
    TOP = "TOP"
    RIGHT = "RIGHT"
    BOTTOM = "BOTTOM"

    # Centering
    CENTER_X = "CENTER_X"
    CENTER_Y = "CENTER_Y"
    CENTER = "CENTER"

    # Text alignment
    BASELINE = "BASELINE"


# Fixed enumeration order of a widget's anchors, matching the layout engine.
# Constraint arrays are emitted in this order.
ANCHOR_ORDER: tuple[AnchorType, ...] = (
    AnchorType.LEFT,
    AnchorType.TOP,
    AnchorType.RIGHT,
    AnchorType.BOTTOM,
    AnchorType.CENTER_X,
    AnchorType.CENTER_Y,
    AnchorType.CENTER,
    AnchorType.BASELINE,
)


def parse_anchor_type(anchor: AnchorType | str) -> AnchorType:
    """Convert an anchor name to an AnchorType.

    Args:
        anchor: The anchor (enum or case-insensitive name, e.g. "left")

    Returns:
        The matching AnchorType

    Raises:
        ValueError: If the name is not a known anchor
    """
    if isinstance(anchor, AnchorType):
        return anchor
    return AnchorType(anchor.strip().upper())
