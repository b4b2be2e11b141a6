"""Design tooling support: design-info JSON for layout inspectors."""

from .design_info import (
    CONSTRAINTS_JSON_VERSION,
    ROOT_ID,
    ConstraintLayoutDesignInfo,
    DesignInfoProvider,
    HelperIdLookup,
    KeyedHelperIds,
    parse_constraints_to_json,
    resolve_widget_id,
)
from .options import SerializationOptions

__all__ = [
    "CONSTRAINTS_JSON_VERSION",
    "ROOT_ID",
    "ConstraintLayoutDesignInfo",
    "DesignInfoProvider",
    "HelperIdLookup",
    "KeyedHelperIds",
    "parse_constraints_to_json",
    "resolve_widget_id",
    "SerializationOptions",
]
