"""Decoding of the design-info options argument."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# These flags represent bit positions starting at 0
BOUNDS = 0
CONSTRAINTS = 1

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


@dataclass(frozen=True)
class SerializationOptions:
    """Which optional sections to include for every view entry."""

    with_bounds: bool = True
    with_constraints: bool = True

    @classmethod
    def from_flags(cls, flags: int) -> SerializationOptions:
        """Decode an options bitmask (bit 0 = bounds, bit 1 = constraints)."""
        return cls(
            with_bounds=bool(flags >> BOUNDS & 1),
            with_constraints=bool(flags >> CONSTRAINTS & 1),
        )

    @classmethod
    def parse(cls, args: str | None) -> SerializationOptions:
        """Decode the options string sent by the design tool.

        The string is a decimal 32-bit integer bitmask. Anything that is not
        one (missing, empty, "abc", "1.5", out of range) includes everything.

        Args:
            args: Raw options argument

        Returns:
            Decoded options
        """
        flags = _parse_int(args)
        if flags is None:
            logger.debug("Options %r are not an integer, including bounds and constraints", args)
            return cls()
        return cls.from_flags(flags)

    def to_flags(self) -> int:
        return (int(self.with_bounds) << BOUNDS) | (int(self.with_constraints) << CONSTRAINTS)


def _parse_int(text: str | None) -> int | None:
    if text is None or not _INT_PATTERN.fullmatch(text):
        return None
    value = int(text)
    if value < _INT_MIN or value > _INT_MAX:
        return None
    return value
