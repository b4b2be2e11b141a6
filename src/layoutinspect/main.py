"""Main entry point for layoutinspect."""

import argparse
import json
import logging
import sys
from pathlib import Path

import yaml

from .layout import LayoutDefinitionError, LayoutLoader
from .tooling import ConstraintLayoutDesignInfo

logger = logging.getLogger(__name__)


def parse_offset(value: str) -> tuple[int, int]:
    """Parse an "X,Y" screen offset."""
    parts = value.split(",")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"Offset must be X,Y, got {value!r}")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        raise argparse.ArgumentTypeError(f"Offset must be two integers, got {value!r}") from None


def build_parser() -> argparse.ArgumentParser:
    """Create the command line parser."""
    parser = argparse.ArgumentParser(
        prog="layoutinspect",
        description="Layoutinspect - Constraint layout design info for inspection tools",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "layout",
        metavar="LAYOUT",
        help="YAML snapshot of a resolved layout",
    )
    parser.add_argument(
        "--offset",
        metavar="X,Y",
        type=parse_offset,
        default=(0, 0),
        help="Screen offset added to every box (default: 0,0)",
    )
    parser.add_argument(
        "--options",
        metavar="N",
        default="",
        help="Options bitmask: 1 = bounds, 2 = constraints (default: both)",
    )
    parser.add_argument(
        "--indent",
        type=int,
        metavar="N",
        help="Pretty-print the JSON with this indentation",
    )
    parser.add_argument(
        "-o", "--output",
        metavar="PATH",
        help="Write the JSON to a file instead of stdout",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the layoutinspect command line tool."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(message)s",
    )

    try:
        layout = LayoutLoader().load(args.layout)
    except (LayoutDefinitionError, yaml.YAMLError, OSError) as e:
        parser.error(f"cannot load {args.layout}: {e}")

    provider = ConstraintLayoutDesignInfo(layout.tree, layout.helper_ids)
    start_x, start_y = args.offset
    design_info = provider.get_design_info(start_x, start_y, args.options)

    if args.indent is not None:
        design_info = json.dumps(json.loads(design_info), indent=args.indent)

    if args.output:
        output_path = Path(args.output)
        output_path.write_text(design_info + "\n")
        logger.info("Wrote design info to %s", output_path)
    else:
        sys.stdout.write(design_info + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
