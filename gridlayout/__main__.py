"""CLI entry point for gridlayout.

Commands read a schema JSON file, run one of the layout engine operations
on it and print JSON (or a plain report) to stdout. Logs go to stderr.
"""

import argparse
import json
import sys
from dataclasses import asdict
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError as SchemaFormatError

from gridlayout.config import get_log_level
from gridlayout.constraints import (
    calculate_minimum_grid_size,
    is_grid_resize_safe,
    suggest_grid_compaction,
)
from gridlayout.core import get_logger, setup_logging
from gridlayout.normalizer import normalize_schema
from gridlayout.placement import calculate_smart_position
from gridlayout.schema import LayoutSchema, SemanticTag
from gridlayout.snap import (
    calculate_snap_guides,
    snap_config_from_environment,
    snap_to_grid,
)
from gridlayout.validation import validate_schema

# Load environment variables from .env file
load_dotenv()

logger = get_logger("cli")


def _load_schema(path: Path) -> LayoutSchema | None:
    """Read and parse a schema file, logging the reason on failure."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        logger.error(f"Cannot read {path}: {e}")
        return None
    except json.JSONDecodeError as e:
        logger.error(f"{path} is not valid JSON: {e}")
        return None

    try:
        return LayoutSchema.model_validate(data)
    except SchemaFormatError as e:
        logger.error(f"{path} is not a layout schema:\n{e}")
        return None


def _emit(payload: dict) -> None:
    print(json.dumps(payload, indent=2))


# =============================================================================
# Commands
# =============================================================================


def cmd_normalize(args: argparse.Namespace) -> int:
    """Handle the normalize command."""
    schema = _load_schema(args.file)
    if schema is None:
        return 1

    text = json.dumps(normalize_schema(schema).to_dict(), indent=2)
    if args.output:
        args.output.write_text(text + "\n", encoding="utf-8")
        logger.info(f"Normalized schema written to {args.output}")
    else:
        print(text)
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    """Handle the validate command."""
    schema = _load_schema(args.file)
    if schema is None:
        return 1

    result = validate_schema(schema)
    for error in result.errors:
        print(f"ERROR   {error.code}: {error.message}")
    for warning in result.warnings:
        print(f"WARNING {warning.code}: {warning.message}")
    print("valid" if result.valid else "invalid")
    return 0 if result.valid else 1


def cmd_grid(args: argparse.Namespace) -> int:
    """Handle the grid command."""
    schema = _load_schema(args.file)
    if schema is None:
        return 1
    schema = normalize_schema(schema)

    breakpoint = schema.get_breakpoint(args.breakpoint)
    if breakpoint is None:
        logger.error(f"Unknown breakpoint: {args.breakpoint}")
        return 1

    components = schema.components
    minimum = calculate_minimum_grid_size(components, breakpoint.name)
    compaction = suggest_grid_compaction(
        components, breakpoint.grid_rows, breakpoint.grid_cols, breakpoint.name
    )
    report = {
        "breakpoint": breakpoint.name,
        "gridRows": breakpoint.grid_rows,
        "gridCols": breakpoint.grid_cols,
        "minimum": {"rows": minimum.min_rows, "cols": minimum.min_cols},
        "compaction": {
            "rows": compaction.can_reduce_rows,
            "cols": compaction.can_reduce_cols,
        },
    }

    if args.rows is not None or args.cols is not None:
        new_rows = args.rows if args.rows is not None else breakpoint.grid_rows
        new_cols = args.cols if args.cols is not None else breakpoint.grid_cols
        check = is_grid_resize_safe(new_rows, new_cols, components, breakpoint.name)
        report["resize"] = {
            "rows": new_rows,
            "cols": new_cols,
            "safe": check.safe,
            "reason": check.reason,
            "affected": [
                {
                    "id": item.id,
                    "name": item.name,
                    "position": item.current_position.model_dump(),
                }
                for item in check.affected_components
            ],
        }

    _emit(report)
    return 0


def cmd_place(args: argparse.Namespace) -> int:
    """Handle the place command."""
    schema = _load_schema(args.file)
    if schema is None:
        return 1
    schema = normalize_schema(schema)

    breakpoint = schema.get_breakpoint(args.breakpoint)
    if breakpoint is None:
        logger.error(f"Unknown breakpoint: {args.breakpoint}")
        return 1

    rect = calculate_smart_position(
        SemanticTag(args.tag),
        breakpoint.grid_cols,
        breakpoint.grid_rows,
        schema.components,
        breakpoint.name,
    )
    _emit(rect.model_dump())
    return 0


def cmd_snap(args: argparse.Namespace) -> int:
    """Handle the snap command."""
    config = snap_config_from_environment()
    result = snap_to_grid(args.x, args.y, config)
    guides = calculate_snap_guides(args.x, args.y, config)
    _emit(
        {
            **asdict(result),
            "guides": [
                {"axis": guide.axis.value, "position": guide.position}
                for guide in guides
            ],
        }
    )
    return 0


# =============================================================================
# Parser
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per operation."""
    parser = argparse.ArgumentParser(
        prog="gridlayout",
        description="Responsive grid layout engine",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    normalize_parser = subparsers.add_parser(
        "normalize", help="Sort breakpoints and apply inheritance"
    )
    normalize_parser.add_argument("file", type=Path, help="Schema JSON file")
    normalize_parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Output file path (prints to stdout if not specified)",
    )
    normalize_parser.set_defaults(func=cmd_normalize)

    validate_parser = subparsers.add_parser(
        "validate", help="Report schema errors and warnings"
    )
    validate_parser.add_argument("file", type=Path, help="Schema JSON file")
    validate_parser.set_defaults(func=cmd_validate)

    grid_parser = subparsers.add_parser(
        "grid", help="Minimum size, compaction and resize safety"
    )
    grid_parser.add_argument("file", type=Path, help="Schema JSON file")
    grid_parser.add_argument("breakpoint", type=str, help="Breakpoint name")
    grid_parser.add_argument("--rows", type=int, default=None, help="Proposed rows")
    grid_parser.add_argument("--cols", type=int, default=None, help="Proposed columns")
    grid_parser.set_defaults(func=cmd_grid)

    place_parser = subparsers.add_parser(
        "place", help="Smart position for a new component"
    )
    place_parser.add_argument("file", type=Path, help="Schema JSON file")
    place_parser.add_argument("breakpoint", type=str, help="Breakpoint name")
    place_parser.add_argument(
        "tag",
        type=str,
        choices=[tag.value for tag in SemanticTag],
        help="Semantic tag of the new component",
    )
    place_parser.set_defaults(func=cmd_place)

    snap_parser = subparsers.add_parser(
        "snap", help="Snap pixel coordinates to grid cells"
    )
    snap_parser.add_argument("x", type=float, help="Pixel x")
    snap_parser.add_argument("y", type=float, help="Pixel y")
    snap_parser.set_defaults(func=cmd_snap)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    setup_logging(get_log_level())
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
