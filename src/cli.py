"""Command-line interface for quantity-editor."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING

from constants import APP_VERSION, DEFAULT_BREAKPOINT
from controller.slider import SliderCurve
from model.errors import InvalidArgumentError
from model.units import (
    UNITS_ANGLE,
    UNITS_LENGTH,
    UNITS_MASS,
    UNITS_NONE,
    UNITS_RELATIVE,
    UNITS_TEMPERATURE,
    UnitGroup,
)
from model.value_model import ValueModel

if TYPE_CHECKING:
    from app import EditorSpec

UNIT_GROUPS: dict[str, UnitGroup] = {
    "none": UNITS_NONE,
    "length": UNITS_LENGTH,
    "angle": UNITS_ANGLE,
    "temperature": UNITS_TEMPERATURE,
    "mass": UNITS_MASS,
    "relative": UNITS_RELATIVE,
}


@dataclass
class ParsedArgs:
    """Parsed command-line arguments (numbers in the group's default unit)."""

    value: float
    min_value: float
    max_value: float
    mid: float | None
    breakpoint: float
    units: str
    label: str
    demo: bool


def print_error_box(title: str, *lines: str) -> None:
    """Print a formatted error box to stderr.

    Args:
        title: The error title (will be prefixed with "Error: ")
        *lines: Additional lines to print in the box
    """
    print("=" * 60, file=sys.stderr)
    print(f"Error: {title}", file=sys.stderr)
    print("", file=sys.stderr)
    for line in lines:
        print(line, file=sys.stderr)
    print("=" * 60, file=sys.stderr)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="quantity-editor",
        description="Edit a numeric quantity through synchronized spinner, slider and toggle views.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    parser.add_argument("--value", type=float, default=0.0, help="Initial value")
    parser.add_argument("--min", dest="min_value", type=float, default=0.0, help="Lower bound")
    parser.add_argument("--max", dest="max_value", type=float, default=100.0, help="Upper bound")
    parser.add_argument("--mid", type=float, default=None, help="Value at the slider breakpoint")
    parser.add_argument(
        "--breakpoint",
        type=float,
        default=DEFAULT_BREAKPOINT,
        help="Fraction of the slider that is linear (with --mid)",
    )
    parser.add_argument("--units", choices=sorted(UNIT_GROUPS), default="none", help="Unit group")
    parser.add_argument("--label", default="Value", help="Label shown next to the value")
    parser.add_argument("--demo", action="store_true", help="Edit a sample tube component instead")
    return parser


def parse_args(argv: list[str] | None = None) -> ParsedArgs:
    """Parse command-line arguments into ParsedArgs."""
    ns = create_parser().parse_args(argv)
    return ParsedArgs(
        value=ns.value,
        min_value=ns.min_value,
        max_value=ns.max_value,
        mid=ns.mid,
        breakpoint=ns.breakpoint,
        units=ns.units,
        label=ns.label,
        demo=ns.demo,
    )


def build_specs(args: ParsedArgs) -> list[EditorSpec]:
    """Build the editor rows for the parsed arguments.

    Raises:
        InvalidArgumentError: if the slider scale is inconsistent
    """
    from app import EditorSpec

    if args.demo:
        return build_demo_specs()

    group = UNIT_GROUPS[args.units]
    unit = group.default_unit
    low = unit.to_canonical(args.min_value)
    high = unit.to_canonical(args.max_value)
    if low > high:
        raise InvalidArgumentError(f"--min {args.min_value} is above --max {args.max_value}")
    mid = unit.to_canonical(args.mid) if args.mid is not None else None
    if mid is not None:
        # Validate before the UI is built
        SliderCurve.solve(low, args.breakpoint, mid, high)

    model = ValueModel(unit.to_canonical(args.value), group, low, high)
    return [EditorSpec(model, args.label, mid=mid, breakpoint=args.breakpoint)]


def build_demo_specs() -> list[EditorSpec]:
    """Editor rows for the sample Tube component."""
    from app import EditorSpec
    from demo import Tube

    tube = Tube()
    return [
        EditorSpec(tube.value_model("length"), Tube.length.label),
        EditorSpec(tube.value_model("radius"), Tube.radius.label, mid=0.05),
        EditorSpec(tube.value_model("radius", multiplier=2.0), "Diameter", mid=0.1),
        EditorSpec(tube.value_model("cant"), Tube.cant.label),
        EditorSpec(tube.value_model("mass"), Tube.mass.label, mid=1.0, breakpoint=0.7),
    ]


def main(argv: list[str] | None = None) -> int:
    """Entry point: parse arguments and run the editor."""
    args = parse_args(argv)
    try:
        specs = build_specs(args)
    except InvalidArgumentError as e:
        print_error_box("Invalid range", str(e))
        return 1

    from app import QuantityEditorApp

    QuantityEditorApp(specs).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
