"""
Command-line interface for gear phase and mesh checks.
"""

import argparse
import logging
import sys
from math import degrees, radians

from ..core.angles import InvalidArgument, gap_angles, tooth_angles
from ..core.mesh_alignment import get_alignment_info
from ..core.phase import calculate_child_phase
from ..calculator.validation import validate_mesh
from ..calculator.output import to_json, to_markdown, to_summary
from ..io.loaders import load_mesh_json, save_alignment_json


def _add_angle_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        '--degrees',
        action='store_true',
        help='Read and print angles in degrees instead of radians'
    )


def _add_pair_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        'parent_teeth',
        type=int,
        nargs='?',
        help='Number of teeth on the parent gear'
    )
    parser.add_argument(
        'child_teeth',
        type=int,
        nargs='?',
        help='Number of teeth on the child gear'
    )
    parser.add_argument(
        '--pair',
        type=str,
        default=None,
        help='Mesh JSON file with parent, child and mesh_angle_rad (overrides positional values)'
    )
    parser.add_argument(
        '--mesh-angle',
        type=float,
        default=0.0,
        help='Angle from parent centre to child centre (default: 0)'
    )
    parser.add_argument(
        '--parent-rotation',
        type=float,
        default=0.0,
        help='Current rotation of the parent gear (default: 0)'
    )
    parser.add_argument(
        '--child-rotation',
        type=float,
        default=0.0,
        help='Current rotation of the child gear (default: 0)'
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        '--json',
        action='store_true',
        help='Print the alignment report as JSON'
    )
    output.add_argument(
        '--markdown',
        action='store_true',
        help='Print the alignment report as Markdown'
    )
    parser.add_argument(
        '--save-json',
        type=str,
        default=None,
        help='Also save the alignment report to this JSON file'
    )
    _add_angle_options(parser)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the gearphase command."""
    parser = argparse.ArgumentParser(
        prog='gearphase',
        description='Tooth positions, child phase and mesh checks for gear pairs',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Tooth positions of a 4-tooth gear
  gearphase angles 4

  # Gap positions, in degrees, with the gear turned 10°
  gearphase angles 4 --gaps --rotation 10 --degrees

  # Rotation a 10-tooth child needs to mesh with a 20-tooth parent
  gearphase phase 20 10 --mesh-angle 90 --degrees

  # Check a pair (exit status 1 if the gears do not interleave)
  gearphase verify 20 10 --child-rotation 18 --degrees

  # Full report for a pair stored in JSON
  gearphase info --pair pair.json --markdown
        """
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    angles_parser = subparsers.add_parser('angles', help='List tooth or gap angles of a gear')
    angles_parser.add_argument('teeth', type=int, help='Number of teeth')
    angles_parser.add_argument(
        '--rotation',
        type=float,
        default=0.0,
        help='Current rotation of the gear (default: 0)'
    )
    angles_parser.add_argument(
        '--gaps',
        action='store_true',
        help='List gap angles instead of tooth angles'
    )
    _add_angle_options(angles_parser)

    phase_parser = subparsers.add_parser('phase', help='Phase a child gear needs to mesh with its parent')
    phase_parser.add_argument('parent_teeth', type=int, help='Number of teeth on the parent gear')
    phase_parser.add_argument('child_teeth', type=int, help='Number of teeth on the child gear')
    phase_parser.add_argument(
        '--parent-phase',
        type=float,
        default=0.0,
        help='Phase offset of the parent gear (default: 0)'
    )
    phase_parser.add_argument(
        '--mesh-angle',
        type=float,
        default=0.0,
        help='Angle from parent centre to child centre (default: 0)'
    )
    _add_angle_options(phase_parser)

    verify_parser = subparsers.add_parser('verify', help='Check that a gear pair interleaves')
    _add_pair_options(verify_parser)

    info_parser = subparsers.add_parser('info', help='Print an alignment report for a gear pair')
    _add_pair_options(info_parser)

    return parser


def _to_rad(value: float, use_degrees: bool) -> float:
    return radians(value) if use_degrees else value


def _fmt(value: float, use_degrees: bool) -> str:
    if use_degrees:
        return f"{degrees(value):.4f}°"
    return f"{value:.6f}"


def _resolve_pair(args) -> tuple:
    """Return (parent_teeth, child_teeth, mesh_angle, parent_rotation, child_rotation) in radians."""
    if args.pair:
        pair = load_mesh_json(args.pair)
        return (
            pair.parent.teeth,
            pair.child.teeth,
            pair.mesh_angle_rad,
            pair.parent.rotation_rad,
            pair.child.rotation_rad,
        )

    if args.parent_teeth is None or args.child_teeth is None:
        raise InvalidArgument("parent_teeth and child_teeth are required unless --pair is given")

    return (
        args.parent_teeth,
        args.child_teeth,
        _to_rad(args.mesh_angle, args.degrees),
        _to_rad(args.parent_rotation, args.degrees),
        _to_rad(args.child_rotation, args.degrees),
    )


def _run_angles(args) -> int:
    positions = gap_angles if args.gaps else tooth_angles
    for angle in positions(args.teeth, _to_rad(args.rotation, args.degrees)):
        print(_fmt(angle, args.degrees))
    return 0


def _run_phase(args) -> int:
    phase = calculate_child_phase(
        _to_rad(args.parent_phase, args.degrees),
        _to_rad(args.mesh_angle, args.degrees),
        args.parent_teeth,
        args.child_teeth,
    )
    print(_fmt(phase, args.degrees))
    return 0


def _run_pair(args) -> int:
    pair_args = _resolve_pair(args)
    report = get_alignment_info(*pair_args)
    validation = validate_mesh(*pair_args)

    if args.json:
        print(to_json(report, validation))
    elif args.markdown:
        print(to_markdown(report, validation))
    elif args.command == 'verify':
        print("✓ Gears interleave" if report.aligned else "❌ Gears do not interleave")
        for msg in validation.messages:
            print(f"  {msg.severity.value.upper()}: {msg.message}")
            if msg.suggestion:
                print(f"    Suggestion: {msg.suggestion}")
    else:
        print(to_summary(report))

    if args.save_json:
        save_alignment_json(report, args.save_json, validation)
        print(f"Saved alignment report to {args.save_json}", file=sys.stderr)

    if args.command == 'verify' and not report.aligned:
        return 1
    return 0


def main(argv=None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    commands = {
        'angles': _run_angles,
        'phase': _run_phase,
        'verify': _run_pair,
        'info': _run_pair,
    }

    try:
        return commands[args.command](args)
    except InvalidArgument as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except (OSError, ValueError) as e:
        print(f"Error loading mesh file: {e}", file=sys.stderr)
        return 2


if __name__ == '__main__':
    sys.exit(main())
