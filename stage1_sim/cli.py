"""
Stage-1 Burnout Simulation - CLI

Takes the eight vehicle parameters as positional arguments, flies to
first-stage burnout and prints the burnout altitude and vertical speed.
"""

import argparse
import logging
import sys
from dataclasses import replace

from .config import create_vehicle_parameters, create_default_config
from .main import run_simulation, REASON_BURNOUT
from .validation import parse_float, InvalidArgumentError

logger = logging.getLogger(__name__)

# (name, help) in command-line order
POSITIONAL_ARGS = [
    ("start_mass", "start mass (metric tons)"),
    ("thrust_asl", "sea-level thrust (kN)"),
    ("thrust_vac", "vacuum thrust (kN)"),
    ("solid_fuel_per_sec", "solid fuel consumption (fuel units/s)"),
    ("lfo_per_sec", "LF+O consumption (liquid fuel units/s)"),
    ("burnout_time", "time to first burnout (s)"),
    ("drag_area", "drag frontal area (m^2)"),
    ("drag_coeff", "drag coefficient (unitless)"),
]


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on usage errors."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    """
    Build the command-line parser for the optional flags.

    The vehicle parameters are not registered as argparse positionals:
    argparse reads a token such as "-1e1" as an unknown option. They are
    collected from the leftover tokens by parse_command_line instead.
    """
    parser = _ArgumentParser(
        prog="stage1-sim",
        usage="%(prog)s [options] " + " ".join(name for name, _ in POSITIONAL_ARGS),
        description="Altitude and vertical speed of a rocket at first-stage burnout",
        epilog="positional arguments:\n" + "\n".join(
            f"  {name:<20}{help_text}" for name, help_text in POSITIONAL_ARGS),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--csv",
        metavar="PATH",
        help="Write the trajectory log to a CSV file"
    )
    parser.add_argument(
        "--plot-dir",
        metavar="DIR",
        help="Write trajectory plots into this directory"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Stop with an error if the vehicle mass would reach zero before burnout"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log progress to stderr"
    )
    return parser


def parse_command_line(argv=None) -> argparse.Namespace:
    """
    Parse flags and the eight vehicle parameters.

    Every token that is not a recognised flag is taken as a vehicle
    parameter, in order. Exits with status 1 unless there are exactly eight.
    """
    parser = build_parser()
    args, rest = parser.parse_known_args(argv)
    if len(rest) != len(POSITIONAL_ARGS):
        parser.error(f"expected {len(POSITIONAL_ARGS)} vehicle parameters, got {len(rest)}")
    for (name, _), text in zip(POSITIONAL_ARGS, rest):
        setattr(args, name, text)
    return args


def parse_vehicle_args(args: argparse.Namespace):
    """Convert the positional arguments into VehicleParameters."""
    values = [parse_float(getattr(args, name), name) for name, _ in POSITIONAL_ARGS]
    return create_vehicle_parameters(*values)


def main(argv=None) -> int:
    """Main execution flow. Returns the process exit status."""
    args = parse_command_line(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        params = parse_vehicle_args(args)
    except InvalidArgumentError as e:
        logger.error(f"Invalid argument: {e}")
        print(f"stage1-sim: error: {e}", file=sys.stderr)
        return 1

    config = create_default_config()
    config = replace(config, enforce_positive_mass=args.strict,
                     record_log=bool(args.csv or args.plot_dir))

    state, log, reason = run_simulation(params, config)
    if reason != REASON_BURNOUT:
        print(f"stage1-sim: error: {reason}", file=sys.stderr)
        return 1

    print(f"altitude {state.altitude:f} meters, vert speed {state.vertical_speed:f} m/s")

    if args.csv:
        log.to_csv(args.csv)
        logger.info(f"Trajectory log written to {args.csv}")

    if args.plot_dir:
        if len(log) > 1:
            from .plotting import generate_all_plots
            paths = generate_all_plots(log, args.plot_dir)
            logger.info(f"Generated {len(paths)} plots in {args.plot_dir}")
        else:
            logger.warning("No integration steps were taken; skipping plots")

    return 0


if __name__ == "__main__":
    sys.exit(main())
