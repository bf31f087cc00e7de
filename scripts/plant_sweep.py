#!/usr/bin/env python3
"""Day sweep of the sun over two demo solar plants.

Runs a uniform plant (ten identical setups) and a fan-shaped plant
through the same sun sweep and compares their output profiles.
"""

import argparse
import logging
from dataclasses import replace

import numpy as np

from solarplant.config import Config, ReportingConfig, SweepConfig, set_config
from solarplant.power import LoggingReporter
from solarplant.simulation import SweepEngine, SweepResult
from solarplant.simulation.scenarios import demo_test_setup, fan_plant, uniform_plant


def run_sweeps(config: Config) -> dict[str, SweepResult]:
    """Run the uniform and fan plant sweeps.

    Args:
        config: Sweep and reporting configuration

    Returns:
        Sweep results keyed by plant name
    """
    level = getattr(logging, config.reporting.log_level.upper(), logging.INFO)
    reporter = LoggingReporter(level=level)

    test_setup = demo_test_setup(reporter=reporter)
    logging.info(
        "Test setup: power at pi/2 %.2f W; efficiency at pi %.1f%%",
        test_setup.current_power(np.pi / 2),
        test_setup.efficiency(np.pi),
    )

    uniform = SweepEngine(
        uniform_plant(test_setup, reporter=reporter),
        config=config,
        reporter=reporter,
        reference_setup=test_setup if config.reporting.trace_reference else None,
    )
    uniform_result = uniform.run()

    plant = fan_plant(reporter=reporter)
    plant.report()
    # Fan sweep also samples the stop angle itself
    fan_config = replace(
        config,
        sweep=replace(config.sweep, stop_angle=config.sweep.stop_angle + config.sweep.step),
    )
    fan = SweepEngine(plant, config=fan_config, reporter=reporter)
    fan_result = fan.run()

    return {"uniform": uniform_result, "fan": fan_result}


def print_report(results: dict[str, SweepResult]) -> None:
    """Print comparison report."""
    print("=" * 60)
    print("Solar Plant Day Sweep Report")
    print("=" * 60)
    for name, result in results.items():
        print()
        print(f"{name.capitalize()} plant:")
        print(f"  Samples: {len(result)}")
        print(f"  Peak output: {result.peak_output:.2f} W")
        if result.peak_angle is not None:
            print(f"  Peak at sun angle: {np.degrees(result.peak_angle):.1f}°")
        print(f"  Mean output: {result.mean_output:.2f} W")
        print(f"  Flatness (mean/peak): {result.flatness * 100:.1f}%")
    print()
    print("=" * 60)


def main():
    parser = argparse.ArgumentParser(description="Solar plant day sweep")
    parser.add_argument("--start", type=float, default=-90.0, help="Sweep start angle (deg)")
    parser.add_argument("--stop", type=float, default=90.0, help="Sweep stop angle (deg)")
    parser.add_argument("--step", type=float, default=11.25, help="Sweep step (deg)")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for per-step lines",
    )
    parser.add_argument("--no-reference", action="store_true", help="Do not trace the test setup")
    parser.add_argument("--quiet", action="store_true", help="Only print the summary")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level, format="%(message)s")

    config = Config(
        sweep=SweepConfig(
            start_angle=np.radians(args.start),
            stop_angle=np.radians(args.stop),
            step=np.radians(args.step),
        ),
        reporting=ReportingConfig(
            log_level=args.log_level,
            trace_reference=not args.no_reference,
        ),
    )
    set_config(config)

    if args.quiet:
        logging.getLogger().setLevel(logging.WARNING)

    try:
        results = run_sweeps(config)
    except ValueError as e:
        parser.error(str(e))
    print_report(results)


if __name__ == "__main__":
    main()
