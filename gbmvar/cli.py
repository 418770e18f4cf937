"""
Command-line interface for the GBM Value-at-Risk simulator.
"""

import argparse
import json
import sys
import traceback
from pathlib import Path
from typing import List, Optional

from gbmvar.config import get_settings
from gbmvar.engine import SimulationEngine, SimulationOutcome
from gbmvar.logging_config import setup_logging
from gbmvar.model import SimulationParameters
from gbmvar.visualization import plot_simulation

EXIT_OK = 0
EXIT_COMPUTATION_ERROR = 1
EXIT_VALIDATION_ERROR = 2
EXIT_INTERRUPTED = 130


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Parameters
    ----------
    argv : list of str, optional
        Arguments to parse instead of sys.argv

    Returns
    -------
    argparse.Namespace
        Parsed command-line arguments
    """
    parser = argparse.ArgumentParser(
        description="Monte Carlo price distribution and Value-at-Risk using Geometric Brownian Motion",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s 100
  %(prog)s 100 --volatility 35 --horizon-days 60 --iterations 5000 --seed 7
  %(prog)s 250 --json result.json --csv bands.csv --no-plot
        """,
    )

    parser.add_argument(
        "initial_price",
        type=float,
        help="Initial asset price (must be > 0)",
    )

    parser.add_argument(
        "--volatility",
        type=float,
        default=20.0,
        help="Annualized volatility in percent, 0-200 (default: 20)",
    )

    parser.add_argument(
        "--horizon-days",
        type=int,
        default=30,
        help="Number of trading days to simulate, 1-365 (default: 30)",
    )

    parser.add_argument(
        "--iterations",
        type=int,
        default=1000,
        help="Number of simulated paths, 100-10000 (default: 1000)",
    )

    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible runs (default: GBMVAR_SEED or unseeded)",
    )

    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Path to save the chart (optional)",
    )

    parser.add_argument(
        "--no-plot",
        action="store_true",
        help="Do not display the chart (useful for headless execution)",
    )

    parser.add_argument(
        "--json",
        type=str,
        default=None,
        help="Write the result payload as JSON to this path",
    )

    parser.add_argument(
        "--csv",
        type=str,
        default=None,
        help="Write the per-day average and percentile bands as CSV to this path",
    )

    parser.add_argument(
        "--no-paths",
        action="store_true",
        help="Leave the full path matrix out of the JSON payload",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level (default: GBMVAR_LOG_LEVEL or INFO)",
    )

    return parser.parse_args(argv)


def validate_args(args: argparse.Namespace) -> None:
    """Check that output destinations can be written.

    Raises
    ------
    ValueError
        If the directory of an output path does not exist
    """
    for option in (args.output, args.json, args.csv):
        if option:
            output_path = Path(option)
            if not output_path.parent.exists():
                raise ValueError(
                    f"Output directory does not exist: {output_path.parent}"
                )


def print_summary(params: SimulationParameters, outcome: SimulationOutcome) -> None:
    """Print the simulation summary.

    Parameters
    ----------
    params : SimulationParameters
        Parameters the simulation ran with
    outcome : SimulationOutcome
        Successful outcome holding the result
    """
    result = outcome.result
    print("=" * 60)
    print("GBM SIMULATION SUMMARY")
    print("=" * 60)
    print(f"Initial price: ${params.initial_price:.2f}")
    print(f"Volatility: {params.annual_volatility:.2f}% | Days: {params.horizon_days} "
          f"| Paths: {params.iteration_count}")
    print(f"Final price average: ${result.terminal_mean:.2f}")
    print(f"Final price range: ${result.terminal_min:.2f} - ${result.terminal_max:.2f}")
    print(f"5%-95% band at horizon: ${result.p5_path[-1]:.2f} - ${result.p95_path[-1]:.2f}")
    print(f"VaR 95%: ${result.var_95_amount:.2f} ({result.var_95_percent:.2f}%)")
    print("=" * 60)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI.

    Returns
    -------
    int
        Exit code (0 success, 1 computation error, 2 invalid input)
    """
    try:
        args = parse_args(argv)
        validate_args(args)

        settings = get_settings()
        setup_logging(args.log_level or settings.log_level, settings.log_file)

        params = SimulationParameters(
            initial_price=args.initial_price,
            annual_volatility=args.volatility,
            horizon_days=args.horizon_days,
            iteration_count=args.iterations,
        )
        seed = args.seed if args.seed is not None else settings.seed
        outcome = SimulationEngine(seed=seed).simulate(params)

        if not outcome.ok:
            print(f"Error: {outcome.error}", file=sys.stderr)
            return EXIT_VALIDATION_ERROR if outcome.status_code == 400 else EXIT_COMPUTATION_ERROR

        print_summary(params, outcome)

        if args.json:
            with open(args.json, "w") as f:
                json.dump(outcome.to_dict(include_paths=not args.no_paths), f)
            print(f"Result saved to: {args.json}")

        if args.csv:
            outcome.result.summary_frame().to_csv(args.csv)
            print(f"Bands saved to: {args.csv}")

        if args.output or not args.no_plot:
            plot_simulation(
                outcome.result,
                output_path=args.output,
                show_plot=not args.no_plot,
                max_paths=settings.max_plotted_paths,
            )
            if args.output:
                print(f"Plot saved to: {args.output}")

        return EXIT_OK

    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return EXIT_INTERRUPTED
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        traceback.print_exc()
        return EXIT_COMPUTATION_ERROR


if __name__ == "__main__":
    sys.exit(main())
