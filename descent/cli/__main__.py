"""
Entry point for running the descent CLI as a module.

Usage:
    python -m descent.cli list
    python -m descent.cli run --optimizer conjugate_gradient --function rosenbrock --start -1.2 1
    python -m descent.cli run --config run.yaml --param max_steps=200
"""

import argparse
import logging
import os
import sys

from dotenv import load_dotenv
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from ..exceptions import OptimizationError
from ..schemas import OptimizationRequest
from .commands import CommandHandler, load_request_file


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="descent", description="Minimize analytical objectives")
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: $DESCENT_LOG_LEVEL or WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="List optimizers and their defaults")

    run = subparsers.add_parser("run", help="Run one optimization")
    run.add_argument("--config", help="YAML or JSON file with run settings")
    run.add_argument("--optimizer", help="Optimizer name")
    run.add_argument("--function", help="Analytical function name")
    run.add_argument("--start", nargs="+", type=float, help="Starting point")
    run.add_argument(
        "--param",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Parameter override, may be repeated",
    )
    return parser


def build_request(args: argparse.Namespace) -> OptimizationRequest:
    """Merge the config file with command-line options (options win)."""
    data = load_request_file(args.config) if args.config else {}
    if args.optimizer:
        data["optimizer"] = args.optimizer
    if args.function:
        data["function"] = args.function
    if args.start:
        data["starting_point"] = args.start

    parameters = dict(data.get("parameters") or {})
    for item in args.param:
        name, sep, value = item.partition("=")
        if not sep:
            raise ValueError(f"--param expects NAME=VALUE, got '{item}'")
        parameters[name.strip()] = value.strip()
    data["parameters"] = parameters

    return OptimizationRequest(**data)


def configure_logging(level_name: str):
    logging.basicConfig(
        level=level_name.upper(),
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )


def main(argv=None) -> int:
    """Main entry point for CLI."""
    load_dotenv()

    args = build_parser().parse_args(argv)
    configure_logging(args.log_level or os.environ.get("DESCENT_LOG_LEVEL", "WARNING"))

    console = Console()
    handler = CommandHandler(console)

    if args.command == "list":
        handler.handle_list()
        return 0

    try:
        request = build_request(args)
        handler.handle_run(request)
    except ValidationError as e:
        console.print(f"\n[red]Invalid run settings:[/red]\n{e}\n")
        return 2
    except (OptimizationError, ValueError, OSError) as e:
        console.print(f"\n[red]Error: {e}[/red]\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
