"""Command-line interface for routefinder.

Reads a graph and a list of journey queries, answers every query with the
cheapest route and prints the answered journeys as JSON.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from .config import AppConfig, get_config
from .container import Container
from .domain.errors import ConfigurationError, JourneyError, RouteFinderError
from .logging import set_log_level, setup_logging
from .ports.graph import GraphRepositoryPort, JourneyRepositoryPort
from .services import JourneyPlannerService

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="routefinder",
        description="Answer journey queries with least-cost paths over a JSON graph.",
    )
    parser.add_argument(
        "--graph",
        type=Path,
        default=None,
        help="Graph JSON file (default: graph.json in RF_GRAPH_DATA_DIR)",
    )
    parser.add_argument(
        "--journeys",
        type=Path,
        default=None,
        help="Journeys JSON file (default: journeys.json in RF_GRAPH_DATA_DIR)",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Write answered journeys here instead of stdout",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="Indent the JSON output by this many spaces",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Override the configured log level",
    )
    return parser


def _load_config() -> AppConfig:
    try:
        return get_config()
    except ValidationError as e:
        raise ConfigurationError(
            "Invalid configuration",
            setting_name=", ".join(
                ".".join(str(part) for part in err["loc"]) for err in e.errors()
            ),
            cause=e,
        )


def _with_indent(config: AppConfig, indent: int) -> AppConfig:
    try:
        return AppConfig.model_validate({**config.model_dump(), "indent": indent})
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid --indent {indent}",
            setting_name="indent",
            expected_type="non-negative integer",
            cause=e,
        )


def run(args: argparse.Namespace) -> str:
    """Answer the journeys described by parsed arguments.

    Returns:
        The encoded answered journeys.

    Raises:
        RouteFinderError: If configuration or input files are invalid.
    """
    config = _load_config()
    if args.indent is not None:
        config = _with_indent(config, args.indent)

    container = Container.create_default(
        config, graph_path=args.graph, journeys_path=args.journeys
    )
    journeys_repository = container.resolve(JourneyRepositoryPort)
    planner = container.resolve(JourneyPlannerService)

    # graph first, so a broken graph is reported before the journeys
    container.resolve(GraphRepositoryPort).load()
    queries = journeys_repository.load()
    journeys = planner.plan(queries)
    return journeys_repository.dump(journeys)


def _write_output(path: Path, output: str) -> None:
    try:
        path.write_text(output + "\n", encoding="utf-8")
    except OSError as e:
        raise JourneyError(
            f"Output file {path} could not be written",
            file_path=str(path),
            cause=e,
        )
    logger.info("Journeys written", extra={"output": str(path)})


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``routefinder`` command.

    Returns:
        Process exit code: 0 on success, 1 on an input or configuration error.
    """
    args = _build_parser().parse_args(argv)

    try:
        setup_logging(_load_config().observability, force=True)
        if args.log_level:
            set_log_level(args.log_level)

        output = run(args)
        if args.output is not None:
            _write_output(args.output, output)
    except RouteFinderError as e:
        logger.error("Journey planning failed", extra={"error": e.message})
        print(f"routefinder: {e}", file=sys.stderr)
        return 1

    if args.output is None:
        print(output)
    return 0
