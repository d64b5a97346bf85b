"""Command-line lookup of Linux error numbers per architecture."""

from __future__ import annotations

import argparse
import sys

from linux_errno import __version__
from linux_errno.arch import table_for
from linux_errno.cli.helpers import (
    build_records,
    lookup,
    parse_architecture,
    render_json,
    render_text,
)
from linux_errno.config.defaults import CLI_DEFAULTS
from linux_errno.config.env import (
    TARGET_ARCH_ENV,
    configured_machine,
    load_environment,
)
from linux_errno.enums import Architecture, OutputFormat
from linux_errno.errors import UnsupportedArchitectureError
from linux_errno.table import ErrnoSpec
from linux_errno.target import ARCHITECTURE
from linux_errno.utilities.logger_manager import LOG_LEVELS, LoggerConfig, LoggerManager


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="linux-errno",
        description="Look up Linux error numbers by code or name.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--version",
        "-V",
        action="version",
        version=__version__,
        help="Show the package version and exit.",
    )
    parser.add_argument(
        "queries",
        nargs="*",
        metavar="QUERY",
        help="Error numbers (e.g. 11) or symbolic names (e.g. EAGAIN).",
    )
    parser.add_argument(
        "--arch",
        default=None,
        help=(
            "Architecture family or machine identifier "
            f"(default: the active target, {ARCHITECTURE.value}). "
            f"The package itself still resolves {TARGET_ARCH_ENV} when it is "
            "imported, so an unsupported value there fails before this option "
            "is read."
        ),
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List every error number of the architecture.",
    )
    parser.add_argument(
        "--output",
        choices=[fmt.value for fmt in OutputFormat],
        default=CLI_DEFAULTS["output"],
        help="Output format.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=CLI_DEFAULTS["log_level"],
        help="Logging level for diagnostics on stderr.",
    )
    parser.add_argument(
        "--structured-logs",
        action="store_true",
        default=CLI_DEFAULTS["structured_logging"],
        help="Emit diagnostics as JSON lines.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``linux-errno`` command."""
    load_environment()
    args = parse_args(argv)

    logger_manager = LoggerManager(
        LoggerConfig(
            log_level=args.log_level,
            structured_logging=args.structured_logs,
        )
    )
    logger = logger_manager.get_logger()

    # A .env file is only read here, after the package picked its target.
    requested = args.arch or configured_machine()
    arch: Architecture = ARCHITECTURE
    if requested is not None:
        try:
            arch = parse_architecture(requested)
        except UnsupportedArchitectureError as exc:
            print(f"linux-errno: {exc}", file=sys.stderr)
            return 1
    table = table_for(arch)

    with logger_manager.context(arch=arch.value):
        logger.debug("Using errno table %s", table.name)

        exit_code = 0
        specs: list[ErrnoSpec] = []
        if args.list:
            specs.extend(table.specs())
        for query in args.queries:
            spec = lookup(table, query)
            if spec is None:
                logger.warning("Unknown error number or name: %s", query)
                exit_code = 2
                continue
            specs.append(spec)

    records = build_records(arch, specs)
    if records:
        if args.output == OutputFormat.JSON.value:
            print(render_json(records))
        else:
            print(render_text(records))
    logger_manager.flush()
    return exit_code


if __name__ == "__main__":
    raise SystemExit(main())
