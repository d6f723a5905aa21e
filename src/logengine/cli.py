"""
Command line entry point for logengine.
"""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version

from logengine import ColorMode, Engine, Severity
from logengine.errors import LogEngineError
from logengine.logging import configure_logging


def _severity(value: str) -> Severity:
    try:
        return Severity.parse(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="logengine",
        description="logengine CLI.",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print the installed logengine version and exit.",
    )
    parser.add_argument(
        "--log-level",
        help="Diagnostics level for logengine itself (overrides -v).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Enable logengine diagnostics (-v INFO, -vv DEBUG).",
    )
    subparsers = parser.add_subparsers(dest="command")
    emit = subparsers.add_parser(
        "emit",
        help="Emit one message through a configured engine.",
    )
    emit.add_argument(
        "--level",
        type=_severity,
        default=Severity.INFORMATIONAL,
        help="Message severity (name or RFC-5424 number).",
    )
    emit.add_argument(
        "--threshold",
        type=_severity,
        default=Severity.DEBUG,
        help="Verbosity threshold of the engine.",
    )
    emit.add_argument(
        "--color",
        choices=[mode.value for mode in ColorMode],
        default=ColorMode.SINK_DEFAULT.value,
        help="Color mode.",
    )
    emit.add_argument(
        "--no-header",
        action="store_true",
        help="Do not prefix the line with elapsed time and severity.",
    )
    emit.add_argument(
        "--file",
        help="Also append the message to this file.",
    )
    emit.add_argument(
        "--no-console",
        action="store_true",
        help="Do not write to the standard streams.",
    )
    emit.add_argument("message", nargs="+", help="Message parts.")
    return parser


def _diagnostics_level(args: argparse.Namespace) -> str | None:
    if args.log_level:
        return args.log_level
    if args.verbose >= 2:
        return "DEBUG"
    if args.verbose == 1:
        return "INFO"
    return None


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.version:
        try:
            print(version("logengine"))
        except PackageNotFoundError:
            print("logengine (not installed)")
        return 0

    configure_logging(_diagnostics_level(args))

    if args.command == "emit":
        sinks = {}
        if args.file:
            sinks["file"] = {"kind": "file", "stdout": args.file}
        try:
            with Engine(
                {
                    "default_sink": not args.no_console,
                    "color_mode": args.color,
                    "level": args.threshold,
                    "verbose": False,
                    "header": not args.no_header,
                    "sinks": sinks,
                }
            ) as engine:
                engine.log(args.level, *args.message)
        except LogEngineError as exc:
            parser.exit(1, f"logengine: {exc.message}\n")
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
