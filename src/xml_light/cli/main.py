"""Main CLI entry point for the xml-light command-line tool.

Provides two commands: ``format`` re-renders a document in one of the output
styles, ``check`` reports whether documents are well-formed.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, TextIO

from xml_light import __version__
from xml_light.api.parser import parse_file, parse_in
from xml_light.output.api import render
from xml_light.output.sink import StreamSink
from xml_light.shared.config import ConfigError, XMLLightConfig
from xml_light.shared.diagnostics import abs_range, column_range
from xml_light.shared.errors import ParseError, XMLFileNotFoundError
from xml_light.shared.logging import configure_logging, get_logger
from xml_light.tree.nodes import Element

EXIT_OK = 0
EXIT_PARSE_ERROR = 1
EXIT_USAGE_ERROR = 2

_STYLE_PRESETS = {
    "compact": XMLLightConfig.compact,
    "xml": XMLLightConfig.pretty,
    "human": XMLLightConfig.human,
}

logger = get_logger(__name__, component="cli")


def load_config(args: argparse.Namespace) -> XMLLightConfig:
    """Build the effective configuration from ``--config`` and flags.

    Flags given on the command line win over the configuration file.
    """
    if args.config is not None:
        config = XMLLightConfig.from_json(Path(args.config).read_text(encoding="utf-8"))
    else:
        config = XMLLightConfig()

    style = getattr(args, "style", None)
    if style is None and args.config is None and args.command == "format":
        style = "xml"
    if style is not None:
        preset = _STYLE_PRESETS[style]().serializer
        config = config.override(
            serializer__pretty=preset.pretty,
            serializer__format=preset.format,
            serializer__trailing_newline=not preset.pretty,
        )
    if args.keep_whitespace:
        config = config.override(parser__keep_whitespace=True)
    return config


def log_level(args: argparse.Namespace, default: str = "WARNING") -> str:
    """Level from ``-v``/``-q``, falling back to ``default``."""
    if args.verbose:
        return "DEBUG"
    if args.quiet:
        return "ERROR"
    return default


def read_document(source: str, config: XMLLightConfig, stdin: TextIO) -> Element:
    """Parse ``source`` (a path, or ``-`` for standard input)."""
    if source == "-":
        return parse_in(stdin, config)
    return parse_file(source, config)


def describe_error(source: str, error: ParseError) -> Dict[str, Any]:
    """Machine readable view of a parse failure."""
    start, end = column_range(error.position)
    abs_start, abs_end = abs_range(error.position)
    return {
        "file": source,
        "valid": False,
        "kind": error.message.kind.name,
        "message": str(error),
        "line": error.position.line,
        "columns": [start, end],
        "offsets": [abs_start, abs_end],
    }


def cmd_format(
    args: argparse.Namespace,
    config: XMLLightConfig,
    stdout: TextIO,
    stderr: TextIO,
    stdin: TextIO,
) -> int:
    """Render one document in the requested style."""
    try:
        root = read_document(args.source, config, stdin)
    except XMLFileNotFoundError as e:
        print(str(e), file=stderr)
        return EXIT_USAGE_ERROR
    except ParseError as e:
        print(f"{args.source}: {e}", file=stderr)
        return EXIT_PARSE_ERROR

    render(root, StreamSink(stdout), config.serializer)
    return EXIT_OK


def cmd_check(
    args: argparse.Namespace,
    config: XMLLightConfig,
    stdout: TextIO,
    stderr: TextIO,
    stdin: TextIO,
) -> int:
    """Check each document for well-formedness."""
    results: List[Dict[str, Any]] = []
    missing = False

    for source in args.sources:
        try:
            root = read_document(source, config, stdin)
        except XMLFileNotFoundError as e:
            missing = True
            results.append({"file": source, "valid": False, "message": str(e)})
            continue
        except ParseError as e:
            results.append(describe_error(source, e))
            continue
        results.append({"file": source, "valid": True, "root": root.name})

    if args.json:
        print(json.dumps(results, indent=2), file=stdout)
    else:
        for result in results:
            status = "ok" if result["valid"] else "error"
            detail = result.get("root") if result["valid"] else result["message"]
            print(f"{result['file']}: {status}: {detail}", file=stdout)

    if missing:
        return EXIT_USAGE_ERROR
    return EXIT_OK if all(result["valid"] for result in results) else EXIT_PARSE_ERROR


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ``xml-light`` command."""
    parser = argparse.ArgumentParser(
        prog="xml-light",
        description="Re-render and check XML documents",
    )
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument("--config", help="JSON configuration file")
    parser.add_argument(
        "--keep-whitespace",
        action="store_true",
        help="Keep whitespace-only text between elements",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Errors only")

    subparsers = parser.add_subparsers(dest="command")

    format_parser = subparsers.add_parser("format", help="Render a document")
    format_parser.add_argument("source", help="Document path, or - for standard input")
    format_parser.add_argument(
        "--style",
        choices=sorted(_STYLE_PRESETS),
        help="Output style (default: xml, or the --config serializer section)",
    )

    check_parser = subparsers.add_parser("check", help="Check documents are well-formed")
    check_parser.add_argument("sources", nargs="+", help="Document paths, or - for standard input")
    check_parser.add_argument("--json", action="store_true", help="JSON output")

    return parser


def main(
    argv: Optional[List[str]] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
    stdin: Optional[TextIO] = None,
) -> int:
    """Main CLI entry point."""
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr
    stdin = stdin or sys.stdin

    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help(stderr)
        return EXIT_USAGE_ERROR

    configure_logging(log_level(args), stderr)

    try:
        config = load_config(args)
        configure_logging(log_level(args, config.global_.logging_level), stderr)
        if args.command == "format":
            return cmd_format(args, config, stdout, stderr, stdin)
        return cmd_check(args, config, stdout, stderr, stdin)
    except (ConfigError, OSError, ValueError) as e:
        logger.error("Command failed", extra={"command": args.command})
        print(f"xml-light: {e}", file=stderr)
        return EXIT_USAGE_ERROR
    except KeyboardInterrupt:
        print("\nOperation interrupted by user", file=stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
