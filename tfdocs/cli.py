"""CLI entrypoints for tfdocs commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import OUTPUT_FORMATS, ConfigError, load_config
from .errors import TfDocsError
from .logging import configure_logging, get_logger
from .render import RenderError, render_json, render_markdown
from .scanner import DocumentScanner


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tfdocs",
        description="Extract documentation from Terraform module directories.",
    )
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    scan_parser = subparsers.add_parser(
        "scan",
        help="Document every module found under a directory.",
    )
    _add_verbose_option(scan_parser, suppress_default=True)
    scan_parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help=(
            "Directory to scan for modules (defaults to the directory holding --config, "
            "or the current directory)."
        ),
    )
    scan_parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only log warnings and errors.",
    )
    scan_parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Output format (defaults to the configured format, markdown otherwise).",
    )
    scan_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Write the rendered documentation to this file instead of stdout.",
    )
    scan_parser.add_argument(
        "--lenient",
        action="store_true",
        help="Skip invalid blocks with a warning instead of failing the module.",
    )
    scan_parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a .tfdocs.yml file (defaults to the one in the scanned directory).",
    )
    scan_parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write logs to this file.",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for tfdocs commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(
        verbose=bool(args.verbose),
        quiet=bool(getattr(args, "quiet", False)),
        log_file=getattr(args, "log_file", None),
    )
    logger = get_logger("cli")

    if args.command == "scan":
        try:
            if args.config is not None:
                config = load_config(args.config)
            else:
                config = load_config(Path(args.path or "."))
        except ConfigError as exc:
            parser.exit(1, f"tfdocs: invalid configuration: {exc}\n")
        if args.lenient:
            config.strict = False

        try:
            documents = DocumentScanner(config).scan(args.path)
        except TfDocsError as exc:
            parser.exit(1, f"tfdocs scan failed: {exc}\nRun with --verbose for more details.\n")

        fmt = args.format or config.output.format
        try:
            if fmt == "json":
                rendered = render_json(documents)
            else:
                rendered = render_markdown(documents, config.output.templates_dir)
        except RenderError as exc:
            parser.exit(1, f"tfdocs: {exc}\n")

        if args.output is not None:
            try:
                args.output.write_text(rendered, encoding="utf-8")
            except OSError as exc:
                parser.exit(1, f"tfdocs: cannot write {args.output}: {exc.strerror or exc}\n")
            logger.info("Wrote documentation for %d modules to %s", len(documents), args.output)
        else:
            sys.stdout.write(rendered)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


if __name__ == "__main__":
    main(sys.argv[1:])
