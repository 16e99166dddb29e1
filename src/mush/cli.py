"""Command-line interface for Mush."""

from __future__ import annotations

import argparse
import logging
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from mush.errors import EncodingError

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = frozenset({"mush", "msh", "ms"})
COLOR_MODES = ("auto", "always", "never")


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path | None
    color: bool
    extensions: frozenset[str]
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="mush",
        description="Scan a Mush script and report lexical errors",
    )
    p.add_argument("file", nargs="?", help="Path to the Mush script to run")
    p.add_argument(
        "-c",
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover mush.toml)",
    )
    p.add_argument(
        "--color",
        choices=COLOR_MODES,
        default=None,
        help="Colorize diagnostics (default: auto)",
    )
    p.add_argument("--debug", action="store_true", help="Dump tokens to stderr")
    p.add_argument("-v", "--verbose", action="store_true", help="Log scanner activity to stderr")
    return p


def has_valid_extension(path: Path, extensions: frozenset[str] = DEFAULT_EXTENSIONS) -> bool:
    """Return True if the path ends in one of the accepted extensions."""
    return path.suffix[1:] in extensions


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "mush.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        config = tomllib.load(f)
    logger.debug("loaded config from %s", path)
    return config


def resolve_color(mode: str, stream: Any = None) -> bool:
    """Turn a color mode into a yes/no decision for the given output stream."""
    if mode not in COLOR_MODES:
        raise ValueError(f"invalid color mode (expected one of {', '.join(COLOR_MODES)}): {mode}")
    if mode == "auto":
        stream = stream if stream is not None else sys.stdout
        return stream.isatty()
    return mode == "always"


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    input_file = Path(args.file) if args.file else None
    input_dir = input_file.parent if input_file is not None else Path(".")
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, input_dir)

    # Color: config < CLI
    color_mode = "auto"
    cfg_output = config.get("output")
    if isinstance(cfg_output, dict):
        cfg_color = cfg_output.get("color")
        if isinstance(cfg_color, bool):
            color_mode = "always" if cfg_color else "never"
        elif isinstance(cfg_color, str):
            color_mode = cfg_color
    if args.color is not None:
        color_mode = args.color

    # Extensions: built-in set plus config extras
    extensions = set(DEFAULT_EXTENSIONS)
    cfg_files = config.get("files")
    if isinstance(cfg_files, dict):
        cfg_exts = cfg_files.get("extensions")
        if isinstance(cfg_exts, list):
            extensions.update(str(e).lstrip(".") for e in cfg_exts)

    return CliOptions(
        input_file=input_file,
        color=resolve_color(color_mode),
        extensions=frozenset(extensions),
        debug=args.debug,
    )


def run_file(path: Path, options: CliOptions) -> None:
    """Scan the input file and print one report per lexical fault to stdout.

    Raises OSError or EncodingError when the file cannot be read or decoded.
    """
    from mush.debug import dump_tokens
    from mush.errors import render_fault
    from mush.lexer import scan_file

    tokens, faults = scan_file(path)

    for fault in faults:
        print(render_fault(fault, path, options.color))

    if options.debug:
        dump_tokens(tokens)


def run_interactive(options: CliOptions) -> None:
    """Placeholder for the interactive mode; does nothing yet."""
    logger.debug("no input file given, interactive mode is not available")


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
        logging.getLogger("mush").setLevel(logging.DEBUG)

    try:
        options = resolve_options(args)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if options.input_file is None:
        run_interactive(options)
        return 0

    if not has_valid_extension(options.input_file, options.extensions):
        print(f"Unknown file extension {options.input_file.suffix or '.'}")
        return 0

    try:
        run_file(options.input_file, options)
    except EncodingError as exc:
        print(exc.format(options.input_file, options.color), file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    return 0


def run() -> None:
    """Console-script wrapper around main()."""
    sys.exit(main())
