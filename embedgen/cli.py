"""CLI entrypoints for embedgen commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Dict

from .artifacts import DirectorySink, DirectorySource, MemorySink
from .config import CONFIG_FILENAME, ConfigError, load_config
from .generator import HeaderGenerator
from .logging import configure_logging
from .models import Artifact
from .options import LANGUAGE_C, LANGUAGE_CPP, Options, resolve_options


def _add_logging_options(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    verbose_default: object = argparse.SUPPRESS if suppress_default else False
    log_file_default: object = argparse.SUPPRESS if suppress_default else None
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=verbose_default,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--log-file",
        default=log_file_default,
        metavar="PATH",
        help="Also write a debug-level log of the run to PATH.",
    )


def _add_generation_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        help=f"Path to {CONFIG_FILENAME} or the directory holding it.",
    )
    group = parser.add_argument_group("header options")
    group.add_argument(
        "--language",
        choices=[LANGUAGE_C, LANGUAGE_CPP],
        help="Target language (default: c).",
    )
    group.add_argument(
        "--top-level-namespace",
        help="Outer namespace (C++) or symbol prefix (C) shared by all headers.",
    )
    group.add_argument(
        "--namespace-style",
        dest="top_level_namespace_style",
        choices=["legacy", "c++17"],
        help="How C++ nests the top-level namespace (default: c++17).",
    )
    group.add_argument(
        "--constexpr",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Declare C++ data as constexpr (default: on).",
    )
    group.add_argument(
        "--prepend",
        action="append",
        metavar="LINE",
        help="Line to place at the top of each header, e.g. '#pragma once'. Repeatable.",
    )
    group.add_argument(
        "--include",
        action="append",
        metavar="HEADER",
        help="Header to #include, with its delimiters, e.g. '<cstdint>'. Repeatable.",
    )
    group.add_argument("--data-type", help="Element type of the data array.")
    group.add_argument("--length-type", help="Type of the length constant.")
    group.add_argument("--header-extension", help="Suffix appended to artifact names.")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="embedgen",
        description="Embed build artifacts into C/C++ headers as byte arrays.",
    )
    _add_logging_options(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    build_parser = subparsers.add_parser(
        "build",
        help="Generate a header for every file in a build output directory.",
    )
    _add_logging_options(build_parser, suppress_default=True)
    build_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Directory holding the build artifacts (defaults to current directory).",
    )
    build_parser.add_argument(
        "--out",
        help="Directory to write headers into (defaults to the artifact directory).",
    )
    build_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="List the headers that would be written without writing them.",
    )
    _add_generation_options(build_parser)

    render_parser = subparsers.add_parser(
        "render",
        help="Print the header for a single file to stdout.",
    )
    _add_logging_options(render_parser, suppress_default=True)
    render_parser.add_argument("file", help="File to embed.")
    render_parser.add_argument(
        "--name",
        help="Artifact name used for symbol naming (defaults to the file name).",
    )
    _add_generation_options(render_parser)

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP rendering service.",
    )
    _add_logging_options(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)

    return parser


def _resolve_cli_options(args: argparse.Namespace, default_config: Path) -> Options:
    config_path = Path(args.config) if args.config else default_config
    partial: Dict[str, Any] = load_config(config_path).to_partial()
    for key in (
        "language",
        "top_level_namespace",
        "top_level_namespace_style",
        "constexpr",
        "prepend",
        "include",
        "data_type",
        "length_type",
        "header_extension",
    ):
        value = getattr(args, key, None)
        if value is not None:
            partial[key] = value
    return resolve_options(partial)


def _run_build(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    input_dir = Path(args.path).expanduser().resolve()
    try:
        options = _resolve_cli_options(args, input_dir)
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    out_dir = Path(args.out).expanduser().resolve() if args.out else input_dir
    exclude = [CONFIG_FILENAME]
    if out_dir.is_relative_to(input_dir):
        exclude.append(options.header_extension)
    source = DirectorySource(input_dir, exclude_suffixes=exclude)
    generator = HeaderGenerator(options)

    if args.dry_run:
        sink = MemorySink()
    else:
        sink = DirectorySink(out_dir)

    try:
        headers = generator.run(source, sink)
    except FileNotFoundError as exc:
        parser.exit(1, f"{exc}\n")
    except Exception as exc:  # pragma: no cover - defensive guard
        parser.exit(1, f"embedgen build failed: {exc}\nRun with --verbose for more details.\n")

    if args.dry_run:
        print("Headers (dry-run):")
        for header in headers:
            print(f"  {_relativize(out_dir / header.name)}")
    else:
        print(f"Wrote {len(headers)} header(s) to {_relativize(out_dir)}")


def _run_render(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    file_path = Path(args.file).expanduser()
    try:
        options = _resolve_cli_options(args, Path.cwd())
        content = file_path.read_bytes()
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")
    except OSError as exc:
        parser.exit(1, f"{exc}\n")

    artifact = Artifact(name=args.name or file_path.name, content=content)
    header = HeaderGenerator(options).render(artifact)
    if header is None:
        parser.exit(1, f"{artifact.name} is excluded by the configured filter\n")
    print(header.text)


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for embedgen commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    if args.command == "build":
        _run_build(parser, args)
    elif args.command == "render":
        _run_render(parser, args)
    elif args.command == "serve":
        from .service import run_service

        try:
            run_service(host=args.host, port=args.port)
        except RuntimeError as exc:
            parser.exit(1, f"{exc}\n")
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
