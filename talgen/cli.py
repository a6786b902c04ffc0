"""Command-line interface for talgen."""

import argparse
import sys
from pathlib import Path
from typing import Any, Iterable, Optional

import yaml
from pydantic import ValidationError

from .build import BuildContext, build_page, ensure_source
from .io_utils import stable_json_dumps, warn
from .models import BuildConfig
from .parser import MAX_DEPTH, parse_tal
from .tokens import as_dict
from .util_fs import read_text


def _load_config(path: Optional[Path]) -> BuildConfig:
    if path is None:
        return BuildConfig()
    if not path.exists():
        raise SystemExit(f"Config file not found: {path}")
    payload: Any = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(payload, dict):
        raise SystemExit(f"{path} must contain a mapping of build settings.")
    try:
        return BuildConfig.model_validate(payload)
    except ValidationError as exc:
        raise SystemExit(f"Invalid build config in {path}: {exc}") from exc


def _apply_overrides(config: BuildConfig, args: argparse.Namespace) -> BuildConfig:
    updates: dict[str, Any] = {}
    if args.input:
        updates["input"] = args.input
    if args.output:
        updates["output"] = args.output
    if args.strict:
        updates["strict"] = True
    if args.max_depth is not None:
        updates["max_depth"] = args.max_depth
    if args.on_missing_root:
        updates["on_missing_root"] = args.on_missing_root
    if args.title:
        updates["page"] = config.page.model_copy(update={"title": args.title})
    return config.model_copy(update=updates)


def _depth(value: str) -> int:
    depth = int(value)
    if not 1 <= depth <= MAX_DEPTH:
        raise argparse.ArgumentTypeError(f"must be between 1 and {MAX_DEPTH}, got {depth}")
    return depth


def _handle_build(args: argparse.Namespace) -> None:
    config = _apply_overrides(_load_config(args.config), args)
    ctx = BuildContext.from_config(config, build_label=args.build_label)

    try:
        if ensure_source(ctx.input_path):
            print(f"Created demo {ctx.input_path.name}")
        rendered = build_page(ctx, check=args.check)
    except (OSError, UnicodeDecodeError) as exc:
        raise SystemExit(f"Build failed: {exc}") from exc

    if args.check:
        print("Determinism check passed.")
    size = len(rendered.encode("utf-8"))
    print(f"Build success! Generated {ctx.output_path} ({size} bytes)")


def _handle_parse(args: argparse.Namespace) -> None:
    try:
        source = sys.stdin.read() if args.source == "-" else read_text(args.source)
    except (OSError, UnicodeDecodeError) as exc:
        raise SystemExit(f"Parse failed: {exc}") from exc
    result = parse_tal(source, max_depth=args.max_depth, strict=args.strict)
    if result.error is not None:
        warn(f"{result.error.kind}: {result.error}")
        raise SystemExit(1)
    sys.stdout.write((result.html or "") + "\n")


def _handle_tokens(args: argparse.Namespace) -> None:
    sys.stdout.write(stable_json_dumps(as_dict()))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="talgen",
        description="Transpile TAL sources into standalone HTML pages",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="talgen 0.1.0",
        help="Show the talgen version and exit.",
    )

    subparsers = parser.add_subparsers(dest="command")

    build_cmd = subparsers.add_parser(
        "build",
        help="Build an HTML page from a TAL source file.",
        description=(
            "Parse the TAL source, embed it in the page template, and write the page. "
            "A demo source is created when the input file does not exist."
        ),
    )
    build_cmd.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a tal.yaml build config.",
    )
    build_cmd.add_argument(
        "--in",
        dest="input",
        default=None,
        help="TAL source file (default: code.tal).",
    )
    build_cmd.add_argument(
        "--out",
        dest="output",
        default=None,
        help="Output HTML file (default: index.html).",
    )
    build_cmd.add_argument(
        "--title",
        default=None,
        help="Document title for the generated page.",
    )
    build_cmd.add_argument(
        "--strict",
        action="store_true",
        help="Fail on unterminated '{' or '[' instead of truncating silently.",
    )
    build_cmd.add_argument(
        "--max-depth",
        dest="max_depth",
        type=_depth,
        default=None,
        help=f"Maximum element nesting depth (default: {MAX_DEPTH}).",
    )
    build_cmd.add_argument(
        "--on-missing-root",
        dest="on_missing_root",
        choices=["diagnostic", "abort"],
        default=None,
        help="Render an error fragment or abort when the source has no '^' root.",
    )
    build_cmd.add_argument(
        "--build-label",
        dest="build_label",
        default=None,
        help="Append a build label comment to the generated page.",
    )
    build_cmd.add_argument(
        "--check",
        action="store_true",
        help="Render twice and fail if the outputs differ.",
    )
    build_cmd.set_defaults(func=_handle_build)

    parse_cmd = subparsers.add_parser(
        "parse",
        help="Print the HTML fragment for a TAL source.",
        description="Parse a TAL source and write the root element's HTML to stdout.",
    )
    parse_cmd.add_argument("source", help="TAL source file, or '-' for stdin.")
    parse_cmd.add_argument(
        "--strict",
        action="store_true",
        help="Fail on unterminated '{' or '['.",
    )
    parse_cmd.add_argument(
        "--max-depth",
        dest="max_depth",
        type=_depth,
        default=MAX_DEPTH,
        help=f"Maximum element nesting depth (default: {MAX_DEPTH}).",
    )
    parse_cmd.set_defaults(func=_handle_parse)

    tokens_cmd = subparsers.add_parser(
        "tokens",
        help="Dump the design token dictionary as JSON.",
        description="Print every TAL symbol and its expansion.",
    )
    tokens_cmd.set_defaults(func=_handle_tokens)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


__all__ = ["build_parser", "main"]


if __name__ == "__main__":
    main()
