#!/usr/bin/env python3
"""html2md command line interface.

Converts HTML files (or stdin) to Markdown.

Usage:
    html2md page.html
    html2md < page.html
    html2md --from pages.txt --output-dir md/
    html2md --wrap-width 100 page.html
    html2md --hook ./my_hook.py page.html
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path

from .config import load_options_from_config
from .converter import Converter
from .hooks import (
    PostConversionHook,
    load_hook_from_script,
    load_hooks_from_config,
    run_hooks,
)

STDIN_SOURCE = "<stdin>"


def _read_list_file(path: Path) -> list[Path]:
    """Read input paths from a file (one per line, ``#`` comments)."""
    paths: list[Path] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if line and not line.startswith("#"):
            paths.append(Path(line))
    return paths


def _output_path(source: Path, output_dir: Path) -> Path:
    return output_dir / f"{source.stem}.md"


def convert_source(
    html: str,
    source: str,
    converter: Converter,
    hooks: list[PostConversionHook] | None = None,
) -> str:
    """Convert one document and run post-conversion hooks on it."""
    markdown = converter.convert(html)
    if hooks:
        markdown, results = run_hooks(hooks, markdown, source)
        if results:
            ok = sum(1 for r in results if r.success)
            print(f"  Hooks: {ok}/{len(results)} succeeded for {source}", file=sys.stderr)
    return markdown


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="html2md",
        description="html2md: Convert HTML to readable Markdown",
    )
    parser.add_argument(
        "files", nargs="*", type=Path, help="HTML files to convert (default: stdin)",
    )
    parser.add_argument(
        "--from", dest="from_file", type=Path, metavar="FILE",
        help="Read input paths from a file (one per line)",
    )
    parser.add_argument(
        "--output-dir", type=Path, metavar="DIR",
        help="Write <name>.md files here instead of printing to stdout",
    )
    parser.add_argument(
        "--wrap-width", type=int, metavar="N",
        help="Soft wrap column (0 disables wrapping; default from config or 80)",
    )
    parser.add_argument(
        "--config", type=Path, metavar="PATH",
        help="Config file (default: ./.html2md.toml)",
    )
    parser.add_argument(
        "--hook", action="append", dest="hooks", metavar="SCRIPT",
        help="Path to a hook script (can be specified multiple times)",
    )
    parser.add_argument(
        "--no-config-hooks", action="store_true",
        help="Disable loading hooks from the config file",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    # Collect inputs from arguments and/or list file
    files: list[Path] = list(args.files)
    if args.from_file:
        if not args.from_file.exists():
            print(f"Error: file not found: {args.from_file}", file=sys.stderr)
            return 1
        files.extend(_read_list_file(args.from_file))

    missing = [p for p in files if not p.is_file()]
    if missing:
        for path in missing:
            print(f"Error: file not found: {path}", file=sys.stderr)
        return 1

    try:
        options = load_options_from_config(args.config)
    except ValueError as e:
        print(f"Error: invalid config: {e}", file=sys.stderr)
        return 1
    if args.wrap_width is not None:
        if args.wrap_width < 0:
            print("Error: --wrap-width must not be negative", file=sys.stderr)
            return 1
        options = replace(options, wrap_width=args.wrap_width)

    # Load hooks
    all_hooks: list[PostConversionHook] = []
    if args.hooks:
        for hook_path in args.hooks:
            try:
                all_hooks.append(load_hook_from_script(hook_path))
            except (FileNotFoundError, ValueError, TypeError) as e:
                print(f"Error loading hook {hook_path}: {e}", file=sys.stderr)
                return 1
    if not args.no_config_hooks:
        all_hooks.extend(load_hooks_from_config(args.config))

    converter = Converter(options)

    if not files:
        html = sys.stdin.read()
        sys.stdout.write(convert_source(html, STDIN_SOURCE, converter, all_hooks))
        return 0

    if args.output_dir:
        args.output_dir.mkdir(parents=True, exist_ok=True)

    for i, path in enumerate(files, 1):
        if len(files) > 1:
            print(f"[{i}/{len(files)}] {path}", file=sys.stderr)
        html = path.read_text(encoding="utf-8", errors="replace")
        markdown = convert_source(html, str(path), converter, all_hooks)

        if args.output_dir:
            out_path = _output_path(path, args.output_dir)
            out_path.write_text(markdown, encoding="utf-8")
            print(f"  Done: {out_path}", file=sys.stderr)
        else:
            if i > 1:
                sys.stdout.write("\n")
            sys.stdout.write(markdown)

    return 0


if __name__ == "__main__":
    sys.exit(main())
