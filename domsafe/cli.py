import argparse
import sys
from pathlib import Path

from .api import escape_html, sanitize_html
from .config import load_config
from .prepass import strip

_MODES = ("sanitize", "strip", "escape")


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _transform(html: str, mode: str, config) -> str:
    if mode == "strip":
        # Regex-only path: no structural parser involved.
        return strip(html)
    if mode == "escape":
        return escape_html(html)
    return sanitize_html(html, config=config)


def main() -> None:
    """CLI entry point: read markup, clean it, and write the result."""
    parser = argparse.ArgumentParser(
        prog="domsafe",
        description="Strip script-execution vectors from HTML using an allowlist",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="HTML file to clean (default: read standard input)",
    )
    parser.add_argument(
        "-c", "--config", type=Path, default=None, help="Path to config.yaml (optional)"
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Output file path (default: standard output)",
    )
    parser.add_argument(
        "-m",
        "--mode",
        type=str,
        choices=_MODES,
        default="sanitize",
        help=f"Cleaning mode (choices: {', '.join(_MODES)}; default: sanitize)",
    )

    args = parser.parse_args()

    if args.input != "-" and not Path(args.input).exists():
        print(f"Error: '{args.input}' not found.", file=sys.stderr)
        sys.exit(1)

    try:
        config = load_config(args.config)
    except Exception as exc:
        print(f"Invalid config: {exc}", file=sys.stderr)
        sys.exit(1)

    result = _transform(_read_input(args.input), args.mode, config)

    if args.output is None:
        sys.stdout.write(result)
        return
    args.output.write_text(result, encoding="utf-8")
    print(f"Written → {args.output}", file=sys.stderr)


if __name__ == "__main__":
    main()
