from __future__ import annotations
import argparse
from ..core.logger import configure_logging
from .commands import (
    resolve as cmd_resolve,
    names as cmd_names,
)


def entrypoint():
    main()


def _add_source_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--path",
        type=str,
        default=None,
        help="Local codicons directory or .css file (overrides config and CODICON_LOCAL_PATH)",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="JSON config file with local_codicons_path / bundled_css_path / embed",
    )


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Codicon Inspector CLI")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    r = sub.add_parser(
        "resolve", help="Resolve the codicon stylesheet and icon catalog"
    )
    _add_source_args(r)
    r.add_argument(
        "--embed",
        choices=["file", "data"],
        default=None,
        help="How url() references are embedded: file:// URIs or base64 data URIs",
    )
    r.add_argument(
        "--out",
        type=str,
        default=None,
        help="Output directory for codicon.css and icons.json (prints a summary if omitted)",
    )
    r.add_argument("--pretty", action="store_true", help="Pretty-print JSON output")

    n = sub.add_parser("names", help="Print the icon catalog, one name per line")
    _add_source_args(n)
    n.add_argument(
        "--search",
        type=str,
        default=None,
        help="Only print names containing this text (case-insensitive)",
    )

    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.command == "resolve":
        cmd_resolve.run(args)
    elif args.command == "names":
        cmd_names.run(args)


if __name__ == "__main__":
    main()
