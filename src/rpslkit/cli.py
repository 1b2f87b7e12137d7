"""rpslkit CLI: decode and check WHOIS text."""

import argparse
import json
import sys
from importlib.metadata import version as get_version, PackageNotFoundError
from pathlib import Path
from typing import List

from .api import decode, decode_all, to_document, to_json, to_text, validate
from .config import get_settings
from .kernel.errors import RemoteError, RPSLError
from .kernel.record import Record
from .kernel.registry import default_registry
from ._internal.logging import configure_logging


def _read_input(path: str, encoding: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding=encoding)


def _print_records(records: List[Record], output_format: str) -> None:
    if output_format == "json":
        if len(records) == 1:
            print(to_json(records[0], indent=2))
        else:
            print(json.dumps([to_document(r).model_dump() for r in records], indent=2, ensure_ascii=False))
    else:
        print("\n".join(to_text(r) for r in records), end="")


def main():
    """Main CLI entry point for rpslkit commands."""
    try:
        rpslkit_version = get_version("rpslkit")
    except PackageNotFoundError:
        rpslkit_version = "dev"

    settings = get_settings()

    parser = argparse.ArgumentParser(
        prog="rpslkit",
        description="rpslkit: decode and validate RPSL/WHOIS records"
    )
    parser.add_argument("--version", action="version", version=f"rpslkit {rpslkit_version}")
    # Common arguments
    parent_parser = argparse.ArgumentParser(add_help=False)
    parent_parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress all non-error output."
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # parse command
    parse_parser = subparsers.add_parser(
        "parse",
        help="Decode WHOIS text and print the record(s)",
        parents=[parent_parser]
    )
    parse_parser.add_argument("file", help="Path to WHOIS text ('-' for stdin)")
    parse_parser.add_argument(
        "--all",
        action="store_true",
        help="Decode every blank-line separated record, not just the first"
    )
    parse_parser.add_argument(
        "--format",
        choices=["text", "json"],
        default=settings.output_format,
        help="Output format (defaults to RPSLKIT_OUTPUT_FORMAT or 'text')"
    )

    # validate command
    validate_parser = subparsers.add_parser(
        "validate",
        help="Check every record in WHOIS text for completeness",
        parents=[parent_parser]
    )
    validate_parser.add_argument("file", help="Path to WHOIS text ('-' for stdin)")

    # types command
    subparsers.add_parser(
        "types",
        help="List the registered record types and their primary keys",
        parents=[parent_parser]
    )

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    configure_logging(level=settings.log_level, json_logs=settings.json_logs)

    try:
        if args.command == "parse":
            text = _read_input(args.file, settings.encoding)
            if args.all:
                records = list(decode_all(text).values())
            else:
                record = decode(text)
                records = [record] if record is not None else []
            if not records:
                print(f"Error: no record found in {args.file}", file=sys.stderr)
                sys.exit(1)
            _print_records(records, args.format)

        elif args.command == "validate":
            text = _read_input(args.file, settings.encoding)
            records = list(decode_all(text).values())
            failed = 0
            for record in records:
                result = validate(record)
                label = f"{result.type} {result.primary_key or '(no key)'}"
                if result.ok:
                    if not args.quiet:
                        print(f"[OK] {label}")
                else:
                    failed += 1
                    print(f"[INCOMPLETE] {label}")
                    for issue in result.errors:
                        print(f"  {issue.code}: {issue.message}")
                if not args.quiet:
                    for issue in result.warnings:
                        print(f"  warning {issue.code}: {issue.message}")
            if not args.quiet:
                print(f"  Records: {len(records)}")
                print(f"  Incomplete: {failed}")
            if failed:
                sys.exit(1)

        elif args.command == "types":
            for type_name in default_registry.get_all_types():
                schema = default_registry.get_schema(type_name)
                print(f"{type_name}: {', '.join(schema.primary_key)}")

    except RemoteError as e:
        print(f"Error: WHOIS server returned error {e.code}: {e.message}", file=sys.stderr)
        sys.exit(1)
    except (RPSLError, FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
