"""Command line entry point: ``validate-http-headers [SPECFILE ...]``."""

import argparse
import json
from collections.abc import Sequence

from pydantic import ValidationError
from pydantic_settings import SettingsError

from .coordinator import run
from .logging_setup import configure_logging
from .merge import merge_headers
from .models import HeaderMap, spec_file_schema
from .settings import Settings


def parse_header(value: str) -> tuple[str, str]:
    name, sep, header_value = value.partition(":")
    name = name.strip()
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"expected 'Name: value', got '{value}'")
    return name, header_value.strip()


def collect_headers(pairs: Sequence[tuple[str, str]]) -> HeaderMap:
    """Group repeated header names, keeping values in command line order."""
    headers: dict[str, list[str]] = {}
    for name, value in pairs:
        headers.setdefault(name, []).append(value)
    return headers


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="validate-http-headers",
        description="Validate HTTP response headers of the URLs listed in JSON spec files.",
    )
    parser.add_argument("files", nargs="*", metavar="SPECFILE", help="spec files, validated in order (default: urls.json)")
    parser.add_argument("--header", "-H", dest="headers", action="append", type=parse_header, default=[], metavar="'NAME: VALUE'", help="header sent with every request, may be repeated")
    parser.add_argument("--no-cache", action="store_true", default=None, help="send no-cache request headers")
    parser.add_argument("--no-keepalive", action="store_true", default=None, help="open a new connection for every request")
    parser.add_argument("--timeout", type=float, default=None, help="transport timeout in seconds (default: none)")
    parser.add_argument("--print-schema", action="store_true", help="print the JSON schema of the spec file format and exit")
    parser.add_argument("--verbose", "-v", action="store_true", help="log request and response headers")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.print_schema:
        print(json.dumps(spec_file_schema(), indent=2))
        return 0

    configure_logging(args.verbose)

    overrides = {}
    if args.no_cache is not None:
        overrides["no_cache"] = args.no_cache
    if args.no_keepalive is not None:
        overrides["disable_connection_reuse"] = args.no_keepalive
    if args.timeout is not None:
        overrides["timeout"] = args.timeout

    try:
        settings = Settings(**overrides)
    except (ValidationError, SettingsError) as e:
        parser.error(f"invalid configuration: {e}")

    config = settings.to_config()
    if args.headers:
        forced = merge_headers(config.forced_request_headers, collect_headers(args.headers))
        config = config.model_copy(update={"forced_request_headers": forced})

    return run(args.files, config=config, default_spec_file=settings.default_spec_file)
