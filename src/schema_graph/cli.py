#!/usr/bin/env python3
"""Command-line interface: resolve a schema graph and look up types in it."""

import argparse
import logging
from typing import Optional

from .core.config import get_log_level, load_config_from_env
from .core.exceptions import SchemaResolutionError
from .core.logging import setup_logging
from .models.models import ProxySettings
from .services.domain.schema import SchemaDocument, SchemaGraphResolver

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_TYPE_MISSING = 1
EXIT_RESOLUTION_FAILED = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="schema-graph",
        description="Resolve a WSDL/XSD document with all its imports and includes, and look up types",
    )
    parser.add_argument("root", help="Path or URL of the root WSDL/XSD document")
    parser.add_argument("types", nargs="*", metavar="TYPE", help="Type names to look up")
    parser.add_argument("--proxy", help="Proxy as [scheme://][user:pass@]host[:port]")
    parser.add_argument("--timeout", type=float, help="Seconds per remote fetch")
    parser.add_argument("--log-level", help="Log level (default: SCHEMA_GRAPH_LOG_LEVEL or INFO)")
    return parser


def _print_graph(document: SchemaDocument, depth: int = 0):
    print(f"{'  ' * depth}{document.location}")  # noqa: T201
    for reference in document.references:
        _print_graph(reference, depth + 1)


def main(argv: Optional[list[str]] = None) -> int:
    """Entry point for the schema-graph command."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level or get_log_level())

    try:
        config = load_config_from_env()
    except ValueError as e:
        parser.error(f"invalid SCHEMA_GRAPH_PROXY: {e}")

    updates = {}
    if args.proxy:
        try:
            updates["proxy"] = ProxySettings.from_string(args.proxy)
        except ValueError as e:
            parser.error(f"argument --proxy: {e}")
    if args.timeout is not None:
        updates["timeout"] = args.timeout
    if updates:
        config = config.model_copy(update=updates)

    try:
        root = SchemaGraphResolver(config).resolve(args.root)
    except SchemaResolutionError as e:
        logger.error(f"Schema resolution failed: {e}")
        return EXIT_RESOLUTION_FAILED

    _print_graph(root)

    status = EXIT_OK
    for type_name in args.types:
        document = root.find_type_document(type_name)
        if document is None:
            print(f"{type_name} -> not found")  # noqa: T201
            status = EXIT_TYPE_MISSING
        else:
            print(f"{type_name} -> {document.location}")  # noqa: T201

    return status


if __name__ == "__main__":
    raise SystemExit(main())
