"""Main entry point for the property attribute decoder CLI."""

import argparse
import json
import sys
from pathlib import Path
from typing import NoReturn

from .domain.models import MalformedAttributesError, PropertyAttributes
from .domain.repositories import (
    CachingTypeRegistry,
    DictTypeRegistry,
    PropertyListSource,
    decode_property,
)
from .domain.services import render_declaration
from .infrastructure.config import OUTPUT_FORMATS, Config
from .infrastructure.config.application_config import parse_type_names
from .infrastructure.logging import LoggerSetup, ProgressTracker, get_logger, log_timing


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Decode Objective-C property attribute strings "
        "(as returned by property_getAttributes)",
        epilog="""
Examples:
  # Decode a single attribute string
  python main.py 'T@"NSString",C,N,V_name' --name name

  # Resolve class names against a list of known classes
  python main.py 'T@"NSString",C,N,V_name' --name name --known-types NSString,NSArray

  # Decode every line of a file (<name><TAB><attributes>) as JSON lines
  python main.py --attributes-file properties.tsv --format json

  # Reconstruct @property declarations
  python main.py --attributes-file properties.tsv --format declaration

  # Using .env file for configuration
  echo 'OBJC_ATTRIBUTES_FILE=properties.tsv' > .env
  python main.py
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "attributes",
        nargs="?",
        help="Attribute string to decode (requires --name)",
    )
    parser.add_argument(
        "-n",
        "--name",
        help="Declared name of the property whose attributes are given",
    )
    parser.add_argument(
        "--attributes-file",
        type=Path,
        metavar="FILE",
        help="Read properties from file, one '<name><TAB><attributes>' per line",
    )
    parser.add_argument(
        "--known-types",
        type=parse_type_names,
        metavar="TYPES",
        help="Comma-separated class names the type registry can resolve",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=OUTPUT_FORMATS,
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--log-dir",
        type=Path,
        help="Also write debug logs to a timestamped file in this directory",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=None,
        help="Enable verbose output with debug logs",
    )
    return parser.parse_args(argv)


def format_result(property_name: str, attributes: PropertyAttributes, output_format: str) -> str:
    """Format decoded attributes for output.

    Args:
        property_name: Declared name of the property
        attributes: Decoded attributes
        output_format: One of OUTPUT_FORMATS

    Returns:
        Text to print for this property
    """
    if output_format == "json":
        return json.dumps({"name": property_name, **attributes.to_dict()})
    if output_format == "declaration":
        return render_declaration(attributes, property_name)

    fields = attributes.to_dict()
    lines = [f"{property_name}:"]
    lines.extend(f"  {key}: {value}" for key, value in fields.items())
    return "\n".join(lines)


@log_timing
def main(argv: list[str] | None = None) -> NoReturn:
    """Main entry point for decoding property attribute strings."""
    args = parse_args(argv)

    # Load configuration
    try:
        config = Config.from_args(
            attributes_file=args.attributes_file,
            known_types=args.known_types,
            output_format=args.format,
            verbose=args.verbose,
            log_dir=args.log_dir,
        )
        config.validate()
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    # Initialize logging
    config.ensure_log_dir()
    LoggerSetup.initialize(config.log_dir, verbose=config.verbose)
    logger = get_logger(__name__)

    # Collect properties (support both a positional string and --attributes-file)
    if args.attributes is not None:
        if args.attributes_file is not None:
            logger.error("Cannot use both an attribute string and --attributes-file")
            sys.exit(1)
        if not args.name:
            logger.error("--name is required when decoding a single attribute string")
            sys.exit(1)
        source = PropertyListSource([(args.name, args.attributes)])
    elif config.attributes_file is not None:
        try:
            source = PropertyListSource.from_file(config.attributes_file)
        except (OSError, ValueError) as e:
            logger.error(f"Error reading attributes file: {e}")
            sys.exit(1)
    else:
        logger.error("Must provide an attribute string or --attributes-file")
        sys.exit(1)

    logger.debug(f"Known types: {', '.join(config.known_types) or '(none)'}")
    registry = CachingTypeRegistry(DictTypeRegistry.from_names(config.known_types))
    tracker = ProgressTracker(logger)

    with tracker.track_operation(f"decode {len(source)} properties"):
        for handle in source.handles():
            property_name = source.get_property_name(handle)
            try:
                attributes = decode_property(source, handle, registry)
            except MalformedAttributesError as e:
                logger.error(f"[FAILED] {property_name}: {e.reason}")
                tracker.count_failed(property_name, e.reason)
                continue

            print(format_result(property_name, attributes, config.output_format))
            tracker.count_decoded()

    logger.debug(f"Type registry cache: {registry.stats()}")
    if len(source) > 1 or tracker.failed:
        tracker.report_summary()

    # Exit with error code if any property failed
    sys.exit(0 if not tracker.failed else 1)


if __name__ == "__main__":
    main()
