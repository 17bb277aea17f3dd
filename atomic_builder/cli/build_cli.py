"""
Command-line interface for building atomic CSS.

Usage:
    atomic-builder build --objects <catalog> --config <config> --output <css_file> [options]
    atomic-builder summary --objects <catalog> --config <config>
"""

import argparse
import json
import sys

from atomic_builder.core.rules import AtomicBuilder, CatalogLoader, ConfigLoader
from atomic_builder.observability.logger import get_logger, log_operation, setup_logger
from atomic_builder.output.css_writer import CssWriter

logger = get_logger(__name__)


def load_builder(args) -> AtomicBuilder:
    """Load catalog and configuration files and run the build."""
    atomic_objs = CatalogLoader(args.objects).load_objects()
    config = ConfigLoader(args.config).load_config()
    logger.info(f"Loaded {len(atomic_objs)} atomic objects from {args.objects}")
    return AtomicBuilder(atomic_objs, config)


def build_command(args):
    """
    Build the CSS file.

    Args:
        args: Command-line arguments
    """
    try:
        with log_operation("Building atomic CSS", logger=logger, catalog=args.objects):
            builder = load_builder(args)
            writer = CssWriter(builder.settings)
            build = builder.get_build()

            if args.dry_run:
                logger.info("DRY RUN: writing CSS to stdout")
                sys.stdout.write(writer.render(build))
            else:
                writer.write(build, args.output)

        summary = builder.get_build_summary()
        logger.info(f"Selectors generated: {summary['total_selectors']}")
        logger.info(f"Objects expanded: {summary['objects_by_kind']}")

    except Exception as e:
        logger.error(f"Error during build: {e}", exc_info=True)
        sys.exit(1)


def summary_command(args):
    """Print the build summary as JSON."""
    try:
        builder = load_builder(args)
    except Exception as e:
        logger.error(f"Error during build: {e}", exc_info=True)
        sys.exit(1)

    print(json.dumps(builder.get_build_summary(), indent=2))


def main(argv: list[str] | None = None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Generate atomic CSS from a catalog of atomic objects",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Build a stylesheet
  atomic-builder build --objects atoms.yaml --config atomic.yaml --output dist/atomic.css

  # Print the stylesheet instead of writing it
  atomic-builder build --objects atoms.yaml --config atomic.yaml --dry-run

  # Show how many selectors each configuration produces
  atomic-builder summary --objects atoms.yaml --config atomic.yaml
        """
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (default: $LOG_LEVEL or INFO)"
    )
    parser.add_argument(
        "--log-format",
        default="text",
        choices=["json", "text"],
        help="Log output format (default: text)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    for name, help_text in (("build", "Build a CSS file"), ("summary", "Summarize a build")):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument(
            "--objects",
            required=True,
            help="Path to the atomic object catalog (YAML or JSON)"
        )
        sub.add_argument(
            "--config",
            required=True,
            help="Path to the build configuration (YAML or JSON)"
        )

    build_parser = subparsers.choices["build"]
    build_parser.add_argument(
        "--output",
        default="atomic.css",
        help="Path of the CSS file to write (default: atomic.css)"
    )
    build_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the CSS to stdout instead of writing it"
    )

    args = parser.parse_args(argv)
    setup_logger(level=args.log_level, format_type=args.log_format)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == "build":
        build_command(args)
    elif args.command == "summary":
        summary_command(args)


if __name__ == "__main__":
    main()
