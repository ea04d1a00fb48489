"""
Command-line interface for the package.xml viewer.

This module handles CLI argument parsing, logging configuration,
and mapping errors to exit codes.
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from package_xml_viewer import __version__
from package_xml_viewer.config_models import ViewerConfig, allowed_values
from package_xml_viewer.exceptions import (
    FileReadError,
    InvalidOptionError,
    ParseError,
    RenderError,
)
from package_xml_viewer.models import OutputFormat, SortPolicy
from package_xml_viewer.pipeline import view_file, write_output

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    formats = allowed_values(OutputFormat)
    policies = allowed_values(SortPolicy)
    parser = argparse.ArgumentParser(
        prog="package-xml-viewer",
        description="Salesforce package.xml viewer - displays metadata components in readable formats",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Bordered table, sorted by type then member
  package-xml-viewer manifest/package.xml

  # CSV in document order
  package-xml-viewer --format csv --sort as-is manifest/package.xml

  # TSV with CustomField/Layout/... parents in their own column
  package-xml-viewer -f tsv --split-parent manifest/package.xml
        """
    )
    parser.add_argument("path", type=Path, help="Path to the package.xml file")
    parser.add_argument("-f", "--format", default=OutputFormat.TABLE.value,
                        metavar="{" + ",".join(formats) + "}",
                        help="Output format (default: %(default)s)")
    parser.add_argument("-s", "--sort", default=SortPolicy.BY_TYPE.value,
                        metavar="{" + ",".join(policies) + "}",
                        help="Sort order (default: %(default)s)")
    parser.add_argument("--split-parent", action="store_true",
                        help="Split Parent.Member names (CustomField, Layout, ...) into a Parent column")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level for diagnostics on stderr")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _silence_stdout() -> None:
    """Point stdout at devnull so the interpreter's final flush cannot fail again."""
    try:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
    except (OSError, ValueError, AttributeError) as e:
        logger.debug(f"Could not redirect stdout to {os.devnull}: {e}")


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point.

    Returns:
        Exit code: 0 = success, 1 = read/parse/output failure, 2 = invalid option
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        stream=sys.stderr,
    )
    logging.getLogger().setLevel(args.log_level)

    try:
        config = ViewerConfig.from_options(
            output_format=args.format,
            sort_policy=args.sort,
            split_parent=args.split_parent,
        )
        output = view_file(args.path, config)
        write_output(output, sys.stdout)
        return EXIT_OK

    except InvalidOptionError as e:
        logger.error(f"Invalid option: {e}")
        return EXIT_USAGE
    except FileReadError as e:
        logger.error(f"File error: {e}")
        return EXIT_FAILURE
    except ParseError as e:
        logger.error(f"Failed to parse {args.path}: {e}")
        return EXIT_FAILURE
    except BrokenPipeError:
        _silence_stdout()
        return EXIT_OK
    except RenderError as e:
        logger.error(f"Output error: {e}")
        return EXIT_FAILURE
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
