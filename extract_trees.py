#!/usr/bin/env python
"""
Tree Extraction Tool - Main Script

Extracts every tree from a multi-tree file (Newick, Nexus, NeXML, ...) and writes
each one to its own Newick file named '<tree name>.tre'.
This script serves as the command-line interface to the extraction pipeline.
"""

import sys
import argparse
import logging
from tree_extraction.pipeline import ExtractionRequest, TreeExtractionPipeline
from tree_extraction.tree_source import SUPPORTED_FORMATS


# Set up logging
def setup_logging(log_level, log_file=None):
    """Configure logging system based on specified log level and optional log file."""
    numeric_level = getattr(logging, log_level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {log_level}")

    # Basic configuration for console logging; stdout is never used
    logging.basicConfig(
        level=numeric_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        stream=sys.stderr
    )

    # Add file handler if log_file is specified
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric_level)

        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        file_handler.setFormatter(formatter)

        logging.getLogger().addHandler(file_handler)

        logging.info(f"Logging to file: {log_file}")


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports usage errors with exit status 1."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = _ArgumentParser(
        description="Extract the trees in a multi-tree file into one Newick file per tree",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )

    parser.add_argument(
        "--input", "-i",
        required=True,
        help="Input tree file, or '-' to read standard input"
    )

    parser.add_argument(
        "--format", "-f",
        required=True,
        help=f"Format of the input data, one of: {', '.join(SUPPORTED_FORMATS)}"
    )

    parser.add_argument(
        "--prefix", "-p",
        default="tree",
        help="Prefix used to name trees that carry no name of their own"
    )

    parser.add_argument(
        "--output-dir", "-o",
        default=".",
        help="Directory to write the tree files to"
    )

    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error", "critical"],
        default="info",
        help="Set logging level"
    )

    parser.add_argument(
        "--log-file",
        help="Path to output log file"
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s 0.1.0"
    )

    return parser.parse_args(argv)


def main(argv=None):
    """Main function."""
    args = parse_args(argv)

    try:
        setup_logging(args.log_level, args.log_file)
    except OSError as e:
        print(f"could not open log file {args.log_file}: {e.strerror}", file=sys.stderr)
        return 1
    logger = logging.getLogger(__name__)

    request = ExtractionRequest(
        input_path=args.input,
        format_name=args.format,
        name_prefix=args.prefix,
        output_dir=args.output_dir
    )

    logger.info(f"Extracting {args.format} trees from {args.input}")
    pipeline = TreeExtractionPipeline(request)
    _, error = pipeline.run()

    if error:
        print(error.message, file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
