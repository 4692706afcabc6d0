"""CLI for generating class files from an XML description."""

import argparse
import sys
from pathlib import Path

from classgen.exceptions import ClassgenError
from classgen.generator.class_builder import generate_project
from classgen.generator.loader import load_project
from classgen.logging import setup_logging

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def main(argv: list[str] | None = None) -> int:
    """Entry point: parse the input file and write every class it describes."""
    parser = argparse.ArgumentParser(description="Generate class files from an XML description")
    parser.add_argument("input", type=Path, help="XML input file")
    parser.add_argument("--output-dir", help="Output directory for classes without their own 'output' attribute")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, help="Log level override")
    parser.add_argument("--logging-config", type=Path, help="YAML logging configuration file")

    args = parser.parse_args(argv)
    setup_logging(args.logging_config, level=args.log_level)

    try:
        project, _ = load_project(args.input)
        paths = generate_project(project, default_output=args.output_dir)
    except ClassgenError as exc:
        print(f"FAIL: {exc}", file=sys.stderr)
        return 1

    for path in paths:
        print(f"  wrote {path}")
    print("Done.")
    return 0
