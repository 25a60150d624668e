"""Command-line interface for mets-distiller."""

import argparse
import logging
import sys
from pathlib import Path

from mets_distiller.compilers import ManifestCompiler
from mets_distiller.exceptions import ManifestError, UsageError

METS_PROMPT = "PLEASE ENTER A METS FILEPATH"
OUTPUT_PROMPT = "PLEASE ENTER OUTPUT DIRECTORY PATH"


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def prompt_for_path(prompt: str, what: str) -> Path:
    """Ask for a path on standard input.

    Args:
        prompt: Text shown to the operator
        what: Name of the value, used in the error message

    Returns:
        The entered path

    Raises:
        UsageError: If the response is empty or input is closed
    """
    print()
    print(prompt)
    try:
        response = input().strip()
    except EOFError:
        response = ""
    if not response:
        raise UsageError(f"Must enter {what}")
    return Path(response)


def _path_or_prompt(value: str, prompt: str, what: str) -> Path:
    """Use a flag value unless it is blank, otherwise prompt for it."""
    if value.strip():
        return Path(value.strip())
    return prompt_for_path(prompt, what)


def build_manifest(args: argparse.Namespace) -> int:
    """Compile the manifest for the METS document in args.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        mets_path = _path_or_prompt(args.mets, METS_PROMPT, "a METS filepath")
        output_dir = _path_or_prompt(args.out, OUTPUT_PROMPT, "an output directory path")

        compiler = ManifestCompiler()
        manifest = compiler.compile(mets_path, output_dir)

        logger.info(f"Success! Manifest for {manifest.storage_location or mets_path.name}")
        logger.info(f"  Title: {manifest.title}")
        logger.info(f"  Files: {manifest.file_count}")
        logger.info(f"  Output: {output_dir}")
        return 0

    except ManifestError as e:
        logger.error(f"Failed to build manifest: {e.message}")
        return 1


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="mets-distiller",
        description="Convert an Archivematica METS document into a per-file JSON manifest",
    )
    parser.add_argument(
        "--mets",
        default="",
        help="Path to the METS document (prompted for if omitted or empty)",
    )
    parser.add_argument(
        "--out",
        default="",
        help="Output directory for the manifest (prompted for if omitted or empty)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    args = parser.parse_args(argv)
    return build_manifest(args)


if __name__ == "__main__":
    sys.exit(main())
