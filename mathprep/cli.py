#!/usr/bin/env python3
"""
Command-line interface for mathprep.

Normalizes math delimiters in text files, or from stdin to stdout.

Usage:
    mathprep < answer.md                       # stdin -> stdout
    mathprep notes/*.md --output-dir out/      # write normalized copies
    mathprep answer.md --in-place              # overwrite inputs
    echo '\\[ x^2 \\]' | mathprep --trace      # show every stage
"""

import argparse
import sys
import time
from pathlib import Path
from typing import Optional

from tqdm import tqdm

from mathprep.pipeline import LatexPreprocessor
from mathprep.utils.config import Config, get_config
from mathprep.utils.logger import setup_logger, get_logger, log_processing_stats


def parse_arguments(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """
    Parse command line arguments.

    Args:
        argv: Argument list. Defaults to sys.argv[1:].

    Returns:
        Parsed arguments namespace.
    """
    parser = argparse.ArgumentParser(
        prog="mathprep",
        description="Normalize LaTeX math delimiters in model output.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  mathprep < answer.md                     # Read stdin, write stdout
  mathprep a.md b.md --output-dir out/     # Write normalized copies
  mathprep a.md --in-place                 # Overwrite the input files
  echo "x^2" | mathprep --trace            # Show every stage (stdin only)
        """
    )

    parser.add_argument(
        "paths",
        nargs="*",
        type=Path,
        help="Text files to normalize (default: read stdin)"
    )

    target = parser.add_mutually_exclusive_group()
    target.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Directory for normalized files (default: next to each input)"
    )
    target.add_argument(
        "--in-place",
        action="store_true",
        help="Overwrite each input file with its normalized text"
    )

    parser.add_argument(
        "--trace",
        action="store_true",
        help="Print the output of every pipeline stage (stdin mode only)"
    )

    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print a summary after processing files"
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose (DEBUG) logging"
    )

    args = parser.parse_args(argv)
    if args.trace and args.paths:
        parser.error("--trace reads stdin and cannot be combined with file paths")

    return args


def resolve_output_path(
    path: Path,
    config: Config,
    output_dir: Optional[Path],
    in_place: bool
) -> Path:
    """
    Decide where the normalized text of `path` is written.

    Args:
        path: Input file.
        config: Application configuration.
        output_dir: Target directory, if given.
        in_place: Overwrite the input.

    Returns:
        Destination path.
    """
    if in_place:
        return path
    if output_dir is not None:
        return output_dir / path.name
    return path.with_name(f"{path.stem}{config.output_suffix}{path.suffix}")


def print_trace(preprocessor: LatexPreprocessor, text: str) -> None:
    """
    Print every stage's output for one text.

    Args:
        preprocessor: Pipeline to run.
        text: Raw input text.
    """
    for result in preprocessor.trace(text):
        marker = "*" if result.changed else " "
        print(f"--- {marker} {result.name} " + "-" * 30)
        print(result.output)


def run_stdin(preprocessor: LatexPreprocessor, trace: bool) -> None:
    """
    Normalize stdin and write the result to stdout.

    Args:
        preprocessor: Pipeline to run.
        trace: Print each stage instead of only the final text.
    """
    text = sys.stdin.read()
    if trace:
        print_trace(preprocessor, text)
        return
    sys.stdout.write(preprocessor.process(text))
    sys.stdout.write("\n")


def run_files(
    preprocessor: LatexPreprocessor,
    config: Config,
    paths: list[Path],
    output_dir: Optional[Path],
    in_place: bool,
    show_stats: bool,
    logger
) -> int:
    """
    Normalize a list of files.

    Args:
        preprocessor: Pipeline to run.
        config: Application configuration.
        paths: Input files.
        output_dir: Target directory, if given.
        in_place: Overwrite inputs.
        show_stats: Print a summary when done.
        logger: Logger instance.

    Returns:
        Process exit status (0 when every file succeeded).
    """
    start_time = time.time()

    if output_dir is not None:
        output_dir.mkdir(parents=True, exist_ok=True)

    changed = 0
    errors = []

    for path in tqdm(paths, desc="Normalizing", unit="file", disable=len(paths) < 2):
        try:
            text = path.read_text(encoding=config.encoding)
            normalized = preprocessor.process(text)

            destination = resolve_output_path(path, config, output_dir, in_place)
            destination.write_text(normalized, encoding=config.encoding)

            if normalized != text:
                changed += 1
            logger.info(f"Normalized {path} -> {destination}")

        except (OSError, UnicodeDecodeError) as e:
            errors.append((path, str(e)))
            logger.error(f"Failed to process {path}: {e}")

    if errors:
        print(f"\n⚠️  {len(errors)} files had errors:")
        for path, error in errors:
            print(f"   • {path}: {error[:80]}")

    total_time = time.time() - start_time

    if show_stats:
        print("\n" + "=" * 40)
        print("📊 NORMALIZATION SUMMARY")
        print("=" * 40)
        print(f"📄 Files: {len(paths)}")
        print(f"✏️  Changed: {changed}")
        print(f"❌ Failed: {len(errors)}")
        print(f"⏱️  Time: {total_time:.2f} seconds")

    log_processing_stats(
        logger,
        "Normalization",
        len(paths),
        total_time,
        {"changed": changed, "errors": len(errors)}
    )

    return 1 if errors else 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the command-line interface."""
    args = parse_arguments(argv)

    config = get_config()
    config_errors = config.validate()
    if config_errors:
        for error in config_errors:
            print(f"❌ Configuration error: {error}", file=sys.stderr)
        return 2

    log_level = "DEBUG" if args.verbose else config.log_level
    setup_logger(log_level=log_level, log_dir=config.get_log_path())
    logger = get_logger("cli")

    logger.debug(f"Arguments: {args}")
    logger.debug(f"Config: {config}")

    preprocessor = LatexPreprocessor()

    try:
        if not args.paths:
            run_stdin(preprocessor, args.trace)
            return 0

        return run_files(
            preprocessor,
            config,
            args.paths,
            output_dir=args.output_dir,
            in_place=args.in_place,
            show_stats=args.stats,
            logger=logger
        )
    except KeyboardInterrupt:
        print("\n\n⚠️  Interrupted by user.", file=sys.stderr)
        logger.warning("Interrupted by user")
        return 1


if __name__ == "__main__":
    sys.exit(main())
