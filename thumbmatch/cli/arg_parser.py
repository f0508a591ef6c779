"""
Argument parsing for the CLI interface.

Provides functions to create and configure the argument parser for the
thumbnail matcher command-line interface.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from ..user_config import get_user_config


def create_parser() -> argparse.ArgumentParser:
    """
    Create and configure the argument parser for the CLI.

    Defaults for workers, review threshold and cache directory come from the
    user configuration (environment variables, then config file).

    Returns:
        Configured ArgumentParser instance
    """
    config = get_user_config()

    parser = argparse.ArgumentParser(
        prog='thumbmatch',
        description='Find matching full-size images for a set of thumbnails',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s --fullsize ./originals --thumbnail ./thumbs --output ./matched
      Copy the best original for every thumbnail into ./matched

  %(prog)s --fullsize ./originals --thumbnail ./thumbs --output ./matched -w 8
      Hash with 8 parallel workers

  %(prog)s ... --clear-cache
      Rehash everything (the cache is keyed by file name only)
        """
    )

    parser.add_argument(
        '--fullsize',
        type=Path,
        required=True,
        help='Full-size image files (to search through for a match)'
    )

    parser.add_argument(
        '--thumbnail',
        type=Path,
        required=True,
        help='Thumbnail image files (to find a match for)'
    )

    parser.add_argument(
        '--output',
        type=Path,
        required=True,
        help='Directory the matched full-size files are copied to'
    )

    parser.add_argument(
        '--cache',
        type=Path,
        default=Path(config.cache_dir),
        help=f'Hash cache directory. Default: {config.cache_dir}'
    )

    parser.add_argument(
        '--clear-cache',
        action='store_true',
        help='Delete all cached hashes before hashing'
    )

    parser.add_argument(
        '-t', '--review-threshold',
        type=int,
        default=config.review_threshold,
        help=f'Flag matches farther apart than this for manual review (0-64). '
             f'Default: {config.review_threshold}'
    )

    parser.add_argument(
        '--skip-invalid',
        action='store_true',
        help='Skip non-file entries and undecodable images instead of failing'
    )

    # Performance options
    parser.add_argument(
        '-w', '--workers',
        type=int,
        default=config.default_workers,
        help=f'Number of parallel workers. Default: {config.default_workers}'
    )

    # Output options
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Verbose output'
    )

    parser.add_argument(
        '--no-progress',
        action='store_true',
        help='Disable progress bars (useful for piping output)'
    )

    return parser


def parse_arguments(argv=None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        argv: List of argument strings (default: sys.argv)

    Returns:
        Parsed arguments as Namespace object

    Examples:
        >>> args = parse_arguments(['--fullsize', 'f', '--thumbnail', 't', '--output', 'o'])
        >>> args.workers
        4
    """
    parser = create_parser()
    return parser.parse_args(argv)


__all__ = [
    'create_parser',
    'parse_arguments',
]
