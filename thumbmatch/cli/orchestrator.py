"""
CLI workflow orchestration for Thumbnail Matcher.

Provides the CLIOrchestrator class that coordinates the CLI workflow from
argument parsing through final reporting.
"""

from __future__ import annotations

import logging

from ..cache import HashCache
from ..errors import ThumbmatchError
from ..scanner.dependencies import Image
from ..models import MatchReport
from ..pipeline import match_thumbnails
from ..scanner import ParallelContext
from ..utils.validators import validate_match_params
from .arg_parser import parse_arguments
from .reporting import print_match_report


def setup_logging(verbose: bool = False) -> logging.Logger:
    """
    Configure logging for the CLI.

    Args:
        verbose: Enable verbose (DEBUG level) logging

    Returns:
        Configured logger instance
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    return logging.getLogger(__name__)


class CLIOrchestrator:
    """
    Orchestrates the CLI matching workflow.

    Manages the lifecycle from argument parsing through hashing, matching,
    copying and reporting.
    """

    def __init__(self, argv=None):
        """
        Initialize the orchestrator.

        Args:
            argv: Argument list to parse instead of sys.argv
        """
        self.argv = argv
        self.logger = None
        self.args = None
        self.context = None
        self.show_progress = True
        self.report: MatchReport | None = None

    def run(self) -> int:
        """
        Execute the complete CLI workflow.

        Returns:
            Exit code (0 for success, 1 for error)

        Workflow phases:
        1. Setup & argument parsing
        2. Validation
        3. Configuration
        4. Hashing, matching & copying
        5. Reporting
        """
        self._setup_phase()

        exit_code = self._validate_phase()
        if exit_code != 0:
            return exit_code

        exit_code = self._configure_phase()
        if exit_code != 0:
            return exit_code

        exit_code = self._match_phase()
        if exit_code != 0:
            return exit_code

        self._report_phase()
        return 0

    def _setup_phase(self) -> None:
        """Phase 1: Parse arguments and setup logging."""
        self.args = parse_arguments(self.argv)
        self.logger = setup_logging(self.args.verbose)

    def _validate_phase(self) -> int:
        """
        Phase 2: Validate arguments.

        Returns:
            0 for success, 1 for validation error
        """
        is_valid, error = validate_match_params(
            self.args.fullsize,
            self.args.thumbnail,
            self.args.cache,
            self.args.output,
            threshold=self.args.review_threshold,
            workers=self.args.workers,
        )
        if not is_valid:
            self.logger.error(error)
            return 1
        return 0

    def _configure_phase(self) -> int:
        """
        Phase 3: Configure runtime options.

        Returns:
            0 for success, 1 if the cache could not be cleared
        """
        self.context = ParallelContext(self.args.workers)
        self.show_progress = not self.args.no_progress

        if self.args.clear_cache:
            try:
                HashCache(self.args.cache).clear()
            except OSError as e:
                self.logger.error(f"Cannot clear cache: {e}")
                return 1
        return 0

    def _match_phase(self) -> int:
        """
        Phase 4: Hash, match and copy.

        Returns:
            0 for success, 1 if the run failed
        """
        try:
            self.report = match_thumbnails(
                self.args.fullsize,
                self.args.thumbnail,
                self.args.cache,
                self.args.output,
                context=self.context,
                review_threshold=self.args.review_threshold,
                skip_invalid=self.args.skip_invalid,
                show_progress=self.show_progress,
            )
        except (ThumbmatchError, OSError, ValueError, Image.DecompressionBombError) as e:
            self.logger.error(f"Matching failed: {e}")
            return 1
        return 0

    def _report_phase(self) -> None:
        """Phase 5: Display the report."""
        print_match_report(self.report, self.args.review_threshold)
        self.logger.info(
            f"Copied {len(self.report.copied):,} files to {self.args.output} "
            f"({self.report.review_count(self.args.review_threshold):,} need review)"
        )


__all__ = ['CLIOrchestrator', 'setup_logging']
