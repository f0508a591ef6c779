"""
CLI package for Thumbnail Matcher.

Provides the command-line interface for matching thumbnails to their
full-size originals.

Public API:
- main: Entry point for CLI execution
- CLIOrchestrator: CLI workflow orchestration class
- print_match_report: Function to display results report
"""

from __future__ import annotations

from .orchestrator import CLIOrchestrator, setup_logging
from .arg_parser import create_parser, parse_arguments
from .reporting import print_match_report


def main(argv=None) -> int:
    """
    Main entry point for the CLI.

    Delegates to CLIOrchestrator to execute the complete workflow.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    orchestrator = CLIOrchestrator(argv)
    return orchestrator.run()


__all__ = [
    # Main entry point
    'main',
    # Core classes
    'CLIOrchestrator',
    # Utilities
    'setup_logging',
    'create_parser',
    'parse_arguments',
    'print_match_report',
]
