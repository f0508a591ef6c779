"""
Report formatting and display for the CLI interface.

Prints the matches of a run in a human-readable format.
"""

from __future__ import annotations

from ..models import Match, MatchReport
from ..utils.formatters import format_number


def _print_section_header(title: str) -> None:
    """Print a section header with divider lines."""
    print("\n" + "-" * 70)
    print(title)
    print("-" * 70)


def _format_match_line(match: Match, review_threshold: int) -> str:
    marker = "[REVIEW]" if match.needs_review(review_threshold) else "[OK]    "
    return f"  {marker} {match.thumbnail} -> {match.fullsize} (distance {match.distance})"


def print_match_report(report: MatchReport, review_threshold: int) -> None:
    """
    Print a report of a matching run to stdout.

    Matches needing review are listed in their own section so they can be
    checked by hand.
    """
    print("\n" + "=" * 70)
    print("THUMBNAIL MATCH REPORT")
    print("=" * 70)

    review = [m for m in report.matches if m.needs_review(review_threshold)]
    confident = [m for m in report.matches if not m.needs_review(review_threshold)]

    print(f"\nMatched thumbnails: {format_number(len(report.matches))}")
    print(f"Needing manual review: {format_number(len(review))} "
          f"(distance > {review_threshold})")
    print(f"Files copied: {format_number(len(report.copied))}")

    if confident:
        _print_section_header("MATCHES")
        for match in confident:
            print(_format_match_line(match, review_threshold))

    if review:
        _print_section_header("NEEDS MANUAL REVIEW")
        for match in review:
            print(_format_match_line(match, review_threshold))

    print("\n" + "=" * 70)


__all__ = ['print_match_report']
