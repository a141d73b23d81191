"""Command-line surface for rockerize."""

from .args import ParseOutcome, parse_args

__all__ = ["ParseOutcome", "parse_args"]
