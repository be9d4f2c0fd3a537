"""Filesystem-backed deposit adapters."""

from .file_date import associated_date, parse_tag_date

__all__ = ["associated_date", "parse_tag_date"]
