"""File and folder name sanitization."""

from __future__ import annotations

import re
import unicodedata
from typing import ClassVar, final


@final
class Sanitizer:
    """Make rendered names safe to use as a single path component."""

    # Characters rejected by at least one mainstream filesystem
    PROHIBITED: ClassVar[re.Pattern[str]] = re.compile(r'[<>:"/\\|?*\x00-\x1f\x7f]')

    MULTIPLE_SPACES: ClassVar[re.Pattern[str]] = re.compile(r"\s+")

    # Maximum lengths (in bytes)
    MAX_FILENAME_LENGTH: ClassVar[int] = 200
    MAX_FOLDER_LENGTH: ClassVar[int] = 120

    @classmethod
    def _truncate(cls, text: str, max_length: int) -> str:
        while text and len(text.encode("utf-8")) > max_length:
            text = text[:-1]
        return text.rstrip(" .")

    @classmethod
    def sanitize_component(cls, text: str | None, max_length: int | None = None) -> str:
        """Sanitize one path component.

        Args:
            text: Raw component text.
            max_length: Maximum length in bytes, no limit when None.

        Returns:
            str: Text that is:
                - NFC normalized
                - Free of path separators, reserved and control characters
                - Collapsed to single spaces
                - Without leading/trailing spaces or trailing dots
                - Empty string if nothing usable remains
        """
        if not text:
            return ""

        text = unicodedata.normalize("NFC", text)
        text = cls.PROHIBITED.sub("", text)
        text = cls.MULTIPLE_SPACES.sub(" ", text).strip()
        text = text.rstrip(". ")
        if max_length:
            text = cls._truncate(text, max_length)
        return text

    @classmethod
    def sanitize_filename(cls, stem: str | None) -> str:
        """Sanitize a file name stem (extension excluded)."""

        return cls.sanitize_component(stem, cls.MAX_FILENAME_LENGTH)

    @classmethod
    def sanitize_folder(cls, name: str | None) -> str:
        """Sanitize an artist or album folder name."""

        return cls.sanitize_component(name, cls.MAX_FOLDER_LENGTH)


__all__ = ["Sanitizer"]
