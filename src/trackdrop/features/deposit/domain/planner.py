"""
Summary: Compute relative destination paths for DROP, A-Z and DATE organization.
Why: Planning stays a pure function of tags, names and dates; moving happens elsewhere.
"""

from __future__ import annotations

import string
from datetime import date
from pathlib import Path
from typing import ClassVar, final

from trackdrop.shared.errors import PlanningError
from trackdrop.shared.sanitizer import Sanitizer
from trackdrop.shared.tag_record import TagRecord

from .models import DestinationPlan, OrganizeMode


@final
class DepositPlanner:
    """Plan where files land below a target root."""

    NON_LETTER_BUCKET: ClassVar[str] = "0-9#"
    IMAGE_EXTENSIONS: ClassVar[frozenset[str]] = frozenset(
        {".jpg", ".jpeg", ".png", ".gif", ".webp", ".bmp"}
    )

    @classmethod
    def bucket_for(cls, text: str) -> str:
        """Return the uppercase first letter of ``text`` or ``0-9#``.

        Digits, symbols and non-ASCII letters all share the ``0-9#`` bucket.
        """
        first = text[:1].upper()
        if first and first in string.ascii_uppercase:
            return first
        return cls.NON_LETTER_BUCKET

    @classmethod
    def is_image(cls, file_extension: str) -> bool:
        extension = file_extension.lower()
        if extension and not extension.startswith("."):
            extension = f".{extension}"
        return extension in cls.IMAGE_EXTENSIONS

    @classmethod
    def plan(
        cls,
        record: TagRecord,
        file_name: str,
        file_extension: str,
        mode: OrganizeMode,
        target_root: Path,
        file_date: date | None = None,
    ) -> Path:
        """Return the destination of ``file_name`` relative to ``target_root``.

        Args:
            record: Tags of the file; only ``artist`` and ``album`` are used.
            file_name: Full file name including extension.
            file_extension: Extension used for the image exception (".jpg" or "jpg").
            mode: Organization mode.
            target_root: Target directory; kept for callers building absolute paths.
            file_date: Associated date, required for ``CHRONOLOGICAL_BY_DATE``.

        Raises:
            PlanningError: If ``CHRONOLOGICAL_BY_DATE`` is requested without a date.
        """
        del target_root
        if mode is OrganizeMode.DROP:
            return Path(file_name)

        if mode is OrganizeMode.CHRONOLOGICAL_BY_DATE:
            if file_date is None:
                raise PlanningError(f"No date available to organize {file_name}")
            return Path(f"{file_date.year:04d}", f"{file_date.month:02d}", file_name)

        artist = Sanitizer.sanitize_folder(record.artist)
        if not artist:
            return Path(cls.bucket_for(file_name), file_name)

        components = [cls.bucket_for(record.artist or artist), artist]
        album = Sanitizer.sanitize_folder(record.album)
        if album and not cls.is_image(file_extension):
            components.append(album)
        return Path(*components, file_name)

    @classmethod
    def build_plan(
        cls,
        source: Path,
        record: TagRecord,
        mode: OrganizeMode,
        target_root: Path,
        file_date: date | None = None,
    ) -> DestinationPlan:
        """Plan the absolute destination of ``source``; the filesystem is only inspected."""

        relative = cls.plan(record, source.name, source.suffix, mode, target_root, file_date)
        target = target_root / relative
        return DestinationPlan(
            source=source,
            target=target,
            create_directory=not target.parent.is_dir(),
        )


__all__ = ["DepositPlanner"]
