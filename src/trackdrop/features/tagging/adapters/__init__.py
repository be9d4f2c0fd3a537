"""Tag container adapters."""

from .mutagen_store import MutagenTagStore

__all__ = ["MutagenTagStore"]
