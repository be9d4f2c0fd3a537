"""Tag step use cases."""

from .ports import EmbeddedTags, TagStorePort
from .tag_resolver import Resolution, TagResolver, merge_records
from .tag_runner import TagRunner

__all__ = [
    "EmbeddedTags",
    "Resolution",
    "TagResolver",
    "TagRunner",
    "TagStorePort",
    "merge_records",
]
