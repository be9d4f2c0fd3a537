"""Library configuration: TOML loading, defaults and per-library paths."""

from .config import (
    DEFAULT_FILENAME_TEMPLATE,
    DEFAULT_TITLE_TEMPLATE,
    LibraryConfig,
    load_library_config,
    render_default_config,
    write_default_config,
)
from .paths import library_config_path, library_log_file, resolve_library_root

__all__ = [
    "DEFAULT_FILENAME_TEMPLATE",
    "DEFAULT_TITLE_TEMPLATE",
    "LibraryConfig",
    "library_config_path",
    "library_log_file",
    "load_library_config",
    "render_default_config",
    "resolve_library_root",
    "write_default_config",
]
