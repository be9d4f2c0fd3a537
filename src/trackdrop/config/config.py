"""Library configuration management for trackdrop."""

from __future__ import annotations

import dataclasses
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Final

from trackdrop.config.file_ops import ensure_file_with_template
from trackdrop.config.paths import library_config_path, resolve_library_path
from trackdrop.features.deposit.domain.models import OrganizeMode
from trackdrop.features.tagging.domain.template import Template
from trackdrop.platform.logging import logger
from trackdrop.shared.errors import ConfigError

DEFAULT_TITLE_TEMPLATE: Final[str] = "{title} ({feat}) [{remix}]"
DEFAULT_FILENAME_TEMPLATE: Final[str] = "{artist} - {title}"

# Accepted keys (lowercase) and the TOML type each one must have
_KEY_TYPES: Final[dict[str, type]] = {
    "override_artist": bool,
    "title_template": str,
    "filename_template": str,
    "organize": str,
    "auto_overwrite": bool,
    "auto_tag": bool,
    "input_dir": str,
    "target_dir": str,
}


@dataclass(frozen=True, slots=True)
class LibraryConfig:
    """Fully resolved configuration of one library.

    Templates are parsed and directories are absolute, so nothing
    downstream re-reads configuration.
    """

    library_root: Path
    override_artist: bool = False
    title_template: Template = field(
        default_factory=lambda: Template.parse(DEFAULT_TITLE_TEMPLATE)
    )
    filename_template: Template = field(
        default_factory=lambda: Template.parse(DEFAULT_FILENAME_TEMPLATE)
    )
    organize: OrganizeMode = OrganizeMode.DROP
    auto_overwrite: bool = False
    auto_tag: bool = False
    input_dir: Path | None = None
    target_dir: Path | None = None

    def require_input_dir(self) -> Path:
        """Return ``input_dir`` or raise ConfigError when it is unset."""

        if self.input_dir is None:
            raise ConfigError(
                f"'INPUT_DIR' must be set in {library_config_path(self.library_root)}"
            )
        return self.input_dir

    def require_target_dir(self) -> Path:
        """Return ``target_dir`` or raise ConfigError when it is unset."""

        if self.target_dir is None:
            raise ConfigError(
                f"'TARGET_DIR' must be set in {library_config_path(self.library_root)}"
            )
        return self.target_dir

    def replace(self, **changes: Any) -> "LibraryConfig":
        return dataclasses.replace(self, **changes)


def _normalize_keys(raw: Mapping[str, Any], origin: str) -> dict[str, Any]:
    """Lowercase keys and validate them against ``_KEY_TYPES``."""

    values: dict[str, Any] = {}
    for key, value in raw.items():
        name = key.strip().lower()
        expected = _KEY_TYPES.get(name)
        if expected is None:
            valid = ", ".join(sorted(k.upper() for k in _KEY_TYPES))
            raise ConfigError(f"Unknown configuration key '{key}' in {origin}. Valid keys: {valid}")
        if not isinstance(value, expected):
            raise ConfigError(
                f"Configuration key '{key}' in {origin} must be a {expected.__name__}, "
                + f"got {type(value).__name__}"
            )
        values[name] = value
    return values


def _read_config_file(path: Path) -> dict[str, Any]:
    if not path.exists():
        logger.debug("No configuration file at %s, using defaults", path)
        return {}
    try:
        with open(path, "rb") as f:
            raw = tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Cannot read {path}: {exc.strerror or exc}") from exc
    logger.debug("Configuration loaded from %s", path)
    return _normalize_keys(raw, str(path))


def _parse_template(name: str, source: str) -> Template:
    try:
        return Template.parse(source)
    except ConfigError as exc:
        raise ConfigError(f"Invalid {name.upper()} '{source}': {exc}") from exc


def load_library_config(
    library_root: Path,
    overrides: Mapping[str, Any] | None = None,
) -> LibraryConfig:
    """Load ``<library_root>/.trackdrop/config.toml`` and apply ``overrides``.

    Args:
        library_root: Root directory of the library.
        overrides: Per-run values (typically from CLI flags) keyed like the
            config file; ``None`` values are ignored.

    Returns:
        LibraryConfig: Resolved configuration; a missing file means defaults.

    Raises:
        ConfigError: On unreadable TOML, unknown keys, wrong value types,
            invalid templates or an invalid ORGANIZE value.
    """
    root = library_root.expanduser().resolve()
    values = _read_config_file(library_config_path(root))
    if overrides:
        present = {key: value for key, value in overrides.items() if value is not None}
        if isinstance(present.get("organize"), OrganizeMode):
            present["organize"] = present["organize"].value
        values.update(_normalize_keys(present, "command line overrides"))

    input_dir = values.get("input_dir")
    target_dir = values.get("target_dir")
    return LibraryConfig(
        library_root=root,
        override_artist=values.get("override_artist", False),
        title_template=_parse_template(
            "title_template", values.get("title_template", DEFAULT_TITLE_TEMPLATE)
        ),
        filename_template=_parse_template(
            "filename_template", values.get("filename_template", DEFAULT_FILENAME_TEMPLATE)
        ),
        organize=OrganizeMode.from_user_input(values.get("organize")),
        auto_overwrite=values.get("auto_overwrite", False),
        auto_tag=values.get("auto_tag", False),
        input_dir=resolve_library_path(root, input_dir) if input_dir else None,
        target_dir=resolve_library_path(root, target_dir) if target_dir else None,
    )


def _format_toml_value(value: Any) -> str:
    """Format a value for TOML serialization."""

    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, Path)):
        escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    return str(value)


def render_default_config() -> str:
    """Render the default configuration as TOML with inline guidance."""

    lines: list[str] = []
    lines.append("# trackdrop library configuration")
    lines.append("# Keys are case-insensitive.")
    lines.append("")

    lines.append("# Directory holding new files to tag and deposit (relative to the library)")
    lines.append('# INPUT_DIR = "inbox"')
    lines.append("")
    lines.append("# Directory files are deposited into (relative to the library)")
    lines.append('# TARGET_DIR = "music"')
    lines.append("")

    lines.append("# Templates use {album}, {album_artist}, {artist}, {feat}, {genre},")
    lines.append("# {remix}, {title}, {track} and {year}. A tag wrapped in (), [] or <>")
    lines.append("# disappears together with its brackets when the tag is absent.")
    lines.append(f"TITLE_TEMPLATE = {_format_toml_value(DEFAULT_TITLE_TEMPLATE)}")
    lines.append(f"FILENAME_TEMPLATE = {_format_toml_value(DEFAULT_FILENAME_TEMPLATE)}")
    lines.append("")

    lines.append("# Prefer the artist parsed from the title over the embedded artist tag")
    lines.append(f"OVERRIDE_ARTIST = {_format_toml_value(False)}")
    lines.append("")

    lines.append("# Organization of deposited files: DROP, A-Z or DATE")
    lines.append(f"ORGANIZE = {_format_toml_value(OrganizeMode.DROP.value)}")
    lines.append("")

    lines.append("# Apply tag proposals and replace existing files without asking")
    lines.append(f"AUTO_TAG = {_format_toml_value(False)}")
    lines.append(f"AUTO_OVERWRITE = {_format_toml_value(False)}")
    lines.append("")

    return "\n".join(lines)


def write_default_config(library_root: Path, *, overwrite: bool = False) -> bool:
    """Write the default config file for ``library_root``.

    Returns:
        bool: ``True`` when the file was written, ``False`` if one already existed.
    """

    path = library_config_path(library_root)
    created = ensure_file_with_template(
        path, template_provider=render_default_config, overwrite=overwrite
    )
    if created:
        logger.info("Configuration written to %s", path)
    else:
        logger.info("Configuration already exists at %s", path)
    return created


__all__ = [
    "DEFAULT_FILENAME_TEMPLATE",
    "DEFAULT_TITLE_TEMPLATE",
    "LibraryConfig",
    "load_library_config",
    "render_default_config",
    "write_default_config",
]
