"""Loading, migrating and saving the persisted configuration.

Usage:
    store = ConfigStore(settings.config_path)
    config = store.load(current_version="1.0.0")
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path

from pydantic import ValidationError

from nofireballs.config.models import PluginConfig, default_config

logger = logging.getLogger(__name__)

VersionKey = tuple[int, ...]

_LEADING_DIGITS = re.compile(r"\d+")


class ConfigError(ValueError):
    """Raised when the persisted configuration document cannot be read."""


def parse_version(version: str | None) -> VersionKey:
    """Parse a dotted version into a comparable tuple.

    Missing versions sort before everything else. Non-numeric parts count
    as zero, so ``"1.2.0-beta"`` compares equal to ``"1.2.0"``.
    """
    if not version:
        return ()

    parts: list[int] = []
    for part in version.strip().split("."):
        match = _LEADING_DIGITS.match(part)
        parts.append(int(match.group()) if match else 0)

    while len(parts) > 1 and parts[-1] == 0:
        parts.pop()
    return tuple(parts)


@dataclass(frozen=True, slots=True)
class ConfigMigration:
    """One config revision.

    Applied to any document stamped older than ``version``. ``apply``
    receives the document and the default for the current version.
    """

    version: str
    apply: Callable[[PluginConfig, PluginConfig], PluginConfig]


def _replace_with_default(config: PluginConfig, default: PluginConfig) -> PluginConfig:
    return default.model_copy(deep=True)


MIGRATIONS: tuple[ConfigMigration, ...] = (ConfigMigration("1.0.0", _replace_with_default),)
"""Ordered config revisions, oldest first."""


def migrate(
    config: PluginConfig,
    current_version: str,
    migrations: Sequence[ConfigMigration] = MIGRATIONS,
) -> PluginConfig:
    """Bring a document up to ``current_version``.

    Every migration newer than the document's version is applied in order,
    then the document is re-stamped. Documents already at or above the
    current version are returned unchanged.
    """
    stored = parse_version(config.version)
    if stored >= parse_version(current_version):
        return config

    logger.warning("Config changes detected! Updating...")
    default = default_config(current_version)
    migrated = config
    for migration in sorted(migrations, key=lambda m: parse_version(m.version)):
        if stored < parse_version(migration.version):
            migrated = migration.apply(migrated, default)

    logger.warning(
        "Config update complete! Updated from version %s to %s",
        config.version,
        current_version,
    )
    return migrated.model_copy(update={"version": current_version})


class ConfigStore:
    """JSON file store for PluginConfig.

    Args:
        path: Location of the configuration document.
        migrations: Ordered config revisions applied on load.
    """

    def __init__(
        self,
        path: Path | str,
        migrations: Sequence[ConfigMigration] = MIGRATIONS,
    ):
        self._path = Path(path)
        self._migrations = tuple(migrations)

    @property
    def path(self) -> Path:
        return self._path

    def read(self) -> PluginConfig | None:
        """Read the stored document, or None if there is none.

        Raises:
            ConfigError: If the document is not valid JSON or does not match
                the configuration schema.
        """
        if not self._path.exists():
            return None

        try:
            return PluginConfig.model_validate_json(self._path.read_text(encoding="utf-8"))
        except (ValidationError, UnicodeDecodeError) as e:
            raise ConfigError(f"Invalid configuration in {self._path}: {e}") from e

    def save(self, config: PluginConfig) -> None:
        """Write the document with the host's key names."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(
            config.model_dump_json(by_alias=True, indent=2) + "\n",
            encoding="utf-8",
        )

    def load(self, current_version: str) -> PluginConfig:
        """Read, migrate and persist the configuration.

        A missing document yields the default. The result is always written
        back before returning.

        Raises:
            ConfigError: If the stored document is malformed.
        """
        config = self.read()
        if config is None:
            logger.info("Creating a new configuration file at %s", self._path)
            config = default_config(current_version)
        else:
            config = migrate(config, current_version, self._migrations)

        self.save(config)
        return config
