"""Persisted plugin configuration document.

The on-disk form uses the host's human-readable keys:

    {
      "Version": "1.0.0",
      "Short Prefab Names To Remove Fireballs From": ["minicopter.entity", ...]
    }
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_PREFAB_NAMES: tuple[str, ...] = (
    "minicopter.entity",
    "scraptransporthelicopter",
    "attackhelicopter.entity",
    "flameturret.deployed",
)


class PluginConfig(BaseModel):
    """Configuration document for the fireball patch.

    Attributes:
        version: Plugin version the document was last written by. None for
            documents that predate versioning.
        prefab_names: Short prefab names whose fireballs are removed.
            Duplicates are harmless and order is irrelevant.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    version: str | None = Field(default=None, alias="Version")
    prefab_names: list[str] = Field(
        default_factory=list,
        alias="Short Prefab Names To Remove Fireballs From",
    )


def default_config(version: str) -> PluginConfig:
    """Build the default configuration stamped with the given version."""
    return PluginConfig(version=version, prefab_names=list(DEFAULT_PREFAB_NAMES))
