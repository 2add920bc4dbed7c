"""Static sett configuration loader."""

from pathlib import Path
from typing import Any

import yaml

from badger_accounts.core.models import VaultConfig
from badger_accounts.core.registry import VaultRegistry

DEFAULT_SETTS_PATH = Path(__file__).parent / "setts.yaml"


def load_setts(path: Path | str | None = None) -> list[dict[str, Any]]:
    """
    Load raw sett entries from a YAML file.

    Parameters
    ----------
    path : Path | str | None
        YAML file to read, defaults to the packaged setts.yaml

    Returns
    -------
    list[dict[str, Any]]
        Sett entries in file order

    """
    path = Path(path) if path else DEFAULT_SETTS_PATH
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return data.get("setts", [])


def get_sett_configs(path: Path | str | None = None) -> list[VaultConfig]:
    """
    Get validated sett configurations.

    Parameters
    ----------
    path : Path | str | None
        YAML file to read, defaults to the packaged setts.yaml

    Returns
    -------
    list[VaultConfig]
        Sett configurations in file order

    """
    return [VaultConfig.model_validate(entry) for entry in load_setts(path)]


def load_registry(path: Path | str | None = None) -> VaultRegistry:
    """Build a sett registry from a YAML file (packaged setts.yaml by default)."""
    return VaultRegistry(get_sett_configs(path))
