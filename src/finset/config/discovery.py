"""Locate and read ``finset.toml``.

Lookup order: the ``FINSET_CONFIG`` environment variable, then the
nearest ``finset.toml`` in the start directory or any of its parents.
"""

from __future__ import annotations

import os
import tomllib
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from finset.config.models import FinsetConfig

CONFIG_FILENAME = "finset.toml"
CONFIG_ENV_VAR = "FINSET_CONFIG"


def _search_dirs(start: Path) -> Iterator[Path]:
    directory = start.resolve()
    yield directory
    yield from directory.parents


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start* (default: cwd), or None.

    A ``FINSET_CONFIG`` that names a missing file disables the walk-up
    rather than falling back to it.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    for directory in _search_dirs(start or Path.cwd()):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_toml(path: Path) -> dict[str, Any]:
    """Parse *path* as TOML.

    Raises:
        tomllib.TOMLDecodeError: If the file is not valid TOML.
    """
    with path.open("rb") as fh:
        return tomllib.load(fh)


def load_config(path: Path | None = None, cwd: Path | None = None) -> FinsetConfig:
    """Validate the config at *path*, discovering it from *cwd* when omitted.

    No file at all means every section keeps its defaults.
    """
    path = path or find_config(cwd)
    if path is None:
        return FinsetConfig()
    return FinsetConfig.model_validate(read_toml(path))
