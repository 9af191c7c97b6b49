"""Symbol to logo URL lookup backed by a YAML asset.

The directory is loaded once and never changes afterwards. Tests can build
one from a plain mapping instead of the bundled file.
"""

from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml
from loguru import logger
from pydantic import BaseModel, Field, ValidationError

from market_board.core.errors import LogoDirectoryError


class LogoAsset(BaseModel):
    """Shape of the YAML logo file."""

    logos: dict[str, str] = Field(default_factory=dict, description="Symbol -> logo URL")


class LogoDirectory:
    """Immutable exact-case lookup of ticker symbols to logo URLs."""

    def __init__(self, logos: Mapping[str, str]) -> None:
        self._logos = MappingProxyType(dict(logos))

    def __len__(self) -> int:
        return len(self._logos)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._logos

    @property
    def symbols(self) -> list[str]:
        return sorted(self._logos)

    def resolve(self, symbol: str | None) -> str | None:
        """Return the logo URL for ``symbol`` or None when there is none."""
        if not symbol:
            return None
        url = self._logos.get(symbol)
        return url or None

    @classmethod
    def from_yaml(cls, path: Path) -> "LogoDirectory":
        """Load a directory from a YAML file with a top-level ``logos`` map.

        Raises:
            LogoDirectoryError: If the file is missing or malformed
        """
        if not path.exists():
            raise LogoDirectoryError(f"Logo directory not found: {path}")

        logger.info(f"Loading logo directory from {path}")
        try:
            with path.open("r", encoding="utf-8") as f:
                raw: dict[str, Any] | None = yaml.safe_load(f)
            asset = LogoAsset(**(raw or {}))
        except (yaml.YAMLError, ValidationError, TypeError) as e:
            raise LogoDirectoryError(f"Malformed logo directory {path}: {e}") from e

        logger.debug(f"Loaded {len(asset.logos)} logos")
        return cls(asset.logos)


def resolve_logo(symbol: str | None, directory: LogoDirectory) -> str | None:
    """Exact-match lookup; absent symbols yield no logo."""
    return directory.resolve(symbol)
