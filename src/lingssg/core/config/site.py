"""Typed view over the ``site`` and ``packs`` configuration sections."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from .manager import ConfigManager


@dataclass(frozen=True)
class SiteConfig:
    template_dir: Path
    page_dir: Path
    asset_dir: Path
    output_dir: Path
    packs: List[str] = field(default_factory=list)

    @classmethod
    def from_config(cls, manager: ConfigManager) -> "SiteConfig":
        """Resolve the configured directories against the manager's repo root."""
        root = manager.repo_root

        def resolve(key: str) -> Path:
            path = Path(manager.get(f"site.{key}"))
            return path if path.is_absolute() else root / path

        return cls(
            template_dir=resolve("template_dir"),
            page_dir=resolve("page_dir"),
            asset_dir=resolve("asset_dir"),
            output_dir=resolve("output_dir"),
            packs=list(manager.get("packs.active", [])),
        )


__all__ = ["SiteConfig"]
