"""Configuration management for dotscribe projects."""

from __future__ import annotations

import json
from pathlib import Path

from dotscribe.keywords import load_keyword_file
from dotscribe.models import RenderConfig

DOTSCRIBE_DIR = ".dotscribe"
CONFIG_FILE = "config.json"


def _config_path(project_root: Path) -> Path:
    return project_root / DOTSCRIBE_DIR / CONFIG_FILE


def save_config(config: RenderConfig, project_root: Path) -> Path:
    """Save project config to .dotscribe/config.json. Returns the config path."""
    dotscribe_dir = project_root / DOTSCRIBE_DIR
    dotscribe_dir.mkdir(parents=True, exist_ok=True)
    path = _config_path(project_root)
    data = {
        "version": config.version,
        "indent": config.indent,
        "keyword_files": config.keyword_files,
    }
    path.write_text(json.dumps(data, indent=2) + "\n")
    return path


def load_config(project_root: Path) -> RenderConfig:
    """Load project config from .dotscribe/config.json."""
    path = _config_path(project_root)
    if not path.exists():
        raise FileNotFoundError(f"No config found at {path}")
    data = json.loads(path.read_text())
    return RenderConfig(
        version=data.get("version", "0.1.0"),
        indent=data.get("indent", 4),
        keyword_files=data.get("keyword_files", []),
    )


def apply_config(config: RenderConfig, project_root: Path) -> list[str]:
    """Register the keyword files listed in the config.

    Relative paths are resolved against the project root. Returns the names
    of the families that were extended.
    """
    extended: list[str] = []
    for entry in config.keyword_files:
        path = Path(entry)
        if not path.is_absolute():
            path = project_root / path
        for family in load_keyword_file(path):
            if family not in extended:
                extended.append(family)
    return extended


def is_initialized(project_root: Path) -> bool:
    """Check if the project is initialized for dotscribe."""
    return _config_path(project_root).exists()


def ensure_initialized(project_root: Path) -> RenderConfig:
    """Ensure the project is initialized. Raises if not."""
    if not is_initialized(project_root):
        raise RuntimeError(
            "Project is not initialized. Run `dotscribe init` first."
        )
    return load_config(project_root)
