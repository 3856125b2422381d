"""
Paths and settings for the corpus tools.

Defaults live in module constants. An optional studyguide.yaml next to the
notes (or passed with --config) overrides them, and STUDYGUIDE_NOTES_DIR
overrides the notes root.
"""

import os
from dataclasses import dataclass, field, fields
from pathlib import Path

import yaml

from .errors import ConfigError

# ── Config ───────────────────────────────────────────────────────────────────

PROJECT_DIR = Path(__file__).parent.parent.resolve()
NOTES_DIR = PROJECT_DIR / "notes"
CONFIG_FILE = PROJECT_DIR / "studyguide.yaml"
NOTES_ENV_VAR = "STUDYGUIDE_NOTES_DIR"

SECTIONS = ("cloud", "dsa", "system-design")

# Words that count as a complexity discussion in a DSA note
COMPLEXITY_MARKERS = ("complexity", "o(", "time:", "space:")

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)
LINK_TIMEOUT = 10
LINK_WORKERS = 20


@dataclass
class Settings:
    notes_dir: Path = NOTES_DIR
    sections: tuple[str, ...] = SECTIONS
    complexity_markers: tuple[str, ...] = COMPLEXITY_MARKERS
    link_timeout: float = LINK_TIMEOUT
    link_workers: int = LINK_WORKERS
    user_agent: str = USER_AGENT
    ignore: list[str] = field(default_factory=list)


def load_settings(path: Path | None = None, notes_dir: Path | None = None) -> Settings:
    """Build Settings from defaults, then the YAML file, then env, then args."""
    settings = Settings()

    config_path = Path(path) if path else CONFIG_FILE
    if path and not config_path.exists():
        raise ConfigError(f"config file not found: {config_path}")
    if config_path.exists():
        with open(config_path, "r", encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigError(f"{config_path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"{config_path}: top level must be a mapping")
        _apply(settings, data, config_path)

    env_dir = os.environ.get(NOTES_ENV_VAR)
    if env_dir:
        settings.notes_dir = Path(env_dir)
    if notes_dir:
        settings.notes_dir = Path(notes_dir)
    return settings


def _apply(settings: Settings, data: dict, source: Path):
    known = {f.name for f in fields(Settings)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"{source}: unknown keys {unknown}")

    for key, value in data.items():
        if key == "notes_dir":
            value = Path(value)
            if not value.is_absolute():
                value = source.parent / value
        elif key in ("sections", "complexity_markers"):
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                raise ConfigError(f"{source}: {key} must be a list of strings")
            value = tuple(v.lower() if key == "complexity_markers" else v for v in value)
        elif key == "ignore":
            if not isinstance(value, list):
                raise ConfigError(f"{source}: ignore must be a list of glob patterns")
        elif key in ("link_timeout", "link_workers"):
            if not isinstance(value, (int, float)) or value <= 0:
                raise ConfigError(f"{source}: {key} must be a positive number")
            if key == "link_workers":
                value = int(value)
        setattr(settings, key, value)
