import json
from typing import Dict
from pathlib import Path

from .logging_config import get_logger

log = get_logger("settings")

DEFAULTS = {"wine_command": "wine"}

def load_settings(settings_file: Path) -> Dict:
    settings = dict(DEFAULTS)
    if not settings_file.exists():
        return settings
    try:
        data = json.loads(settings_file.read_text("utf-8"))
    except (OSError, ValueError) as e:
        log.warning("ignoring unreadable settings file %s: %s", settings_file, e)
        return settings
    if isinstance(data, dict):
        settings.update({k: data[k] for k in DEFAULTS if isinstance(data.get(k), str) and data[k].strip()})
    return settings

def save_settings(settings_file: Path, settings: dict) -> None:
    data = {k: settings.get(k, v) for k, v in DEFAULTS.items()}
    settings_file.write_text(json.dumps(data, indent=2), encoding="utf-8")
