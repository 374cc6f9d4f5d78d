import os
from pathlib import Path

import yaml

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "contact_book.yml"
CONFIG_ENV_VAR = "CONTACT_BOOK_CONFIG"

DEFAULTS = {
    "storage": {"default_file": "contactos.csv", "extension": ".csv"},
    "display": {"page_size": 10},
    "logging": {
        "level": "INFO",
        "console_level": "WARNING",
        "file": None,
        "dir": "logs",
        "rotate": False,
    },
    "debug": False,
}


class CBConfig:
    def __init__(self, data):
        self.storage = {**DEFAULTS["storage"], **(data.get("storage") or {})}
        self.display = {**DEFAULTS["display"], **(data.get("display") or {})}
        self.logging = {**DEFAULTS["logging"], **(data.get("logging") or {})}
        self.debug = bool(data.get("debug", DEFAULTS["debug"]))

    @property
    def page_size(self) -> int:
        return int(self.display.get("page_size") or 10)

    @property
    def extension(self) -> str:
        return self.storage.get("extension") or ".csv"


def load_config(path=None) -> 'CBConfig':
    explicit = path or os.environ.get(CONFIG_ENV_VAR)
    config_path = Path(explicit) if explicit else CONFIG_PATH

    if not config_path.exists():
        if explicit:
            raise FileNotFoundError(f"Config file not found: {config_path}")
        return CBConfig({})

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return CBConfig(data)

_config_cache = None

def get_config() -> 'CBConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache

def reset_config() -> None:
    global _config_cache
    _config_cache = None
