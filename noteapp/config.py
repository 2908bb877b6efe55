from __future__ import annotations

# noteapp/config.py
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

import yaml

logger = logging.getLogger(__name__)

# Resolution order, highest first:
# 1) environment variables NOTEAPP_DATA_DIR / NOTEAPP_APP_NAME / NOTEAPP_LOG_LEVEL
# 2) the YAML file named by NOTEAPP_CONFIG, else ./config.yaml
# 3) DEFAULTS
DEFAULTS = {
    "app_name": "NoteApp",
    "data_dir": None,
    "log_level": "INFO",
    "log_to_file": True,
}

_ENV_KEYS = {
    "NOTEAPP_APP_NAME": "app_name",
    "NOTEAPP_DATA_DIR": "data_dir",
    "NOTEAPP_LOG_LEVEL": "log_level",
}


@dataclass(frozen=True)
class Settings:
    app_name: str = "NoteApp"
    data_dir: Optional[Path] = None
    log_level: str = "INFO"
    log_to_file: bool = True


def _read_config_yaml(path: Path) -> dict:
    if not path.exists():
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Ignoring unreadable config %s: %s", path, e)
        return {}
    if not isinstance(cfg, dict):
        logger.warning("Ignoring config %s: top level is not a mapping", path)
        return {}
    out = {}
    for k in DEFAULTS:
        v = cfg.get(k)
        if k == "log_to_file":
            if isinstance(v, bool):
                out[k] = v
        elif isinstance(v, str) and v.strip():
            out[k] = v.strip()
    return out


def config_path(environ: Optional[Mapping[str, str]] = None) -> Path:
    environ = os.environ if environ is None else environ
    return Path(environ.get("NOTEAPP_CONFIG") or "config.yaml")


def load_settings(path: str | Path | None = None, environ: Optional[Mapping[str, str]] = None) -> Settings:
    environ = os.environ if environ is None else environ
    merged = dict(DEFAULTS)
    merged.update(_read_config_yaml(Path(path) if path else config_path(environ)))
    for env_key, key in _ENV_KEYS.items():
        v = environ.get(env_key)
        if v:
            merged[key] = v

    data_dir = merged["data_dir"]
    return Settings(
        app_name=merged["app_name"],
        data_dir=Path(data_dir).expanduser() if data_dir else None,
        log_level=str(merged["log_level"]).upper(),
        log_to_file=bool(merged["log_to_file"]),
    )
