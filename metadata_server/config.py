from __future__ import annotations

import copy
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Mapping, Optional

import yaml

DEFAULT_CONFIG_PATH = "config/server.yaml"

DEFAULTS: Dict = {
    "server": {"host": "127.0.0.1", "port": 3000},
    "asset": {"path": None},
    "cors": {"allow_origins": ["*"], "allow_methods": ["GET"]},
    "logging": {"level": "INFO"},
}


def _merge(base: Dict, override: Mapping) -> Dict:
    out = copy.deepcopy(base)
    for k, v in override.items():
        if isinstance(v, Mapping) and isinstance(out.get(k), dict):
            out[k] = _merge(out[k], v)
        else:
            out[k] = v
    return out


def _load_yaml(path: str) -> Dict:
    if not Path(path).exists():
        return {}
    try:
        with open(path, "r") as fh:
            data = yaml.safe_load(fh) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"invalid config file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"config file {path} must contain a mapping")
    return data


def _port(v) -> int:
    try:
        port = int(v)
    except (TypeError, ValueError):
        raise ValueError(f"port must be an integer, got {v!r}") from None
    if not (0 <= port <= 65535):
        raise ValueError(f"port out of range: {port}")
    return port


@dataclass
class Settings:
    host: str = "127.0.0.1"
    port: int = 3000
    asset_path: Optional[str] = None
    allow_origins: List[str] = field(default_factory=lambda: ["*"])
    allow_methods: List[str] = field(default_factory=lambda: ["GET"])
    log_level: str = "INFO"

    @property
    def bind(self) -> str:
        return f"{self.host}:{self.port}"


def load_settings(path: Optional[str] = None, env: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Resolve settings: built-in defaults < YAML file < environment.

    The file is `path`, else $METADATA_CONFIG, else config/server.yaml; a
    missing file just means defaults.
    """
    env = os.environ if env is None else env
    cfg_path = path or env.get("METADATA_CONFIG") or DEFAULT_CONFIG_PATH
    P = _merge(DEFAULTS, _load_yaml(cfg_path))

    server = P.get("server", {})
    cors = P.get("cors", {})
    return Settings(
        host=str(env.get("METADATA_HOST") or server.get("host", "127.0.0.1")),
        port=_port(env.get("METADATA_PORT") or server.get("port", 3000)),
        asset_path=env.get("METADATA_ASSET_PATH") or P.get("asset", {}).get("path"),
        allow_origins=list(cors.get("allow_origins", ["*"])),
        allow_methods=[m.upper() for m in cors.get("allow_methods", ["GET"])],
        log_level=str(env.get("LOG_LEVEL") or P.get("logging", {}).get("level", "INFO")).upper(),
    )
