import os
import tomllib
from copy import deepcopy
from importlib import import_module
from pathlib import Path
from typing import Any, Dict, List, Optional

from core.types import HealthModule

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config.toml"

DEFAULTS: Dict[str, Any] = {
    "app": {
        "title": "Liver Cirrhosis Prediction System",
        "analysis_delay_seconds": 2.0,
    },
    "logging": {"level": "INFO", "file": ""},
    "modules": {"cirrhosis": {"enabled": True, "order": 1}},
}


def _merge(base: Dict[str, Any], over: Dict[str, Any]) -> Dict[str, Any]:
    out = deepcopy(base)
    for k, v in over.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _merge(out[k], v)
        else:
            out[k] = v
    return out


def config_path() -> Path:
    return Path(os.getenv("CIRRHOSIS_CONFIG", str(DEFAULT_CONFIG_PATH)))


def load_config(path: Optional[Path] = None) -> Dict[str, Any]:
    path = Path(path) if path else config_path()
    if not path.exists():
        return deepcopy(DEFAULTS)
    with open(path, "rb") as f:
        cfg = tomllib.load(f)
    return _merge(DEFAULTS, cfg)


def load_enabled_modules(cfg: Optional[Dict[str, Any]] = None) -> List[HealthModule]:
    cfg = cfg if cfg is not None else load_config()
    mods = []
    mod_cfg = cfg.get("modules", {})
    ordered = sorted(((m, v.get("order", 999)) for m, v in mod_cfg.items() if v.get("enabled", True)), key=lambda x: x[1])
    for name, _ in ordered:
        mod = import_module(f"modules.{name}.{name}")
        mods.append(mod)
    return mods
