# =====================================================================
# File: tokargs_pkg/core/config.py
# Parser policy and demo program configuration (YAML file + defaults)
# =====================================================================
from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .errors import ConfigError
from ..utils.constants import AFTER_DASH_POLICIES, AFTER_DASH_STOP


@dataclass(frozen=True)
class ParserConfig:
    after_double_dash: str = AFTER_DASH_STOP

    def __post_init__(self):
        if self.after_double_dash not in AFTER_DASH_POLICIES:
            raise ConfigError(
                f"after_double_dash must be one of {', '.join(AFTER_DASH_POLICIES)}, "
                f"got {self.after_double_dash!r}"
            )


@dataclass
class AppConfig:
    greeting: str = "Hello"
    default_name: str = "world"
    count: int = 1
    shout: bool = False
    parser: ParserConfig = field(default_factory=ParserConfig)
    source: Optional[Path] = None


# key -> accepted type
_KEYS: Dict[str, type] = {
    "greeting": str,
    "default_name": str,
    "count": int,
    "shout": bool,
    "after_double_dash": str,
}


def _check(path: Path, key: str, value: Any) -> Any:
    want = _KEYS[key]
    # bool is an int subclass; "count: yes" must not pass as 1
    if not isinstance(value, want) or (want is int and isinstance(value, bool)):
        raise ConfigError(f"{path}: {key} must be {want.__name__}, got {type(value).__name__}")
    if key == "count" and value < 0:
        raise ConfigError(f"{path}: count must not be negative")
    return value


def load_config(path: Optional[Path] = None) -> AppConfig:
    """Read configuration from a YAML mapping; no path means built-in defaults."""
    if path is None:
        return AppConfig()

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"cannot read {path}: {exc.strerror or exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML in {path}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping at top level")

    unknown = sorted(str(k) for k in data if k not in _KEYS)
    if unknown:
        raise ConfigError(f"{path}: unknown key(s): {', '.join(unknown)}")

    values = {k: _check(path, k, v) for k, v in data.items()}
    try:
        parser = ParserConfig(values.pop("after_double_dash", AFTER_DASH_STOP))
    except ConfigError as exc:
        raise ConfigError(f"{path}: {exc}") from exc
    return AppConfig(parser=parser, source=path, **values)
