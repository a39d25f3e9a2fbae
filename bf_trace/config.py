import json
import os
from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping

import yaml

EXECUTION_LIMIT_ENV = "BF_EXECUTION_LIMIT"
MEMORY_LIMIT_ENV = "BF_MEMORY_LIMIT"


@dataclass
class EngineConfig:
    """Resource ceilings for one run. 0 means unbounded."""
    execution_limit: int = 0  # max instructions executed
    memory_limit: int = 0  # max tape cells allocated

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"{f.name} must be an integer, got {value!r}")
            if value < 0:
                raise ValueError(f"{f.name} must be non-negative, got {value}")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "EngineConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown config keys: {unknown}. Expected some of {sorted(known)}")
        values = {}
        for k, v in data.items():
            if isinstance(v, bool) or not isinstance(v, int):
                raise ValueError(f"{k} must be a whole number, got {v!r}")
            values[k] = v
        return cls(**values)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] = None) -> "EngineConfig":
        """Read limits from BF_EXECUTION_LIMIT / BF_MEMORY_LIMIT."""
        environ = os.environ if environ is None else environ
        try:
            return cls(
                execution_limit=int(environ.get(EXECUTION_LIMIT_ENV, "0") or 0),
                memory_limit=int(environ.get(MEMORY_LIMIT_ENV, "0") or 0),
            )
        except ValueError as e:
            raise ValueError(f"Invalid limit in environment: {e}") from e

    def merged(self, **overrides) -> "EngineConfig":
        """Copy with every non-None override applied."""
        values = {f.name: getattr(self, f.name) for f in fields(self)}
        values.update({k: v for k, v in overrides.items() if v is not None})
        return EngineConfig(**values)


def _load_config(path: str) -> Dict[str, Any]:
    with open(path, 'r') as f:
        if path.endswith(('.yml', '.yaml')):
            return yaml.safe_load(f) or {}
        return json.load(f)


def load_config(path: str, base: EngineConfig = None) -> EngineConfig:
    """Load limits from a YAML (.yml/.yaml) or JSON file.

    Accepts either the keys at top level or nested under ``limits``. Keys the
    file leaves out keep their value from ``base``.
    """
    try:
        data = _load_config(path)
    except yaml.YAMLError as e:
        raise ValueError(f"Failed to parse config file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")
    if "limits" in data and isinstance(data["limits"], dict):
        data = data["limits"]
    config = EngineConfig.from_mapping(data)
    if base is None:
        return config
    return base.merged(**{k: getattr(config, k) for k in data})
