"""YAML config loader with environment overrides and dotted-key lookup."""

import hashlib
import logging
import os
from pathlib import Path
from typing import Any

import yaml

from cwaproxy.config.schema import ServiceConfig

# env var -> (section, field)
ENV_OVERRIDES = {
    "CWA_API_KEY": ("cwa", "api_key"),
    "PORT": ("server", "port"),
    "LOG_LEVEL": ("logging", "level"),
}

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def load_config(
    path: str | Path | None = None, environ: dict[str, str] | None = None
) -> ServiceConfig:
    """Load and validate config from a YAML file, then apply env overrides.

    With no path, starts from the schema defaults. The credential is not
    checked here; requests report it missing before calling upstream.
    """
    raw: dict[str, Any] = {}
    if path is not None:
        with open(Path(path), encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
        # "cwa:" with no body parses as None
        raw = {k: v for k, v in raw.items() if v is not None}

    env = os.environ if environ is None else environ
    for var, (section, field) in ENV_OVERRIDES.items():
        value = env.get(var)
        if value:
            raw.setdefault(section, {})[field] = value

    return ServiceConfig(**raw)


def config_hash(config: ServiceConfig) -> str:
    """Compute a deterministic SHA256 hash of the config."""
    data = config.model_dump_json(indent=None)
    return hashlib.sha256(data.encode()).hexdigest()[:16]


def get_config_value(config: ServiceConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'cwa.timeout'."""
    parts = dotted_key.split(".")
    obj: Any = config
    for part in parts:
        if isinstance(obj, list):
            obj = obj[int(part)]
        elif hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def masked_config(config: ServiceConfig) -> ServiceConfig:
    """Copy of the config with the API credential masked."""
    if not config.cwa.api_key:
        return config
    return config.model_copy(
        update={"cwa": config.cwa.model_copy(update={"api_key": "***"})}
    )


def masked_dump(config: ServiceConfig) -> str:
    return masked_config(config).model_dump_json(indent=2)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )
