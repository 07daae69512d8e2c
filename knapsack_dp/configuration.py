"""Typed settings for knapsack_dp loaded from YAML and environment overrides."""
from __future__ import annotations

import json
import os
from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, Mapping, MutableMapping, Optional, Union

import yaml
from pydantic import BaseModel, Field

from .storage.basic.sparse_matrix import DEFAULT_SPARSE_PATH

ENV_PREFIX = "KNAPSACK_"
ENV_CONFIG_FILE_KEY = "KNAPSACK_CONFIG_FILE"


class LoggingConfig(BaseModel):
    level: str = "INFO"
    json_logs: bool = False
    log_dir: Optional[str] = None
    capture_warnings: bool = True
    app_name: str = "knapsack-dp"


class SparseConfig(BaseModel):
    path: str = DEFAULT_SPARSE_PATH


class ManagerConfig(BaseModel):
    max_workers: int = Field(default=4, ge=1)


class Settings(BaseModel):
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    sparse: SparseConfig = Field(default_factory=SparseConfig)
    manager: ManagerConfig = Field(default_factory=ManagerConfig)


def load_settings(
    path: Optional[Union[str, Path]] = None,
    *,
    env_prefix: str = ENV_PREFIX,
    environ: Optional[Mapping[str, str]] = None,
) -> Settings:
    """Build :class:`Settings` from an optional YAML file plus env overrides.

    The file defaults to ``$KNAPSACK_CONFIG_FILE`` when ``path`` is omitted.
    Environment keys use ``<prefix><section>__<key>``; for example
    ``KNAPSACK_LOGGING__LEVEL=DEBUG`` becomes ``{"logging": {"level": "DEBUG"}}``.
    """

    environ = os.environ if environ is None else environ
    if path is None:
        path = environ.get(ENV_CONFIG_FILE_KEY)

    payload: Dict[str, Any] = {}
    if path is not None:
        payload = _load_yaml(Path(path))
    payload = _deep_merge(payload, _load_env(environ, env_prefix))
    return Settings.model_validate(payload)


def _load_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Config path {path} not found")
    with path.open("r", encoding="utf-8") as handle:
        loaded = yaml.safe_load(handle) or {}
    if not isinstance(loaded, dict):
        raise ValueError(f"YAML config at {path} must produce a dictionary")
    return loaded


def _load_env(environ: Mapping[str, str], prefix: str, separator: str = "__") -> Dict[str, Any]:
    payload: Dict[str, Any] = {}
    for key, raw_value in environ.items():
        if not key.startswith(prefix) or key == ENV_CONFIG_FILE_KEY:
            continue
        parts = key[len(prefix):].lower().split(separator)
        cursor = payload
        for part in parts[:-1]:
            cursor = cursor.setdefault(part, {})
        cursor[parts[-1]] = _coerce_env_value(raw_value)
    return payload


def _coerce_env_value(value: str) -> Any:
    # 标量保持字符串，由 pydantic 按字段类型转换（"8" -> int, "true" -> bool）
    if value.lstrip().startswith(("[", "{")):
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            return value
    return value


def _deep_merge(base: Dict[str, Any], incoming: Mapping[str, Any]) -> Dict[str, Any]:
    result = deepcopy(base)
    for key, value in incoming.items():
        if (
            key in result
            and isinstance(result[key], MutableMapping)
            and isinstance(value, Mapping)
        ):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = deepcopy(value)
    return result
