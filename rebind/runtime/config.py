"""Centralized runtime configuration sourced from environment."""

from __future__ import annotations

import os
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Mapping

DEFAULT_VIEWPORT: tuple[int, int] = (800, 600)


@dataclass(frozen=True, slots=True)
class RuntimeInputConfig:
    trace_enabled: bool


@dataclass(frozen=True, slots=True)
class RuntimeMouseConfig:
    viewport_width: int
    viewport_height: int
    mode_name: str


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    log_level: str
    input: RuntimeInputConfig
    mouse: RuntimeMouseConfig


_RUNTIME_CONFIG: ContextVar[RuntimeConfig | None] = ContextVar("rebind_runtime_config", default=None)


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _flag(name: str, default: bool, *, env: Mapping[str, str] | None = None) -> bool:
    raw = _raw(name, env=env)
    if raw is None:
        return bool(default)
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return bool(default)


def _text(name: str, default: str, *, env: Mapping[str, str] | None = None) -> str:
    raw = _raw(name, env=env)
    if raw is None:
        return str(default)
    value = raw.strip()
    return value if value else str(default)


def _resolution(raw: str) -> tuple[int, int] | None:
    value = str(raw).strip().lower()
    if not value:
        return None
    normalized = value.replace(" ", "")
    for sep in ("x", ",", ":"):
        if sep in normalized:
            left, right = normalized.split(sep, 1)
            try:
                width = int(left)
                height = int(right)
            except ValueError:
                return None
            if width <= 0 or height <= 0:
                return None
            return (width, height)
    return None


def _normalize_mouse_mode(raw: str, fallback: str) -> str:
    value = str(raw).strip().lower()
    if value not in {"absolute", "relative"}:
        return str(fallback)
    return value


def resolve_log_level_name(default: str = "INFO", *, env: Mapping[str, str] | None = None) -> str:
    """Resolve log level with the package-prefixed override."""
    value = _raw("REBIND_LOG_LEVEL", env=env)
    if value is None:
        value = _raw("LOG_LEVEL", env=env)
    if value is None or not value.strip():
        value = default
    return value.strip().upper()


def load_runtime_config(*, env: Mapping[str, str] | None = None) -> RuntimeConfig:
    viewport = _resolution(_text("REBIND_VIEWPORT", "", env=env)) or DEFAULT_VIEWPORT
    return RuntimeConfig(
        log_level=resolve_log_level_name(env=env),
        input=RuntimeInputConfig(
            trace_enabled=_flag("REBIND_INPUT_TRACE_ENABLED", False, env=env),
        ),
        mouse=RuntimeMouseConfig(
            viewport_width=viewport[0],
            viewport_height=viewport[1],
            mode_name=_normalize_mouse_mode(
                _text("REBIND_MOUSE_MODE", "absolute", env=env), "absolute"
            ),
        ),
    )


def initialize_runtime_config(*, env: Mapping[str, str] | None = None) -> RuntimeConfig:
    config = load_runtime_config(env=env)
    _RUNTIME_CONFIG.set(config)
    return config


def set_runtime_config(config: RuntimeConfig) -> RuntimeConfig:
    _RUNTIME_CONFIG.set(config)
    return config


def reset_runtime_config() -> None:
    _RUNTIME_CONFIG.set(None)


def get_runtime_config() -> RuntimeConfig:
    config = _RUNTIME_CONFIG.get()
    if config is not None:
        return config
    return initialize_runtime_config()


__all__ = [
    "DEFAULT_VIEWPORT",
    "RuntimeConfig",
    "RuntimeInputConfig",
    "RuntimeMouseConfig",
    "get_runtime_config",
    "initialize_runtime_config",
    "load_runtime_config",
    "reset_runtime_config",
    "resolve_log_level_name",
    "set_runtime_config",
]
