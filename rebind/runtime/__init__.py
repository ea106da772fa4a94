"""Rebind runtime support modules."""

from rebind.runtime.config import RuntimeConfig, get_runtime_config, load_runtime_config
from rebind.runtime.errors import (
    InvalidBindingError,
    InvalidMouseModeError,
    InvalidViewportError,
    RebindConfigError,
)
from rebind.runtime.logging import configure_rebind_logging, setup_rebind_logging

__all__ = [
    "InvalidBindingError",
    "InvalidMouseModeError",
    "InvalidViewportError",
    "RebindConfigError",
    "RuntimeConfig",
    "configure_rebind_logging",
    "get_runtime_config",
    "load_runtime_config",
    "setup_rebind_logging",
]
