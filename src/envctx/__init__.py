"""
envctx - file-based key/value configuration with ${VAR} interpolation.

Load KEY=VALUE files into an explicit, thread-safe context store and look
values up by key, instead of relying on OS-level environment variables.
"""

__version__ = "0.1.0"

from envctx.config import Settings, load_settings
from envctx.core import (
    ContextStore,
    Entry,
    apply_to_environ,
    create_store,
    load,
    load_many,
    resolve,
)
from envctx.exceptions import (
    AllocationError,
    ConfigurationError,
    EnvctxError,
    FileOpenError,
    MalformedLineError,
)
from envctx.utils.logging import get_logger, setup_logging, setup_logging_from_config

__all__ = [
    # Store and loading
    "ContextStore",
    "Entry",
    "load",
    "load_many",
    "create_store",
    "resolve",
    "apply_to_environ",
    # Settings
    "Settings",
    "load_settings",
    # Logging
    "setup_logging",
    "setup_logging_from_config",
    "get_logger",
    # Exceptions
    "EnvctxError",
    "ConfigurationError",
    "FileOpenError",
    "AllocationError",
    "MalformedLineError",
]
