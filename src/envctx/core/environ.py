"""
Bridge from a context store to the process environment.
"""

import os
from collections.abc import MutableMapping

from envctx.core.store import ContextStore
from envctx.utils.logging import get_logger

logger = get_logger("envctx.environ")


def apply_to_environ(
    store: ContextStore,
    environ: MutableMapping[str, str] | None = None,
    override: bool = False,
) -> list[str]:
    """
    Copy the store's first-wins view into an environment mapping.

    Variables already present in the mapping are kept unless ``override``
    is set, so the real environment takes precedence by default.

    Args:
        store: Loaded store
        environ: Target mapping (default: os.environ)
        override: Replace variables that are already set

    Returns:
        Keys that were written
    """
    if environ is None:
        environ = os.environ

    written = []
    for key, value in store.as_dict().items():
        if not override and key in environ:
            continue
        environ[key] = value
        written.append(key)

    logger.debug(f"Applied {len(written)} variables to environment")
    return written
