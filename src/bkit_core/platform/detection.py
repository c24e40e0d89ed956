"""Classify the running host tool from environment variables."""

import logging
import os
from collections.abc import Mapping
from functools import lru_cache

from bkit_core.platform.base import (
    BKIT_DEBUG,
    CLAUDE_PROJECT_DIR,
    GEMINI_EXTENSION_PATH,
    GEMINI_PROJECT_DIR,
    PLATFORM_INDICATORS,
    Platform,
)

logger = logging.getLogger(__name__)

# Variables reported by `bkit debug`, in display order.
WATCHED_VARIABLES: tuple[str, ...] = (
    GEMINI_PROJECT_DIR,
    GEMINI_EXTENSION_PATH,
    CLAUDE_PROJECT_DIR,
    BKIT_DEBUG,
)

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def read_var(name: str, env: Mapping[str, str] | None = None) -> str | None:
    """Return a variable's stripped value, or None if unset or blank.

    Args:
        name: Environment variable name.
        env: Environment snapshot. Defaults to ``os.environ``.

    Returns:
        The non-blank value, or None.
    """
    if env is None:
        env = os.environ
    value = env.get(name)
    if value is None:
        return None
    value = value.strip()
    return value or None


def detect_platform(env: Mapping[str, str] | None = None) -> Platform:
    """Detect which host tool launched this process.

    Checks GEMINI_PROJECT_DIR, GEMINI_EXTENSION_PATH and CLAUDE_PROJECT_DIR
    in that order and returns the platform of the first one that is set.

    Args:
        env: Environment snapshot. Defaults to ``os.environ``.

    Returns:
        The detected Platform, or Platform.UNKNOWN if nothing matched.
    """
    for name, platform in PLATFORM_INDICATORS:
        if read_var(name, env) is not None:
            logger.debug("Detected platform %s from %s", platform.value, name)
            return platform
    return Platform.UNKNOWN


def is_gemini_cli(env: Mapping[str, str] | None = None) -> bool:
    """Return True when Gemini CLI launched this process.

    Args:
        env: Environment snapshot. Defaults to ``os.environ``.
    """
    return (
        read_var(GEMINI_PROJECT_DIR, env) is not None
        or read_var(GEMINI_EXTENSION_PATH, env) is not None
    )


def is_claude_code(env: Mapping[str, str] | None = None) -> bool:
    """Return True when Claude Code launched this process."""
    return detect_platform(env) is Platform.CLAUDE


def is_debug_enabled(env: Mapping[str, str] | None = None) -> bool:
    """Return True when BKIT_DEBUG holds a truthy value like '1' or 'true'."""
    value = read_var(BKIT_DEBUG, env)
    return value is not None and value.lower() in _TRUTHY


@lru_cache(maxsize=1)
def get_platform_constant() -> Platform:
    """Return the platform detected from the process environment.

    Detection runs on the first call only; later calls return the same
    value for the life of the process.
    """
    return detect_platform(os.environ)
