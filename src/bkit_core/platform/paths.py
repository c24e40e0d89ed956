"""Resolve directories announced by the host tool."""

import logging
from collections.abc import Mapping
from pathlib import Path

from bkit_core.platform.base import (
    CLAUDE_PLUGIN_ROOT,
    CLAUDE_PROJECT_DIR,
    GEMINI_EXTENSION_PATH,
    GEMINI_PROJECT_DIR,
    Platform,
)
from bkit_core.platform.detection import detect_platform, read_var

logger = logging.getLogger(__name__)

_PROJECT_DIR_VARS = {
    Platform.GEMINI: GEMINI_PROJECT_DIR,
    Platform.CLAUDE: CLAUDE_PROJECT_DIR,
}

_PLUGIN_ROOT_VARS = {
    Platform.GEMINI: GEMINI_EXTENSION_PATH,
    Platform.CLAUDE: CLAUDE_PLUGIN_ROOT,
}


def get_project_dir(
    env: Mapping[str, str] | None = None, cwd: Path | None = None
) -> Path | None:
    """Get the project directory for the detected host tool.

    Priority:
        1. GEMINI_PROJECT_DIR (Gemini CLI)
        2. CLAUDE_PROJECT_DIR (Claude Code)
        3. cwd, or the current working directory

    Args:
        env: Environment snapshot. Defaults to ``os.environ``.
        cwd: Fallback directory. Defaults to ``Path.cwd()``.

    Returns:
        Path to the project root, or None if the current working
        directory no longer exists.
    """
    var = _PROJECT_DIR_VARS.get(detect_platform(env))
    if var is not None:
        value = read_var(var, env)
        if value is not None:
            return Path(value)
    if cwd is not None:
        return cwd
    try:
        return Path.cwd()
    except OSError as e:
        logger.warning("Cannot resolve current working directory: %s", e)
        return None


def get_plugin_root(env: Mapping[str, str] | None = None) -> Path | None:
    """Get the directory bkit was installed into by the host tool.

    Args:
        env: Environment snapshot. Defaults to ``os.environ``.

    Returns:
        The extension/plugin root, or None outside a known host tool.
    """
    var = _PLUGIN_ROOT_VARS.get(detect_platform(env))
    if var is None:
        return None
    value = read_var(var, env)
    return Path(value) if value is not None else None
