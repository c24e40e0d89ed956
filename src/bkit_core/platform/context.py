"""Immutable snapshot of the detected runtime environment."""

import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from bkit_core.platform.base import Platform
from bkit_core.platform.detection import (
    WATCHED_VARIABLES,
    detect_platform,
    is_claude_code,
    is_debug_enabled,
    is_gemini_cli,
)
from bkit_core.platform.paths import get_plugin_root, get_project_dir


class PlatformContext(BaseModel):
    """Everything bkit knows about its host, captured once at startup.

    Args:
        platform: Detected host tool.
        is_gemini_cli: Whether Gemini CLI variables are present.
        is_claude_code: Whether Claude Code was detected.
        project_dir: Project root announced by the host, or the cwd.
            None when the cwd has been deleted.
        plugin_root: Extension/plugin directory, if announced.
        debug: Whether BKIT_DEBUG is enabled.
        variables: (name, raw value) pairs for the watched variables, in
            display order. Unset variables have the value None.
    """

    model_config = ConfigDict(frozen=True)

    platform: Platform
    is_gemini_cli: bool
    is_claude_code: bool
    project_dir: Path | None = None
    plugin_root: Path | None = None
    debug: bool = False
    variables: tuple[tuple[str, str | None], ...] = ()

    @classmethod
    def from_env(
        cls, env: Mapping[str, str] | None = None, cwd: Path | None = None
    ) -> "PlatformContext":
        """Build a context from an environment snapshot.

        Args:
            env: Environment snapshot. Defaults to ``os.environ``.
            cwd: Fallback project directory. Defaults to ``Path.cwd()``.

        Returns:
            A frozen PlatformContext.
        """
        if env is None:
            env = dict(os.environ)
        return cls(
            platform=detect_platform(env),
            is_gemini_cli=is_gemini_cli(env),
            is_claude_code=is_claude_code(env),
            project_dir=get_project_dir(env, cwd),
            plugin_root=get_plugin_root(env),
            debug=is_debug_enabled(env),
            variables=tuple((name, env.get(name)) for name in WATCHED_VARIABLES),
        )
