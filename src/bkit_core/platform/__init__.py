"""Platform detection for the host tool running bkit."""

from bkit_core.platform.base import Platform
from bkit_core.platform.context import PlatformContext
from bkit_core.platform.detection import (
    WATCHED_VARIABLES,
    detect_platform,
    get_platform_constant,
    is_claude_code,
    is_debug_enabled,
    is_gemini_cli,
)
from bkit_core.platform.paths import get_plugin_root, get_project_dir

__all__ = [
    "Platform",
    "PlatformContext",
    "WATCHED_VARIABLES",
    "detect_platform",
    "get_platform_constant",
    "get_plugin_root",
    "get_project_dir",
    "is_claude_code",
    "is_debug_enabled",
    "is_gemini_cli",
]
