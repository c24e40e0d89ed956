"""Platform identities and the environment variables that announce them."""

from enum import Enum


class Platform(str, Enum):
    """Host tool that launched the current process."""

    GEMINI = "gemini"
    CLAUDE = "claude"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value


GEMINI_PROJECT_DIR = "GEMINI_PROJECT_DIR"
GEMINI_EXTENSION_PATH = "GEMINI_EXTENSION_PATH"
CLAUDE_PROJECT_DIR = "CLAUDE_PROJECT_DIR"
CLAUDE_PLUGIN_ROOT = "CLAUDE_PLUGIN_ROOT"
BKIT_DEBUG = "BKIT_DEBUG"

# Checked in order; the first variable with a non-blank value wins.
PLATFORM_INDICATORS: tuple[tuple[str, Platform], ...] = (
    (GEMINI_PROJECT_DIR, Platform.GEMINI),
    (GEMINI_EXTENSION_PATH, Platform.GEMINI),
    (CLAUDE_PROJECT_DIR, Platform.CLAUDE),
)
