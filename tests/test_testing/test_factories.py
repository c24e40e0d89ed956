"""Tests for the bkit_core.testing factories."""

from pathlib import Path

from bkit_core.platform import Platform
from bkit_core.testing import make_context, make_env


class TestMakeEnv:
    """make_env() defaults and overrides."""

    def test_unknown_is_empty(self) -> None:
        assert make_env() == {}

    def test_gemini_defaults(self) -> None:
        env = make_env(Platform.GEMINI)
        assert env["GEMINI_PROJECT_DIR"] == "/tmp/test-project"
        assert "GEMINI_EXTENSION_PATH" in env

    def test_accepts_string_platform(self) -> None:
        assert "CLAUDE_PROJECT_DIR" in make_env("claude")

    def test_override_adds_and_removes(self) -> None:
        env = make_env(Platform.GEMINI, GEMINI_EXTENSION_PATH=None, BKIT_DEBUG="1")
        assert "GEMINI_EXTENSION_PATH" not in env
        assert env["BKIT_DEBUG"] == "1"

    def test_returns_fresh_dict(self) -> None:
        make_env(Platform.CLAUDE)["CLAUDE_PROJECT_DIR"] = "/changed"
        assert make_env(Platform.CLAUDE)["CLAUDE_PROJECT_DIR"] == "/tmp/test-project"


class TestMakeContext:
    """make_context() builds a consistent snapshot."""

    def test_claude_context(self) -> None:
        context = make_context(Platform.CLAUDE)
        assert context.platform is Platform.CLAUDE
        assert context.is_claude_code is True
        assert context.plugin_root == Path("/tmp/test-plugin")

    def test_unknown_uses_cwd(self) -> None:
        context = make_context(cwd=Path("/somewhere"))
        assert context.project_dir == Path("/somewhere")
