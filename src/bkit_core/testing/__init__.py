"""Shared test utilities and factories."""

from bkit_core.testing.factories import make_context, make_env

__all__ = [
    "make_context",
    "make_env",
]
