"""Host tool detection for bkit hooks and scripts."""

__version__ = "0.1.0"
