"""Documentation generator for React/TypeScript applications."""

__version__ = "1.0.0"
