"""Result codes, log records, content model, request configuration and command-line helpers for a content download service client."""

__version__ = "0.1.0"

__all__ = ["config", "log", "models", "result", "tool"]