"""Utilities for esbridge.

Includes:
- Configuration loading with env var substitution
- Structured logging
- Resource string helpers
"""

from .config_loader import load_yaml_with_env
from .logging import StructuredLogger, configure_logging, logger
from .strings import has_text, is_lower_case, sanitize_resource

__all__ = [
    "load_yaml_with_env",
    "StructuredLogger",
    "configure_logging",
    "logger",
    "has_text",
    "is_lower_case",
    "sanitize_resource",
]
