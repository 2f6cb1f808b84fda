"""Parameter Sanitizer package for turning extracted arguments into filters."""

from .sanitizer import is_empty_value, sanitize_parameters

__all__ = ["is_empty_value", "sanitize_parameters"]
