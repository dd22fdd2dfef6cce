"""Email addresses, SMTP envelopes, their serialization, and async file access."""

__version__ = "0.1.0"

__all__ = ["address", "envelope", "errors", "executor", "serialization"]