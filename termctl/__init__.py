"""Terminal control commands as ANSI escape sequences, with key, mouse and event types."""

__version__ = "0.1.0"
__all__ = ["command", "cursor", "keys", "event"]