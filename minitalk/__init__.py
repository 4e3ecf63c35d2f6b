"""Signal-based bit sender and signal-catching receiver, with character, string, conversion, formatting and line-reading helpers."""

__version__ = "0.1.0"

__all__ = ["client", "conversions", "ctype", "lines", "printf", "server", "strings"]