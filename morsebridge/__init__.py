"""Morse code conversion for Cyrillic text, with a small WSGI upload service."""

__version__ = "0.1.0"
__all__ = ["handlers", "morse", "server", "service"]