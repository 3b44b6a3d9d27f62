"""mcdev-copado — helper layer for running SFMC DevTools inside Copado functions."""

__version__ = "0.1.0"
