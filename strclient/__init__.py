"""Client for requesting and printing strings from a TCP string server."""

__version__ = "0.1.0"
__all__ = ["__version__"]