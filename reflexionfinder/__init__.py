"""Find URL query parameters reflected in web page responses."""

__version__ = "1.0.0"
__all__ = ["__version__"]