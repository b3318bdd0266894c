"""File-manager preprocessor that expands use and link directives."""

__version__ = "0.1.0"