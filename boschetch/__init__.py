"""Bosch deep reactive ion etching: tapering parameters and etch distributions."""

__version__ = "0.1.0"

__all__ = ["__version__"]