"""Bolt Package Manager: manifest handling and compiler front-end."""

__version__ = "0.1.0"
