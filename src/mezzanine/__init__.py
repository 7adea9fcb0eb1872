"""Parametric mezzanine platform configurator."""

__version__ = "0.1.0"
