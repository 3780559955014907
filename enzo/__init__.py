"""Procedural geometry engine core: attributes, geometry, parameter templates, operator definitions and an operator registry."""

__version__ = "0.1.0"