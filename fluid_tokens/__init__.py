"""Fluid type, spacing and gap tokens rendered as CSS clamp() declarations."""

__version__ = "0.1.0"
