"""Molo: a PIN-gated personal diary backend and client."""

__version__ = "0.1.0"
