"""Deployment parity checks for the galatadergisi.org web bundles."""

__version__ = "0.1.0"
