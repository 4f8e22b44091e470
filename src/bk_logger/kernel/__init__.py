"""Kernel – shared primitives with no third-party dependencies."""
