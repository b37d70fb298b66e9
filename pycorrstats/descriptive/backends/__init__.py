"""Compute backends for descriptive statistics."""

from pycorrstats.descriptive.backends.cpu import CPUDescriptiveBackend

__all__ = ["CPUDescriptiveBackend"]
