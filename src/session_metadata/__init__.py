"""Attach JSON metadata to host-managed sessions and annotate shell commands."""

__version__ = "0.1.0"
