"""Collects module descriptors into a catalog with index files and a report."""

__version__ = "0.1.0"
