"""Helpers for a cloud-storage shell: arguments, hashtable, write cache, local files, error messages, JSON."""

__version__ = "0.3.1"