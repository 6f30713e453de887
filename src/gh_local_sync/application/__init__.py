"""Workflows orchestrating discovery, selection, batch execution and retries."""

from .workflows import clone_missing, pull_all

__all__ = [
    "clone_missing",
    "pull_all",
]
