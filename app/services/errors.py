"""
Landscape service errors
app/services/errors.py
"""

from __future__ import annotations


class NoLandscapeDataError(RuntimeError):
    """Every expected input for an analysis domain is missing or empty."""

    def __init__(self, domain: str, message: str):
        self.domain = domain
        self.message = message
        super().__init__(message)
