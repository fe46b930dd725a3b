"""Exceptions raised by curve construction and reparameterization."""

from __future__ import annotations


class CurveError(Exception):
    """Base exception for curve-related errors."""


class DegenerateCurveError(CurveError):
    """Raised when a curve has no length where a measurable length is required."""
