from __future__ import annotations


class NoiseError(Exception):
    """Base class for recoverable noise-library errors."""


class InvalidParameterError(NoiseError, ValueError):
    """Raised when a caller passes a malformed parameter."""


class NoiseOutOfMemoryError(NoiseError, MemoryError):
    """Raised when a raster buffer cannot be allocated."""
