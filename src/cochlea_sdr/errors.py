"""Encoding-specific exception types for the project."""

from __future__ import annotations


class EncodingError(Exception):
    """Base exception for failures inside the encoding core."""


class InvalidConfigurationError(EncodingError, ValueError):
    """Raised when an encoder or transform is constructed with invalid parameters."""


class InsufficientSamplesError(EncodingError):
    """Raised when a waveform is too short to interpolate."""


class DegenerateStatisticsError(EncodingError):
    """Raised when a feature matrix has no variance to normalize against."""


def ensure_positive(value: float, name: str) -> float:
    """Raise InvalidConfigurationError unless value is strictly positive.

    Args:
        value: Parameter value to check.
        name: Parameter name used in the error message.

    Returns:
        The value unchanged.

    Raises:
        InvalidConfigurationError: If value <= 0.
    """
    if not value > 0:
        raise InvalidConfigurationError(f"{name} must be positive, got {value}")
    return value
