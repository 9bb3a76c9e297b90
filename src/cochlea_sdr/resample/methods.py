"""Cubic-spline resampling."""

from __future__ import annotations

import math

import numpy as np
from scipy.interpolate import CubicSpline

from ..audio import Waveform
from ..errors import InsufficientSamplesError, ensure_positive


def resampled_length(num_samples: int, input_rate: float, target_rate: float) -> int:
    """Return floor(num_samples * target_rate / input_rate).

    Uses integer arithmetic when both rates are integral so the result is exact.
    """
    if float(input_rate).is_integer() and float(target_rate).is_integer():
        return (num_samples * int(target_rate)) // int(input_rate)
    return int(math.floor(num_samples * target_rate / input_rate))


def resample_waveform(samples, input_rate: float, target_rate: float) -> np.ndarray:
    """Resample a signal with a natural cubic spline over integer sample positions.

    The spline is evaluated at t * input_rate / target_rate for
    t in 0..new_length-1, where new_length = floor(len * target_rate / input_rate).
    Query times past the last knot follow the boundary polynomial.

    Parameters
    ----------
    samples : array-like
        1-D amplitude samples.
    input_rate : float
        Source sample rate in Hz.
    target_rate : float
        Target sample rate in Hz.

    Raises
    ------
    InvalidConfigurationError
        If either rate is not positive.
    InsufficientSamplesError
        If fewer than 2 samples are given.
    """
    ensure_positive(input_rate, "input_rate")
    ensure_positive(target_rate, "target_rate")
    x = np.asarray(samples, dtype=np.float64)
    if x.ndim != 1:
        raise ValueError(f"samples must be 1-D, got shape {x.shape}")
    if x.size < 2:
        raise InsufficientSamplesError(
            f"Need at least 2 samples to interpolate, got {x.size}"
        )
    if input_rate == target_rate:
        return x.copy()

    new_length = resampled_length(x.size, input_rate, target_rate)
    spline = CubicSpline(np.arange(x.size, dtype=np.float64), x, bc_type="natural")
    query = np.arange(new_length, dtype=np.float64) * (input_rate / target_rate)
    return spline(query)


def resample(waveform: Waveform, target_rate: float) -> Waveform:
    """Return a new Waveform at target_rate; the input is left untouched."""
    samples = resample_waveform(waveform.samples, waveform.sample_rate, target_rate)
    return Waveform(samples=samples, sample_rate=float(target_rate))
