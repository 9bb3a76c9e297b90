"""Waveform resampling package."""

from .methods import resample, resample_waveform, resampled_length

__all__ = [
    "resample",
    "resample_waveform",
    "resampled_length",
]
